"""Create connector definition and instance tables.

Revision ID: 0001
Revises:
Create Date: 2026-10-18 00:00:00
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "connector_definition",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("kind", sa.String(length=32), nullable=False),
        sa.Column("repository", sa.String(length=255), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("version", sa.String(length=64), nullable=False),
        sa.Column("documentation_url", sa.String(), nullable=True),
        sa.Column("icon", sa.String(), nullable=True),
        sa.Column("connector_type", sa.String(length=32), nullable=True),
        sa.Column("release_stage", sa.String(length=32), nullable=True),
        sa.Column("release_date", sa.Date(), nullable=True),
        sa.PrimaryKeyConstraint("id", name="pk_connector_definition"),
        sa.UniqueConstraint(
            "kind", "repository", name="uq_connector_definition_kind_repository"
        ),
    )
    op.create_table(
        "connector_instance",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("kind", sa.String(length=32), nullable=False),
        sa.Column("repository", sa.String(length=255), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_connector_instance"),
    )
    op.create_index(
        "ix_connector_instance_kind_repository",
        "connector_instance",
        ["kind", "repository"],
    )


def downgrade() -> None:
    op.drop_index("ix_connector_instance_kind_repository", table_name="connector_instance")
    op.drop_table("connector_instance")
    op.drop_table("connector_definition")
