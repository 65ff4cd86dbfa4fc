"""SQLAlchemy Core table metadata for connector catalogs."""

from __future__ import annotations

import uuid
from enum import StrEnum

from sqlalchemy import (
    Column,
    Date,
    Enum,
    Index,
    MetaData,
    String,
    Table,
    UniqueConstraint,
    Uuid,
)

from catalogsync.domain.model import ConnectorKind, ConnectorType, ReleaseStage

UUIDColumnType = Uuid[uuid.UUID]

metadata = MetaData(
    naming_convention={
        "ix": "ix_%(column_0_label)s",
        "uq": "uq_%(table_name)s_%(column_0_label)s",
        "ck": "ck_%(table_name)s_%(constraint_name)s",
        "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
        "pk": "pk_%(table_name)s",
    }
)


def _enum_column_type[TEnum: StrEnum](enum_cls: type[TEnum]) -> Enum:
    return Enum(
        enum_cls,
        native_enum=False,
        length=32,
        values_callable=lambda members: [member.value for member in members],
    )


connector_definition_table = Table(
    "connector_definition",
    metadata,
    Column("id", UUIDColumnType, primary_key=True),
    Column("kind", _enum_column_type(ConnectorKind), nullable=False),
    Column("repository", String(255), nullable=False),
    Column("name", String(255), nullable=False),
    Column("version", String(64), nullable=False),
    Column("documentation_url", String, nullable=True),
    Column("icon", String, nullable=True),
    Column("connector_type", _enum_column_type(ConnectorType), nullable=True),
    Column("release_stage", _enum_column_type(ReleaseStage), nullable=True),
    Column("release_date", Date, nullable=True),
    UniqueConstraint("kind", "repository", name="uq_connector_definition_kind_repository"),
)

connector_instance_table = Table(
    "connector_instance",
    metadata,
    Column("id", UUIDColumnType, primary_key=True),
    Column("kind", _enum_column_type(ConnectorKind), nullable=False),
    Column("repository", String(255), nullable=False),
    Column("name", String(255), nullable=False),
    Index("ix_connector_instance_kind_repository", "kind", "repository"),
)
