"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

from sqlalchemy import func, insert, select, update

from catalogsync.adapters.sqlalchemy.tables import (
    connector_definition_table,
    connector_instance_table,
)
from catalogsync.domain.model import ConnectorDefinition, ConnectorInstance

if TYPE_CHECKING:
    from sqlalchemy import RowMapping
    from sqlalchemy.engine import CursorResult
    from sqlalchemy.orm import Session

    from catalogsync.domain.model import ConnectorKind


class ConnectorDefinitionNotFoundError(LookupError):
    """Raised when an update targets a definition that is not stored."""

    def __init__(self, kind: ConnectorKind, repository: str) -> None:
        self.kind = kind
        self.repository = repository
        super().__init__(f"No stored {kind} definition for {repository}")


class SqlAlchemyConnectorDefinitionRepository:
    """Connector definitions keyed by ``(kind, repository)``."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, entity: ConnectorDefinition) -> None:
        stmt = insert(connector_definition_table).values(**_definition_row(entity))
        self.session.execute(stmt)

    def update(self, entity: ConnectorDefinition) -> None:
        stmt = (
            update(connector_definition_table)
            .where(connector_definition_table.c.kind == entity.kind)
            .where(connector_definition_table.c.repository == entity.repository)
            .values(**_definition_row(entity))
        )
        result = cast("CursorResult[Any]", self.session.execute(stmt))
        if result.rowcount == 0:
            raise ConnectorDefinitionNotFoundError(entity.kind, entity.repository)

    def get(self, kind: ConnectorKind, repository: str) -> ConnectorDefinition | None:
        stmt = (
            select(connector_definition_table)
            .where(connector_definition_table.c.kind == kind)
            .where(connector_definition_table.c.repository == repository)
        )
        row = self.session.execute(stmt).mappings().one_or_none()
        return _definition_from_row(row) if row is not None else None

    def get_by_repository(self, kind: ConnectorKind) -> dict[str, ConnectorDefinition]:
        stmt = (
            select(connector_definition_table)
            .where(connector_definition_table.c.kind == kind)
            .order_by(connector_definition_table.c.repository)
        )
        rows = self.session.execute(stmt).mappings().all()
        return {row["repository"]: _definition_from_row(row) for row in rows}

    def count(self, kind: ConnectorKind | None = None) -> int:
        stmt = select(func.count()).select_from(connector_definition_table)
        if kind is not None:
            stmt = stmt.where(connector_definition_table.c.kind == kind)
        return self.session.execute(stmt).scalar_one()


class SqlAlchemyConnectorInstanceRepository:
    """Configured workloads; their repositories form the in-use set."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, entity: ConnectorInstance) -> None:
        stmt = insert(connector_instance_table).values(
            id=entity.id,
            kind=entity.kind,
            repository=entity.repository,
            name=entity.name,
        )
        self.session.execute(stmt)

    def repositories_in_use(self, kind: ConnectorKind) -> set[str]:
        stmt = (
            select(connector_instance_table.c.repository)
            .where(connector_instance_table.c.kind == kind)
            .distinct()
        )
        return set(self.session.execute(stmt).scalars().all())


def _definition_row(entity: ConnectorDefinition) -> dict[str, object]:
    return {
        "id": entity.definition_id,
        "kind": entity.kind,
        "repository": entity.repository,
        "name": entity.name,
        "version": entity.version,
        **entity.optional_values(),
    }


def _definition_from_row(row: RowMapping) -> ConnectorDefinition:
    return ConnectorDefinition(
        definition_id=row["id"],
        kind=row["kind"],
        repository=row["repository"],
        name=row["name"],
        version=row["version"],
        documentation_url=row["documentation_url"],
        icon=row["icon"],
        connector_type=row["connector_type"],
        release_stage=row["release_stage"],
        release_date=row["release_date"],
    )


if TYPE_CHECKING:
    from catalogsync.domain.ports.persistence import (
        ConnectorDefinitionRepository,
        ConnectorInstanceRepository,
    )

    _session_stub = cast("Session", object())
    _definition_repo: ConnectorDefinitionRepository = SqlAlchemyConnectorDefinitionRepository(
        _session_stub
    )
    _instance_repo: ConnectorInstanceRepository = SqlAlchemyConnectorInstanceRepository(
        _session_stub
    )
