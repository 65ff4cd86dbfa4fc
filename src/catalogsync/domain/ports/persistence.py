"""Ports for persisting connector catalogs."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from catalogsync.domain.model import ConnectorDefinition, ConnectorInstance

if TYPE_CHECKING:
    from catalogsync.domain.model import ConnectorKind


@runtime_checkable
class Repository[TEntity](Protocol):
    """Minimal repository contract for a persistent aggregate store."""

    def add(self, entity: TEntity) -> None: ...


@runtime_checkable
class ConnectorDefinitionWriter(Protocol):
    """Write capability consumed by the reconciliation applier."""

    def add(self, entity: ConnectorDefinition) -> None:
        """Insert a brand-new definition."""
        ...

    def update(self, entity: ConnectorDefinition) -> None:
        """Replace the stored record sharing ``entity``'s kind and repository."""
        ...


@runtime_checkable
class ConnectorDefinitionRepository(
    Repository[ConnectorDefinition], ConnectorDefinitionWriter, Protocol
):
    """Persistence contract for connector definitions, keyed by kind and repository."""

    def get(self, kind: ConnectorKind, repository: str) -> ConnectorDefinition | None: ...

    def get_by_repository(self, kind: ConnectorKind) -> dict[str, ConnectorDefinition]: ...

    def count(self, kind: ConnectorKind | None = None) -> int: ...


@runtime_checkable
class ConnectorInstanceRepository(Repository[ConnectorInstance], Protocol):
    """Persistence contract for configured connector workloads."""

    def repositories_in_use(self, kind: ConnectorKind) -> set[str]: ...
