"""Errors raised before reconciliation issues any write."""

from __future__ import annotations

from typing import TYPE_CHECKING

from catalogsync.domain.model import MalformedVersionError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from catalogsync.domain.model import ConnectorKind


class ReconciliationError(ValueError):
    """Base class for rejected reconciliation inputs."""


class UnknownInUseConnectorError(ReconciliationError):
    """Raised when an in-use repository has no persisted definition."""

    def __init__(self, repositories: Iterable[str]) -> None:
        self.repositories = tuple(sorted(repositories))
        super().__init__(
            "In-use connectors missing from current definitions: " + ", ".join(self.repositories)
        )


class DuplicateConnectorDefinitionError(ReconciliationError):
    """Raised when the latest catalog lists a repository more than once."""

    def __init__(self, repository: str) -> None:
        self.repository = repository
        super().__init__(f"Latest catalog lists {repository} more than once")


class ConnectorKeyMismatchError(ReconciliationError):
    """Raised when a current mapping key differs from the record's repository."""

    def __init__(self, key: str, repository: str) -> None:
        self.key = key
        self.repository = repository
        super().__init__(f"Current definition keyed {key!r} has repository {repository!r}")


class ConnectorKindMismatchError(ReconciliationError):
    """Raised when a definition does not belong to the catalog being reconciled."""

    def __init__(self, repository: str, *, expected: ConnectorKind, actual: ConnectorKind) -> None:
        self.repository = repository
        self.expected = expected
        self.actual = actual
        super().__init__(f"{repository} is a {actual} definition, expected {expected}")


__all__ = [
    "ConnectorKeyMismatchError",
    "ConnectorKindMismatchError",
    "DuplicateConnectorDefinitionError",
    "MalformedVersionError",
    "ReconciliationError",
    "UnknownInUseConnectorError",
]
