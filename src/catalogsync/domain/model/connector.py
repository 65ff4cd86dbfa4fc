"""Connector catalog entities.

``ConnectorDefinition`` is an immutable value: reconciliation never mutates a
definition in place, it derives a new one with :func:`dataclasses.replace`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final
from uuid import UUID, uuid4

from .version import SemanticVersion

if TYPE_CHECKING:
    from datetime import date

    from .enums import ConnectorKind, ConnectorType, ReleaseStage


OPTIONAL_FIELDS: Final[tuple[str, ...]] = (
    "documentation_url",
    "icon",
    "connector_type",
    "release_stage",
    "release_date",
)
"""Nullable descriptive attributes that reconciliation may backfill."""


def new_id() -> UUID:
    return uuid4()


@dataclass(frozen=True, slots=True, kw_only=True)
class ConnectorDefinition:
    """One addressable connector in a catalog of a given kind.

    ``repository`` is the join key between the persisted, in-use and latest
    catalogs; ``version`` is a ``MAJOR.MINOR.PATCH`` string.
    """

    kind: ConnectorKind
    repository: str
    version: str
    name: str
    definition_id: UUID = field(default_factory=new_id)

    documentation_url: str | None = None
    icon: str | None = None
    connector_type: ConnectorType | None = None
    release_stage: ReleaseStage | None = None
    release_date: date | None = None

    @property
    def parsed_version(self) -> SemanticVersion:
        return SemanticVersion.parse(self.version, repository=self.repository)

    def optional_values(self) -> dict[str, object]:
        return {name: getattr(self, name) for name in OPTIONAL_FIELDS}

    def missing_fields(self) -> tuple[str, ...]:
        return tuple(name for name in OPTIONAL_FIELDS if getattr(self, name) is None)


@dataclass(frozen=True, slots=True, kw_only=True)
class ConnectorInstance:
    """A configured workload referencing a connector by repository."""

    kind: ConnectorKind
    repository: str
    name: str
    id: UUID = field(default_factory=new_id)
