"""Domain port definitions for adapters."""

from __future__ import annotations

from .persistence import (
    ConnectorDefinitionRepository,
    ConnectorDefinitionWriter,
    ConnectorInstanceRepository,
    Repository,
)
from .unit_of_work import (
    CatalogRepositories,
    CatalogUnitOfWork,
    RepositoryCollection,
    UnitOfWork,
)

__all__ = [
    "CatalogRepositories",
    "CatalogUnitOfWork",
    "ConnectorDefinitionRepository",
    "ConnectorDefinitionWriter",
    "ConnectorInstanceRepository",
    "Repository",
    "RepositoryCollection",
    "UnitOfWork",
]
