"""SQLAlchemy adapter package for catalogsync."""

from __future__ import annotations

from .repositories import (
    ConnectorDefinitionNotFoundError,
    SqlAlchemyConnectorDefinitionRepository,
    SqlAlchemyConnectorInstanceRepository,
)
from .tables import connector_definition_table, connector_instance_table, metadata

__all__ = [
    "ConnectorDefinitionNotFoundError",
    "SqlAlchemyConnectorDefinitionRepository",
    "SqlAlchemyConnectorInstanceRepository",
    "connector_definition_table",
    "connector_instance_table",
    "metadata",
]
