"""Public domain model surface."""

from __future__ import annotations

from .connector import OPTIONAL_FIELDS, ConnectorDefinition, ConnectorInstance, new_id
from .enums import ConnectorKind, ConnectorType, ReleaseStage
from .version import MalformedVersionError, SemanticVersion, compare_versions

__all__ = [
    "OPTIONAL_FIELDS",
    "ConnectorDefinition",
    "ConnectorInstance",
    "ConnectorKind",
    "ConnectorType",
    "MalformedVersionError",
    "ReleaseStage",
    "SemanticVersion",
    "compare_versions",
    "new_id",
]
