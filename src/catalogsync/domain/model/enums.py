"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class ConnectorKind(StrEnum):
    """Parallel catalogs reconciled independently."""

    SOURCE = "source"
    DESTINATION = "destination"


class ConnectorType(StrEnum):
    API = "api"
    FILE = "file"
    DATABASE = "database"
    CUSTOM = "custom"


class ReleaseStage(StrEnum):
    ALPHA = "alpha"
    BETA = "beta"
    GENERALLY_AVAILABLE = "generally_available"
    CUSTOM = "custom"
