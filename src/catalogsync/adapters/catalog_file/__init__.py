"""Latest-catalog JSON document adapter."""

from __future__ import annotations

from .loader import CatalogFileError, load_latest_catalog, translate_catalog
from .schema import (
    DestinationDefinitionPayload,
    LatestCatalogDocument,
    SourceDefinitionPayload,
)

__all__ = [
    "CatalogFileError",
    "DestinationDefinitionPayload",
    "LatestCatalogDocument",
    "SourceDefinitionPayload",
    "load_latest_catalog",
    "translate_catalog",
]
