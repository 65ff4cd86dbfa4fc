"""Load a latest connector catalog document into domain definitions."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import ValidationError

from catalogsync.domain.model import ConnectorDefinition, ConnectorKind

from .schema import (
    DestinationDefinitionPayload,
    LatestCatalogDocument,
    SourceDefinitionPayload,
)

if TYPE_CHECKING:
    from pathlib import Path


log = getLogger(__name__)


class CatalogFileError(ValueError):
    """Raised when a catalog document cannot be read or validated."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid catalog file {path}: {reason}")


def load_latest_catalog(path: Path) -> dict[ConnectorKind, list[ConnectorDefinition]]:
    """Read ``path`` and return its definitions grouped by connector kind."""

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CatalogFileError(path, exc.strerror or str(exc)) from exc

    try:
        document = LatestCatalogDocument.model_validate_json(raw)
    except ValidationError as exc:
        raise CatalogFileError(path, str(exc)) from exc

    catalog = translate_catalog(document)
    log.info(
        "Loaded catalog %s: sources=%s, destinations=%s",
        path,
        len(catalog[ConnectorKind.SOURCE]),
        len(catalog[ConnectorKind.DESTINATION]),
    )
    return catalog


def translate_catalog(
    document: LatestCatalogDocument,
) -> dict[ConnectorKind, list[ConnectorDefinition]]:
    return {
        ConnectorKind.SOURCE: [_translate_source(payload) for payload in document.sources],
        ConnectorKind.DESTINATION: [
            _translate_destination(payload) for payload in document.destinations
        ],
    }


def _translate_source(payload: SourceDefinitionPayload) -> ConnectorDefinition:
    return ConnectorDefinition(
        kind=ConnectorKind.SOURCE,
        repository=payload.docker_repository,
        version=payload.docker_image_tag,
        name=payload.name,
        definition_id=payload.definition_id,
        documentation_url=payload.documentation_url,
        icon=payload.icon,
        connector_type=payload.source_type,
        release_stage=payload.release_stage,
        release_date=payload.release_date,
    )


def _translate_destination(payload: DestinationDefinitionPayload) -> ConnectorDefinition:
    return ConnectorDefinition(
        kind=ConnectorKind.DESTINATION,
        repository=payload.docker_repository,
        version=payload.docker_image_tag,
        name=payload.name,
        definition_id=payload.definition_id,
        documentation_url=payload.documentation_url,
        icon=payload.icon,
        release_stage=payload.release_stage,
        release_date=payload.release_date,
    )
