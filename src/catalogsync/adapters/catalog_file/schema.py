"""Pydantic models for the latest connector catalog document."""

from __future__ import annotations

from datetime import date  # noqa: TC003
from uuid import UUID  # noqa: TC003

from pydantic import BaseModel, ConfigDict, Field

from catalogsync.domain.model import ConnectorType, ReleaseStage  # noqa: TC001


class CatalogBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class DefinitionPayload(CatalogBaseModel):
    name: str
    docker_repository: str = Field(alias="dockerRepository", min_length=1)
    docker_image_tag: str = Field(alias="dockerImageTag")
    documentation_url: str | None = Field(default=None, alias="documentationUrl")
    icon: str | None = None
    release_stage: ReleaseStage | None = Field(default=None, alias="releaseStage")
    release_date: date | None = Field(default=None, alias="releaseDate")


class SourceDefinitionPayload(DefinitionPayload):
    definition_id: UUID = Field(alias="sourceDefinitionId")
    source_type: ConnectorType | None = Field(default=None, alias="sourceType")


class DestinationDefinitionPayload(DefinitionPayload):
    definition_id: UUID = Field(alias="destinationDefinitionId")


class LatestCatalogDocument(CatalogBaseModel):
    sources: list[SourceDefinitionPayload] = Field(
        default_factory=list["SourceDefinitionPayload"]
    )
    destinations: list[DestinationDefinitionPayload] = Field(
        default_factory=list["DestinationDefinitionPayload"]
    )
