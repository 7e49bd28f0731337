from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .values import ExtractedValue


class ProcessedClaim(BaseModel):
    property_id: str
    property_label: str
    value: ExtractedValue = None

    model_config = ConfigDict(frozen=True)


class CategorizedProperties(BaseModel):
    basic: list[ProcessedClaim] = Field(default_factory=list)
    identifiers: list[ProcessedClaim] = Field(default_factory=list)
    statements: list[ProcessedClaim] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class Sitelink(BaseModel):
    site: str
    title: str
    url: str = Field(min_length=1)

    model_config = ConfigDict(frozen=True)


class NormalizedEntity(BaseModel):
    id: str
    labels: dict[str, str]
    descriptions: dict[str, str]
    aliases: dict[str, list[str]]
    sitelinks: dict[str, Sitelink]
    claims: dict[str, Any]
    properties: CategorizedProperties

    model_config = ConfigDict(frozen=True)
