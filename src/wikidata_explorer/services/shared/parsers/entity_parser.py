import logging

from typing import Any

from wikidata_explorer.models.exceptions import EntityNotFoundError, MalformedEntityError
from wikidata_explorer.models.internal_representation.entity import NormalizedEntity
from wikidata_explorer.models.internal_representation.json_fields import JsonField
from wikidata_explorer.services.shared.parsers.property_parser import categorize_properties
from wikidata_explorer.services.shared.parsers.sitelink_parser import normalize_sitelinks
from wikidata_explorer.services.shared.parsers.term_parser import (
    normalize_aliases,
    normalize_terms,
)


logger = logging.getLogger(__name__)


def normalize_entity(entity_json: dict[str, Any]) -> NormalizedEntity:
    if not isinstance(entity_json, dict):
        raise MalformedEntityError(
            f"Entity must be a JSON object, got {type(entity_json).__name__}"
        )

    claims_json = entity_json.get(JsonField.CLAIMS.value) or {}

    return NormalizedEntity(
        id=str(entity_json.get(JsonField.ID.value, "")),
        labels=normalize_terms(entity_json.get(JsonField.LABELS.value) or {}),
        descriptions=normalize_terms(entity_json.get(JsonField.DESCRIPTIONS.value) or {}),
        aliases=normalize_aliases(entity_json.get(JsonField.ALIASES.value) or {}),
        sitelinks=normalize_sitelinks(entity_json.get(JsonField.SITELINKS.value) or {}),
        claims=claims_json if isinstance(claims_json, dict) else {},
        properties=categorize_properties(claims_json),
    )


def normalize_entity_document(document: Any, entity_id: str) -> NormalizedEntity:
    """Normalize one entity out of a Special:EntityData document.

    Raises:
        MalformedEntityError: the document or its entities map is not an object
        EntityNotFoundError: entity_id is absent from the document
    """
    if not isinstance(document, dict):
        raise MalformedEntityError(
            f"Entity document must be a JSON object, got {type(document).__name__}"
        )

    entities = document.get(JsonField.ENTITIES.value)
    if not isinstance(entities, dict):
        raise MalformedEntityError("Entity document has no entities object")

    entity_json = entities.get(entity_id)
    if entity_json is None:
        raise EntityNotFoundError(entity_id)

    logger.debug(f"Normalizing entity {entity_id}")
    return normalize_entity(entity_json)
