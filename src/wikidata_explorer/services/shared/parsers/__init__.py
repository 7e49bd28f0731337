from wikidata_explorer.services.shared.parsers.entity_parser import (
    EntityNotFoundError,
    MalformedEntityError,
    normalize_entity,
    normalize_entity_document,
)
from wikidata_explorer.services.shared.parsers.property_parser import (
    categorize_properties,
    classify_claim,
)
from wikidata_explorer.services.shared.parsers.sitelink_parser import normalize_sitelinks
from wikidata_explorer.services.shared.parsers.term_parser import (
    normalize_aliases,
    normalize_terms,
)
from wikidata_explorer.services.shared.parsers.time_formatter import format_time
from wikidata_explorer.services.shared.parsers.value_parser import extract_snak_value

__all__ = [
    "EntityNotFoundError",
    "MalformedEntityError",
    "normalize_entity",
    "normalize_entity_document",
    "categorize_properties",
    "classify_claim",
    "normalize_sitelinks",
    "normalize_aliases",
    "normalize_terms",
    "format_time",
    "extract_snak_value",
]
