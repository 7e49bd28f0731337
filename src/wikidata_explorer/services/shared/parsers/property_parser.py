import logging
from typing import Any

from wikidata_explorer.models.internal_representation.datatypes import Datatype
from wikidata_explorer.models.internal_representation.entity import (
    CategorizedProperties,
    ProcessedClaim,
)
from wikidata_explorer.models.internal_representation.json_fields import JsonField
from wikidata_explorer.models.internal_representation.properties import (
    BASIC_PROPERTIES,
    get_property_label,
)
from wikidata_explorer.services.shared.parsers.value_parser import extract_snak_value

logger = logging.getLogger(__name__)

BASIC = "basic"
IDENTIFIERS = "identifiers"
STATEMENTS = "statements"


def classify_claim(property_id: str, datatype: Any) -> str:
    """Pick the bucket for one claim.

    Precedence is explicit: external identifiers first, then the basic
    allow-list, then everything else. An allow-listed property typed
    external-id is therefore an identifier.
    """
    if datatype == Datatype.EXTERNAL_ID.value:
        return IDENTIFIERS
    if property_id in BASIC_PROPERTIES:
        return BASIC
    return STATEMENTS


def _main_snak(claim_json: Any) -> dict[str, Any] | None:
    if not isinstance(claim_json, dict):
        return None
    mainsnak = claim_json.get(JsonField.MAINSNAK.value)
    if not mainsnak or not isinstance(mainsnak, dict):
        return None
    if mainsnak.get(JsonField.SNAKTYPE.value) == "novalue":
        return None
    return mainsnak


def categorize_properties(claims_json: Any) -> CategorizedProperties:
    buckets: dict[str, list[ProcessedClaim]] = {BASIC: [], IDENTIFIERS: [], STATEMENTS: []}
    if not isinstance(claims_json, dict):
        return CategorizedProperties(**buckets)

    for property_id, claim_list in claims_json.items():
        if not isinstance(claim_list, list):
            logger.warning(f"Claims for property {property_id} are not a list, skipping")
            continue

        property_label = get_property_label(property_id)
        for claim_json in claim_list:
            mainsnak = _main_snak(claim_json)
            if mainsnak is None:
                continue

            claim = ProcessedClaim(
                property_id=property_id,
                property_label=property_label,
                value=extract_snak_value(mainsnak),
            )
            bucket = classify_claim(property_id, mainsnak.get(JsonField.DATATYPE.value))
            buckets[bucket].append(claim)

    logger.debug(
        f"Categorized claims: {len(buckets[BASIC])} basic, "
        f"{len(buckets[IDENTIFIERS])} identifiers, {len(buckets[STATEMENTS])} statements"
    )
    return CategorizedProperties(**buckets)
