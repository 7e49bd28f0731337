import json
import logging
import re
from typing import Any, Callable

from pydantic import ValidationError

from wikidata_explorer.models.internal_representation.datatypes import Datatype
from wikidata_explorer.models.internal_representation.json_fields import JsonField
from wikidata_explorer.models.internal_representation.value_kinds import ValueKind
from wikidata_explorer.models.internal_representation.values import (
    EntityReferenceValue,
    ExtractedValue,
    GlobeValue,
    MonolingualValue,
    QuantityValue,
    TimeValue,
)
from wikidata_explorer.services.shared.parsers.time_formatter import format_time

logger = logging.getLogger(__name__)

ENTITY_ID_PREFIXES = {"item": "Q", "property": "P", "lexeme": "L"}


def _replace_lone_surrogates(text: str) -> str:
    try:
        text.encode("utf-8")
        return text
    except UnicodeEncodeError:
        logger.warning(f"Replacing lone surrogates in {text!r}")
        return text.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "replace")


def to_text(value: Any) -> str:
    """Textual form of an arbitrary JSON value, never a nested structure.

    Lone surrogates, which JSON allows but UTF-8 cannot carry, become U+FFFD.
    """
    if not isinstance(value, str):
        value = json.dumps(value, ensure_ascii=False, default=str)
    return _replace_lone_surrogates(value)


def _fallback(value: Any) -> ExtractedValue:
    if isinstance(value, (dict, list)):
        return to_text(value)
    if value is None or isinstance(value, (bool, int, float)):
        return value
    return to_text(value)


def _parse_entity_reference(value: dict[str, Any], kind: ValueKind) -> EntityReferenceValue:
    entity_id = value.get("id")
    if entity_id is None:
        # Older dumps only carry entity-type and numeric-id
        prefix = ENTITY_ID_PREFIXES[value["entity-type"]]
        entity_id = f"{prefix}{value['numeric-id']}"
    return EntityReferenceValue(type=kind.value, id=entity_id, label=entity_id)


def _parse_item(value: dict[str, Any]) -> EntityReferenceValue:
    return _parse_entity_reference(value, ValueKind.ENTITY)


def _parse_lexeme(value: dict[str, Any]) -> EntityReferenceValue:
    return _parse_entity_reference(value, ValueKind.LEXEME)


def _parse_form(value: dict[str, Any]) -> EntityReferenceValue:
    return _parse_entity_reference(value, ValueKind.FORM)


def _parse_sense(value: dict[str, Any]) -> EntityReferenceValue:
    return _parse_entity_reference(value, ValueKind.SENSE)


def _parse_string(value: Any) -> ExtractedValue:
    return _fallback(value)


def _parse_monolingual(value: dict[str, Any]) -> MonolingualValue:
    return MonolingualValue(text=value["text"], language=value["language"])


def _parse_time(value: dict[str, Any]) -> TimeValue:
    time = value["time"]
    precision = value.get("precision")
    if not isinstance(precision, int) or isinstance(precision, bool):
        precision = None
    return TimeValue(time=time, precision=precision, formatted=format_time(time, precision))


def _parse_quantity(value: dict[str, Any]) -> QuantityValue:
    amount = to_text(value["amount"])
    unit = to_text(value["unit"])
    return QuantityValue(
        amount=amount,
        unit=unit,
        formatted=f"{amount} {QuantityValue.unit_label(unit)}",
    )


def format_number(number: Any) -> str:
    """Render a coordinate the way JavaScript prints numbers: 52 not 52.0, 1e-7 not 1e-07"""
    if isinstance(number, float) and number.is_integer() and abs(number) < 1e21:
        return str(int(number))
    return re.sub(r"e([+-])0*(\d)", r"e\1\2", str(number))


def _parse_globe(value: dict[str, Any]) -> GlobeValue:
    latitude = value["latitude"]
    longitude = value["longitude"]
    return GlobeValue(
        latitude=latitude,
        longitude=longitude,
        formatted=f"{format_number(latitude)}, {format_number(longitude)}",
    )


PARSERS: dict[str, Callable[[Any], ExtractedValue]] = {
    Datatype.WIKIBASE_ITEM.value: _parse_item,
    Datatype.WIKIBASE_LEXEME.value: _parse_lexeme,
    Datatype.WIKIBASE_FORM.value: _parse_form,
    Datatype.WIKIBASE_SENSE.value: _parse_sense,
    Datatype.STRING.value: _parse_string,
    Datatype.URL.value: _parse_string,
    Datatype.MONOLINGUALTEXT.value: _parse_monolingual,
    Datatype.TIME.value: _parse_time,
    Datatype.QUANTITY.value: _parse_quantity,
    Datatype.GLOBE_COORDINATE.value: _parse_globe,
}


def extract_snak_value(snak_json: Any) -> ExtractedValue:
    """Turn one snak into a display-ready value.

    Returns None when the snak carries no datavalue. Malformed payloads of
    known datatypes degrade to their textual form instead of raising.
    """
    if not isinstance(snak_json, dict):
        return None

    datavalue = snak_json.get(JsonField.DATAVALUE.value)
    if not datavalue or not isinstance(datavalue, dict):
        return None

    datatype = snak_json.get(JsonField.DATATYPE.value)
    value = datavalue.get(JsonField.VALUE.value)

    parser = PARSERS.get(str(datatype))
    if parser is None:
        return _fallback(value)

    try:
        return parser(value)
    except (KeyError, TypeError, AttributeError, ValidationError) as e:
        logger.warning(f"Malformed {datatype} value, using textual form: {e}")
        return _fallback(value)
