from .datatypes import Datatype
from .json_fields import JsonField
from .value_kinds import ValueKind
from .properties import BASIC_PROPERTIES, PROPERTY_LABELS, get_property_label
from .values import ExtractedValue
from .entity import (
    CategorizedProperties,
    NormalizedEntity,
    ProcessedClaim,
    Sitelink,
)

__all__ = [
    "Datatype",
    "JsonField",
    "ValueKind",
    "BASIC_PROPERTIES",
    "PROPERTY_LABELS",
    "get_property_label",
    "ExtractedValue",
    "CategorizedProperties",
    "NormalizedEntity",
    "ProcessedClaim",
    "Sitelink",
]
