from .base import ExtractedValue, TaggedValue
from .entity_value import EntityReferenceValue
from .monolingual_value import MonolingualValue
from .time_value import TimeValue
from .quantity_value import QuantityValue
from .globe_value import GlobeValue

__all__ = [
    "ExtractedValue",
    "TaggedValue",
    "EntityReferenceValue",
    "MonolingualValue",
    "TimeValue",
    "QuantityValue",
    "GlobeValue",
]
