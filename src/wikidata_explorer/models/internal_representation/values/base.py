from typing import Annotated, Optional, Union

from pydantic import Field

from .entity_value import EntityReferenceValue
from .globe_value import GlobeValue
from .monolingual_value import MonolingualValue
from .quantity_value import QuantityValue
from .time_value import TimeValue

TaggedValue = Annotated[
    Union[
        EntityReferenceValue,
        MonolingualValue,
        TimeValue,
        QuantityValue,
        GlobeValue,
    ],
    Field(discriminator="type"),
]

# Plain strings cover string and url snaks as well as the textual fallback
# for unknown datatypes. Scalars of unknown datatypes pass through unchanged.
ExtractedValue = Optional[Union[TaggedValue, str, bool, int, float]]
