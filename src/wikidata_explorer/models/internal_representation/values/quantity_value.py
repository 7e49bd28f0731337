from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import Literal

ENTITY_URI_PREFIX = "http://www.wikidata.org/entity/"


class QuantityValue(BaseModel):
    type: Literal["quantity"] = Field(default="quantity", frozen=True)
    amount: str
    unit: str
    formatted: str

    model_config = ConfigDict(frozen=True)

    @classmethod
    def unit_label(cls, unit: str) -> str:
        """Q11573 for http://www.wikidata.org/entity/Q11573, the raw unit otherwise"""
        if unit.startswith(ENTITY_URI_PREFIX):
            return unit[len(ENTITY_URI_PREFIX):]
        return unit
