from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import Literal


class EntityReferenceValue(BaseModel):
    """Reference to another entity, lexeme, form or sense.

    The label is the raw ID: referenced entities are not resolved.
    """

    type: Literal[
        "wikibase-entityid",
        "wikibase-lexeme",
        "wikibase-form",
        "wikibase-sense",
    ] = Field(default="wikibase-entityid", frozen=True)
    id: str
    label: str

    model_config = ConfigDict(frozen=True)
