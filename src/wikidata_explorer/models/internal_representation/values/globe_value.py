from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import Literal


class GlobeValue(BaseModel):
    type: Literal["globe-coordinate"] = Field(default="globe-coordinate", frozen=True)
    latitude: float
    longitude: float
    formatted: str

    model_config = ConfigDict(frozen=True)
