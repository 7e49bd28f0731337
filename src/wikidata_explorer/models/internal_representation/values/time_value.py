from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import Literal
from typing import Optional


class TimeValue(BaseModel):
    type: Literal["time"] = Field(default="time", frozen=True)
    time: str
    precision: Optional[int] = None
    formatted: str

    model_config = ConfigDict(frozen=True)
