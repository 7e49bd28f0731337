from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import Literal


class MonolingualValue(BaseModel):
    type: Literal["monolingualtext"] = Field(default="monolingualtext", frozen=True)
    text: str
    language: str

    model_config = ConfigDict(frozen=True)
