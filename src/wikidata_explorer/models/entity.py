from pydantic import BaseModel, Field


class SearchResult(BaseModel):
    id: str
    label: str
    description: str = ""
    url: str = ""


class SearchResponse(BaseModel):
    results: list[SearchResult] = Field(default_factory=list)


class HealthResponse(BaseModel):
    status: str = Field(default="ok", description="Service status")
