import logging
import re
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException, Query

from wikidata_explorer.models.config.settings import settings
from wikidata_explorer.models.entity import HealthResponse, SearchResponse
from wikidata_explorer.models.exceptions import (
    EntityNotFoundError,
    MalformedEntityError,
    WikidataClientError,
)
from wikidata_explorer.models.infrastructure.wikidata_client import WikidataClient
from wikidata_explorer.models.internal_representation.entity import NormalizedEntity
from wikidata_explorer.services.shared.parsers import normalize_entity_document

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Items, properties, lexemes (with forms and senses) and media info
ENTITY_ID_PATTERN = re.compile(r"^(?:[QP][1-9]\d*|L[1-9]\d*(?:-[FS][1-9]\d*)?|M[1-9]\d*)$")


# noinspection PyShadowingNames,PyUnresolvedReferences
@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.wikidata = WikidataClient(settings.to_wikidata_config())
    yield
    app.state.wikidata.close()
    app.state.wikidata = None


app = FastAPI(lifespan=lifespan)


@app.get("/health", response_model=HealthResponse)
def health_check():
    return HealthResponse(status="ok")


# noinspection PyUnresolvedReferences
@app.get("/api/search", response_model=SearchResponse)
def search(q: Optional[str] = None):
    if not q or not q.strip():
        return SearchResponse(results=[])

    try:
        results = app.state.wikidata.search_entities(q)
    except WikidataClientError as e:
        logger.error(f"Error searching Wikidata: {e}")
        raise HTTPException(status_code=500, detail="Failed to search Wikidata")

    return SearchResponse(results=results)


# noinspection PyUnresolvedReferences
@app.get("/api/entity", response_model=NormalizedEntity)
def get_entity(entity_id: Optional[str] = Query(default=None, alias="id")):
    if not entity_id:
        raise HTTPException(status_code=400, detail="Entity ID is required")

    entity_id = entity_id.strip().upper()
    if not ENTITY_ID_PATTERN.match(entity_id):
        raise HTTPException(status_code=400, detail=f"Invalid entity ID: {entity_id}")

    try:
        document = app.state.wikidata.fetch_entity_document(entity_id)
        return normalize_entity_document(document, entity_id)
    except EntityNotFoundError:
        raise HTTPException(status_code=404, detail="Entity not found")
    except (WikidataClientError, MalformedEntityError) as e:
        logger.error(f"Error fetching entity data for {entity_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch entity data")
