import logging
from typing import Any, Optional

import requests
from pydantic import BaseModel, Field

from wikidata_explorer.models.entity import SearchResult
from wikidata_explorer.models.exceptions import EntityNotFoundError, WikidataClientError

logger = logging.getLogger(__name__)


class WikidataConfig(BaseModel):
    entity_data_url: str = "https://www.wikidata.org/wiki/Special:EntityData"
    api_url: str = "https://www.wikidata.org/w/api.php"
    user_agent: str = "WikidataExplorer/1.0"
    timeout: float = 30
    search_language: str = "en"
    search_limit: int = 10


class WikidataClient(BaseModel):
    config: WikidataConfig
    session: Any = Field(default=None, exclude=True)

    class Config:
        arbitrary_types_allowed = True

    def __init__(self, config: WikidataConfig, **kwargs):
        super().__init__(config=config, **kwargs)
        if self.session is None:
            self.session = requests.Session()
        self.session.headers.update({"User-Agent": config.user_agent})

    def _get_json(self, url: str, params: Optional[dict[str, Any]] = None) -> Any:
        try:
            response = self.session.get(url, params=params, timeout=self.config.timeout)
            response.raise_for_status()
            return response.json()
        except requests.RequestException as e:
            # requests' JSONDecodeError is a RequestException too
            logger.error(f"Request to {url} failed: {e}")
            raise WikidataClientError(f"Request to {url} failed: {e}") from e

    def fetch_entity_document(self, entity_id: str) -> Any:
        """Fetch the Special:EntityData JSON document for one entity"""
        url = f"{self.config.entity_data_url}/{entity_id}.json"
        logger.debug(f"Fetching entity {entity_id} from {url}")
        try:
            return self._get_json(url)
        except WikidataClientError as e:
            cause = e.__cause__
            if (
                isinstance(cause, requests.HTTPError)
                and cause.response is not None
                and cause.response.status_code == 404
            ):
                raise EntityNotFoundError(entity_id) from e
            raise

    def search_entities(
        self,
        query: str,
        language: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> list[SearchResult]:
        """Search entities by text with the wbsearchentities action"""
        language = language or self.config.search_language
        params = {
            "action": "wbsearchentities",
            "search": query,
            "language": language,
            "uselang": language,
            "format": "json",
            "limit": limit or self.config.search_limit,
        }
        data = self._get_json(self.config.api_url, params=params)

        if not isinstance(data, dict) or not isinstance(data.get("search"), list):
            raise WikidataClientError("Search response has no search results list")

        results = []
        for item in data["search"]:
            if not isinstance(item, dict) or not item.get("id"):
                logger.warning(f"Skipping malformed search hit: {item!r}")
                continue
            results.append(
                SearchResult(
                    id=item["id"],
                    label=item.get("label") or item["id"],
                    description=item.get("description") or "",
                    url=item.get("concepturi") or "",
                )
            )

        logger.info(f"Search for {query!r} returned {len(results)} results")
        return results

    def close(self) -> None:
        self.session.close()
