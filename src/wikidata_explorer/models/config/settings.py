import logging
from pydantic_settings import BaseSettings

from wikidata_explorer.models.infrastructure.wikidata_client import WikidataConfig

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    entity_data_url: str = "https://www.wikidata.org/wiki/Special:EntityData"
    api_url: str = "https://www.wikidata.org/w/api.php"
    user_agent: str = "WikidataExplorer/1.0 (https://github.com/wikidata-explorer)"
    request_timeout: float = 30
    search_language: str = "en"
    search_limit: int = 10
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "WIKIDATA_EXPLORER_"

    def to_wikidata_config(self) -> WikidataConfig:
        return WikidataConfig(
            entity_data_url=self.entity_data_url,
            api_url=self.api_url,
            user_agent=self.user_agent,
            timeout=self.request_timeout,
            search_language=self.search_language,
            search_limit=self.search_limit,
        )


# noinspection PyArgumentList
settings = Settings()

logger.debug("=== Settings Debug ===")
logger.debug(f"Entity data URL: {settings.entity_data_url}")
logger.debug(f"API URL: {settings.api_url}")
logger.debug(f"Request timeout: {settings.request_timeout}")
logger.debug(f"Search language: {settings.search_language}")
logger.debug(f"Search limit: {settings.search_limit}")
logger.debug(f"Log level: {settings.log_level}")
logger.debug("=== End Settings Debug ===")
