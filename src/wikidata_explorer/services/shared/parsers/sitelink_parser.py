import logging
import re
from typing import Any
from urllib.parse import quote

from wikidata_explorer.models.internal_representation.entity import Sitelink
from wikidata_explorer.models.internal_representation.json_fields import JsonField
from wikidata_explorer.services.shared.parsers.value_parser import to_text

logger = logging.getLogger(__name__)

# Site keys that do not follow the <language><project> pattern
SPECIAL_SITE_DOMAINS = {
    "commonswiki": "commons.wikimedia.org",
    "specieswiki": "species.wikimedia.org",
    "metawiki": "meta.wikimedia.org",
    "mediawikiwiki": "www.mediawiki.org",
    "wikidatawiki": "www.wikidata.org",
}

SITE_KEY_PATTERN = re.compile(
    r"^(?P<lang>[a-z0-9_]+?)"
    r"(?P<project>wiki|wikiquote|wikisource|wikibooks|wikinews|wikiversity|wikivoyage|wiktionary)$"
)

# Characters left alone by JavaScript's encodeURIComponent
URI_COMPONENT_SAFE = "-_.!~*'()"


def site_domain(site: str) -> str:
    """Host name for a sitelink key, e.g. en.wikipedia.org for enwiki"""
    if site in SPECIAL_SITE_DOMAINS:
        return SPECIAL_SITE_DOMAINS[site]

    match = SITE_KEY_PATTERN.match(site)
    if match is None:
        return f"{site.replace('_', '-')}.wikipedia.org"

    lang = match.group("lang").replace("_", "-")
    project = match.group("project")
    if project == "wiki":
        project = "wikipedia"
    return f"{lang}.{project}.org"


def sitelink_url(site: str, title: str) -> str:
    page = quote(to_text(title).replace(" ", "_"), safe=URI_COMPONENT_SAFE)
    return f"https://{site_domain(site)}/wiki/{page}"


def normalize_sitelinks(sitelinks_json: Any) -> dict[str, Sitelink]:
    if not isinstance(sitelinks_json, dict):
        return {}

    sitelinks = {}
    for site, data in sitelinks_json.items():
        if isinstance(data, dict):
            title = to_text(data.get(JsonField.TITLE.value, ""))
            url = data.get(JsonField.URL.value)
        else:
            logger.warning(f"Sitelink {site} is not an object, using its text as title")
            title = to_text(data)
            url = None

        if not url or not isinstance(url, str):
            url = sitelink_url(site, title)

        sitelinks[site] = Sitelink(site=site, title=title, url=url)
    return sitelinks
