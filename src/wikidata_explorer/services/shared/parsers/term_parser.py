import logging
from typing import Any

from wikidata_explorer.models.internal_representation.json_fields import JsonField
from wikidata_explorer.services.shared.parsers.value_parser import to_text

logger = logging.getLogger(__name__)


def _term_text(term: Any) -> str:
    if isinstance(term, str):
        return to_text(term)
    if isinstance(term, dict):
        text = term.get(JsonField.VALUE.value) or term.get(JsonField.TEXT.value)
        if text:
            return to_text(text)
    return to_text(term)


def normalize_terms(terms_json: Any) -> dict[str, str]:
    """Flatten labels or descriptions to {language: text}"""
    if not isinstance(terms_json, dict):
        return {}
    return {lang: _term_text(term) for lang, term in terms_json.items()}


def normalize_aliases(aliases_json: Any) -> dict[str, list[str]]:
    """Flatten aliases to {language: [text, ...]}, keeping list order"""
    if not isinstance(aliases_json, dict):
        return {}

    aliases = {}
    for lang, alias_list in aliases_json.items():
        if not isinstance(alias_list, list):
            logger.warning(f"Aliases for {lang} are not a list, coercing to text")
            aliases[lang] = [to_text(alias_list)]
            continue
        aliases[lang] = [_term_text(alias) for alias in alias_list]
    return aliases
