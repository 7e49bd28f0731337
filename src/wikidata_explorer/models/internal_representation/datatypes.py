from enum import Enum


class Datatype(str, Enum):
    WIKIBASE_ITEM = "wikibase-item"
    WIKIBASE_LEXEME = "wikibase-lexeme"
    WIKIBASE_FORM = "wikibase-form"
    WIKIBASE_SENSE = "wikibase-sense"
    STRING = "string"
    URL = "url"
    MONOLINGUALTEXT = "monolingualtext"
    TIME = "time"
    QUANTITY = "quantity"
    GLOBE_COORDINATE = "globe-coordinate"
    EXTERNAL_ID = "external-id"
