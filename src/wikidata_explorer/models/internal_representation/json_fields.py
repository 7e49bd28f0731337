from enum import Enum


class JsonField(str, Enum):
    ID = "id"
    ENTITIES = "entities"
    LABELS = "labels"
    DESCRIPTIONS = "descriptions"
    ALIASES = "aliases"
    CLAIMS = "claims"
    SITELINKS = "sitelinks"
    MAINSNAK = "mainsnak"
    SNAKTYPE = "snaktype"
    DATATYPE = "datatype"
    DATAVALUE = "datavalue"
    VALUE = "value"
    TEXT = "text"
    TITLE = "title"
    URL = "url"
