from enum import Enum


class ValueKind(str, Enum):
    """Tags of extracted entity references"""

    ENTITY = "wikibase-entityid"
    LEXEME = "wikibase-lexeme"
    FORM = "wikibase-form"
    SENSE = "wikibase-sense"
