"""Whole-document failures of the explorer.

Per-field anomalies are never raised: the parsers recover from them locally.
"""


class EntityNotFoundError(LookupError):
    """The requested entity is absent from the fetched document"""

    def __init__(self, entity_id: str):
        super().__init__(f"Entity {entity_id} not found")
        self.entity_id = entity_id


class MalformedEntityError(ValueError):
    """The document as a whole is not a JSON object of the expected shape"""


class WikidataClientError(Exception):
    """Transport, status or decoding failure while talking to Wikidata"""
