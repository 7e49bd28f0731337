"""Wikidata entity explorer backend."""

__version__ = "1.0.0"
