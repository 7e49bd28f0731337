import json
import logging

import pytest
from pathlib import Path

TEST_DATA_JSON_DIR = Path(__file__).parent.parent.parent / "test_data" / "json"
logger = logging.getLogger(__name__)


@pytest.fixture
def q42_document() -> dict:
    """Special:EntityData document for Douglas Adams, trimmed to a few claims"""
    with open(TEST_DATA_JSON_DIR / "entities/Q42.json", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def q42_entity(q42_document: dict) -> dict:
    return q42_document["entities"]["Q42"]
