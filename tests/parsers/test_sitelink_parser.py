import json

import pytest

from wikidata_explorer.services.shared.parsers import normalize_entity, normalize_sitelinks
from wikidata_explorer.services.shared.parsers.sitelink_parser import site_domain, sitelink_url


def test_sitelink_url_is_derived_from_site_key():
    """Test enwiki + title gives the English Wikipedia article URL"""
    sitelinks = normalize_sitelinks({"enwiki": {"site": "enwiki", "title": "Albert Einstein", "badges": []}})

    sitelink = sitelinks["enwiki"]
    assert sitelink.site == "enwiki"
    assert sitelink.title == "Albert Einstein"
    assert sitelink.url == "https://en.wikipedia.org/wiki/Albert_Einstein"


def test_explicit_sitelink_url_is_kept():
    sitelinks = normalize_sitelinks(
        {"dewiki": {"title": "Berlin", "url": "https://de.wikipedia.org/wiki/Berlin_(Stadt)"}}
    )
    assert sitelinks["dewiki"].url == "https://de.wikipedia.org/wiki/Berlin_(Stadt)"


def test_sitelink_title_is_percent_encoded():
    """Test titles are encoded like encodeURIComponent after replacing spaces"""
    assert (
        sitelink_url("frwiki", "Université de Paris")
        == "https://fr.wikipedia.org/wiki/Universit%C3%A9_de_Paris"
    )
    assert sitelink_url("enwiki", "AC/DC") == "https://en.wikipedia.org/wiki/AC%2FDC"
    assert sitelink_url("enwiki", "Don't Panic (book)") == "https://en.wikipedia.org/wiki/Don't_Panic_(book)"


@pytest.mark.parametrize(
    "site,domain",
    [
        ("enwiki", "en.wikipedia.org"),
        ("zh_yuewiki", "zh-yue.wikipedia.org"),
        ("enwikiquote", "en.wikiquote.org"),
        ("dewikisource", "de.wikisource.org"),
        ("frwiktionary", "fr.wiktionary.org"),
        ("itwikivoyage", "it.wikivoyage.org"),
        ("commonswiki", "commons.wikimedia.org"),
        ("specieswiki", "species.wikimedia.org"),
        ("wikidatawiki", "www.wikidata.org"),
        ("xx", "xx.wikipedia.org"),
    ],
)
def test_site_domain(site, domain):
    assert site_domain(site) == domain


def test_every_sitelink_gets_a_url():
    """Test all keys are kept and every entry has a non-empty URL"""
    sitelinks_json = {
        "enwiki": {"title": "Douglas Adams"},
        "enwikiquote": {"title": "Douglas Adams", "url": ""},
        "commonswiki": {"title": "Category:Douglas Adams"},
    }

    sitelinks = normalize_sitelinks(sitelinks_json)
    assert set(sitelinks) == set(sitelinks_json)
    assert all(sitelink.url for sitelink in sitelinks.values())
    assert sitelinks["enwikiquote"].url == "https://en.wikiquote.org/wiki/Douglas_Adams"
    assert sitelinks["commonswiki"].url == "https://commons.wikimedia.org/wiki/Category%3ADouglas_Adams"


def test_malformed_sitelink_uses_text_as_title():
    sitelinks = normalize_sitelinks({"enwiki": "Douglas Adams"})
    assert sitelinks["enwiki"].title == "Douglas Adams"
    assert sitelinks["enwiki"].url == "https://en.wikipedia.org/wiki/Douglas_Adams"


def test_normalize_sitelinks_non_mapping_input():
    assert normalize_sitelinks([]) == {}


def test_sitelink_title_with_lone_surrogate():
    """Test a title holding a lone surrogate still gets a derived URL"""
    sitelinks = normalize_sitelinks(json.loads('{"enwiki": {"title": "Bad \\ud800 title"}}'))

    assert sitelinks["enwiki"].title == "Bad \ufffd title"
    assert sitelinks["enwiki"].url == "https://en.wikipedia.org/wiki/Bad_%EF%BF%BD_title"
    assert sitelink_url("enwiki", "Bad \ud800 title") == sitelinks["enwiki"].url


def test_entity_with_lone_surrogate_title_is_normalized():
    """Test one odd sitelink title does not abort the whole entity"""
    entity = normalize_entity(
        json.loads('{"id": "Q1", "sitelinks": {"enwiki": {"title": "Bad \\ud800 title"}}}')
    )

    assert entity.sitelinks["enwiki"].url == "https://en.wikipedia.org/wiki/Bad_%EF%BF%BD_title"
