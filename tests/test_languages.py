import pytest

from src.constants.languages import (
    Language, LanguageCatalog, is_supported_language, parse_language
)
from src.dictionary.exceptions import UnsupportedLanguageException


def test_catalog_lists_every_language_in_order(catalog):
    assert len(catalog) == 13
    assert catalog.languages[0] is Language.CHT
    assert catalog.languages[1] is Language.CHS
    assert list(catalog) == list(Language)


def test_source_url_uses_upper_case_code(catalog):
    assert catalog.source_url(Language.EN) == "https://textmaps.test/TextMapEN.json"
    assert catalog.source_url(Language.CHS) == "https://textmaps.test/TextMapCHS.json"


def test_simplified_chinese_code_is_chs():
    assert is_supported_language("chs")
    assert not is_supported_language("cn")


def test_parse_language_ignores_case():
    assert parse_language("EN") is Language.EN
    assert parse_language("jp") is Language.JP


def test_parse_language_rejects_unknown_code():
    with pytest.raises(UnsupportedLanguageException) as exc_info:
        parse_language("xx")
    assert exc_info.value.status_code == 400


def test_subset_catalog_rejects_other_languages():
    catalog = LanguageCatalog("https://textmaps.test/{code}.json", [Language.EN, Language.FR])

    assert Language.EN in catalog
    assert Language.DE not in catalog
    assert catalog.order(Language.FR) == 1
    with pytest.raises(UnsupportedLanguageException):
        catalog.source_url(Language.DE)


def test_language_is_a_stable_grouping_key():
    groups = {Language.EN: "hello"}
    assert groups[Language("en")] == "hello"
    assert Language.EN == "en"
