# tests/test_locale.py
# Locale -> language resolution & catalog invariants

import pytest

from karu_assistant.enums.languages import (
    Languages, LANGUAGE_DISPLAY_NAME, LOCALE_TO_LANGUAGE, SUMMARY_LENGTH_PHRASE, SummaryLength,
    get_language_display_name,
)
from karu_assistant.utils.locale import resolve_language_from_locale, primary_language_subtag


@pytest.mark.parametrize("locale,expected", [
    ("en-US", Languages.EN),
    ("PT-br", Languages.PT),
    ("zh-Hans", Languages.ZH),
    ("tr", Languages.TR),
])
def test_exact_match_is_case_insensitive(locale, expected):
    assert resolve_language_from_locale(locale) is expected


def test_every_catalog_key_resolves_to_its_language():
    for locale, language in LOCALE_TO_LANGUAGE.items():
        assert resolve_language_from_locale(locale.upper()) is language


def test_falls_back_to_primary_subtag():
    assert resolve_language_from_locale("en-ZZ") is Languages.EN
    assert resolve_language_from_locale("fr-CA") is Languages.FR
    assert resolve_language_from_locale("de_AT") is Languages.DE


def test_empty_locale_is_no_match():
    assert resolve_language_from_locale("") is None
    assert resolve_language_from_locale(None) is None


def test_unknown_locale_is_no_match():
    assert resolve_language_from_locale("xx-yy") is None


@pytest.mark.parametrize("locale", ["not a locale", "e", "12-34", "en--us", "-en"])
def test_malformed_locale_is_no_match(locale):
    assert resolve_language_from_locale(locale) is None


def test_primary_language_subtag():
    assert primary_language_subtag("EN-us") == "en"
    assert primary_language_subtag("zh-Hans-CN") == "zh"
    assert primary_language_subtag("?") is None


def test_every_language_has_a_display_name():
    for language in Languages:
        assert LANGUAGE_DISPLAY_NAME[language].strip()


def test_every_summary_length_has_a_phrase():
    assert set(SUMMARY_LENGTH_PHRASE) == set(SummaryLength)


def test_display_name_lookup_accepts_codes():
    assert get_language_display_name(Languages.JA) == "Japanese"
    assert get_language_display_name("tr") == "Turkish"
    with pytest.raises(ValueError):
        get_language_display_name("xx")
