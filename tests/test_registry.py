"""
Тесты реестра языков.

Запуск: python -m pytest tests/test_registry.py -v
"""

import sys
import os

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from i18n.registry import LanguageRegistry


def test_first_language_is_default_and_active():
    registry = LanguageRegistry(["en", "de", "fr"])
    assert registry.default == "en"
    assert registry.get_active() == "en"
    assert registry.list_languages() == ["en", "de", "fr"]


def test_ready_only_after_all_loaded():
    registry = LanguageRegistry(["en", "de"])
    assert registry.is_ready() is False

    registry.load("en", {"hero": "Harold"})
    assert registry.is_ready() is False
    assert registry.is_loaded("en")

    registry.load("de", {})
    assert registry.is_ready() is True, "Пустой документ тоже считается загруженным"


def test_load_flattens_document():
    registry = LanguageRegistry(["en"])
    registry.load("en", {"text": {"test": "This is a test"}})
    assert registry.table_for("en") == {"text.test": "This is a test"}


def test_load_overwrites():
    registry = LanguageRegistry(["en"])
    registry.load("en", {"a": "1"})
    registry.load("en", {"b": "2"})
    assert registry.table_for("en") == {"b": "2"}


def test_load_unknown_language():
    registry = LanguageRegistry(["en"])
    with pytest.raises(KeyError):
        registry.load("xx", {})


def test_set_active_known_language():
    registry = LanguageRegistry(["en", "de"])
    assert registry.set_active("de") == "de"
    assert registry.active == "de"


@pytest.mark.parametrize("value", ["fr", "", None, 42, "EN"])
def test_set_active_falls_back_to_default(value):
    registry = LanguageRegistry(["en", "de"])
    registry.set_active("de")
    registry.set_active(value)
    assert registry.get_active() == "en"


def test_active_property_setter():
    registry = LanguageRegistry(["en", "de"])
    registry.active = "de"
    assert registry.active == "de"
    registry.active = "unknown"
    assert registry.active == "en"


def test_table_for_unknown_or_unloaded():
    registry = LanguageRegistry(["en", "de"])
    registry.load("en", {"hero": "Harold"})
    assert registry.table_for("de") == {}
    assert registry.table_for("fr") == {}
    assert registry.table_for(None) == {}


def test_active_table_follows_language():
    registry = LanguageRegistry(["en", "de"])
    registry.load("en", {"menu": {"language": "Language"}})
    registry.load("de", {"menu": {"language": "Sprache"}})
    registry.set_active("de")
    assert registry.active_table() == {"menu.language": "Sprache"}


def test_set_languages_resets_tables():
    registry = LanguageRegistry(["en"])
    registry.load("en", {"a": "1"})
    registry.set_languages(["de", "en"])
    assert registry.active == "de"
    assert registry.is_ready() is False
    assert registry.table_for("en") == {}


def test_no_languages():
    registry = LanguageRegistry([])
    assert registry.default is None
    assert registry.is_ready() is True
    assert registry.set_active("en") is None
    assert registry.active_table() == {}


def test_list_languages_is_a_copy():
    registry = LanguageRegistry(["en", "de"])
    registry.list_languages().append("fr")
    assert registry.list_languages() == ["en", "de"]
