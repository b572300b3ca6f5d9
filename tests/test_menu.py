"""
Тесты выбора языка: пункт меню, хранение, клавиатура.

Запуск: python -m pytest tests/test_menu.py -v
"""

import sys
import os
import asyncio
from types import SimpleNamespace

import pytest
from aiogram.exceptions import TelegramBadRequest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.menu import LanguageOption, parse_labels
from core.storage import LanguageStorage
from core.handlers import handle_language_selected
from core.keyboards import kb_languages, parse_language_callback
from i18n import Localization


@pytest.fixture
def loc():
    loc = Localization("#{{key}}", ["en", "de", "fr"])
    loc.registry.load("en", {"menu": {"language": "Language"}})
    loc.registry.load("de", {"menu": {"language": "Sprache"}})
    loc.registry.load("fr", {"menu": {"language": "Langue"}})
    return loc


@pytest.fixture
def option(loc):
    return LanguageOption(loc, label="#{menu.language}", labels="en:English, de:Deutsch")


class FakeRepo:
    """Хранилище в памяти вместо PostgreSQL"""

    def __init__(self, fail: bool = False):
        self.languages = {}
        self.fail = fail

    async def get_language(self, owner_id):
        if self.fail:
            raise ConnectionError("database is down")
        return self.languages.get(owner_id)

    async def set_language(self, owner_id, language):
        if self.fail:
            raise ConnectionError("database is down")
        self.languages[owner_id] = language


def test_parse_labels():
    assert parse_labels("en:English, de:Deutsch") == {"en": "English", "de": "Deutsch"}
    assert parse_labels("en:English,broken,a:b:c, fr:") == {"en": "English", "fr": ""}
    assert parse_labels("") == {}


def test_cycling_wraps_around(option):
    assert option.pending == "en"
    assert option.next_language() == "de"
    assert option.next_language() == "fr"
    assert option.next_language() == "en"
    assert option.previous_language() == "fr"


def test_pending_is_not_applied_until_saved(option, loc):
    option.next_language()
    assert loc.language == "en"
    assert option.make_data() == {"language": "de"}
    assert loc.language == "de"


def test_status_text_uses_labels(option):
    assert option.status_text() == "English"
    option.next_language()
    assert option.status_text() == "Deutsch"
    assert option.status_text("fr") == "fr", "Без подписи показывается код языка"


def test_title_is_localized(option, loc):
    assert option.title() == "Language"
    loc.language = "de"
    assert option.title() == "Sprache"


def test_invalid_pending_falls_back(option, loc):
    option.select("xx")
    assert option.make_data() == {"language": "en"}
    assert option.pending == "en"


def test_apply_data(option, loc):
    assert option.apply_data({"language": "fr"}) == "fr"
    assert loc.language == "fr"
    assert option.apply_data({}) == "en"
    assert option.apply_data(None) == "en"


def test_storage_roundtrip(option, loc):
    repo = FakeRepo()
    storage = LanguageStorage(repo, option)

    option.select("de")
    assert asyncio.run(storage.save_language(1)) is True
    assert repo.languages == {1: "de"}

    loc.language = "en"
    assert asyncio.run(storage.load_language(1)) == "de"
    assert loc.language == "de"


def test_storage_unknown_owner_gets_default(option, loc):
    storage = LanguageStorage(FakeRepo(), option)
    loc.language = "fr"
    assert asyncio.run(storage.load_language(42)) == "en"


def test_storage_errors_are_not_fatal(option, loc):
    storage = LanguageStorage(FakeRepo(fail=True), option)
    assert asyncio.run(storage.load_language(1)) == "en"
    option.select("de")
    assert asyncio.run(storage.save_language(1)) is False
    assert loc.language == "de", "Язык применяется даже если сохранить не удалось"


def test_keyboard(option):
    option.select("de")
    keyboard = kb_languages(option)
    rows = keyboard.inline_keyboard
    assert [row[0].callback_data for row in rows] == ["lang_en", "lang_de", "lang_fr"]
    assert [row[0].text for row in rows] == ["English", "✅ Deutsch", "fr"]


def test_parse_language_callback():
    assert parse_language_callback("lang_de") == "de"
    assert parse_language_callback("diff_easy") is None
    assert parse_language_callback(None) is None


# ============= Нажатие на кнопку языка =============

class FakeCallback:
    """Минимальный CallbackQuery: записывает edit_text и answer"""

    def __init__(self, data, user_id=1, edit_error=None):
        self.data = data
        self.from_user = SimpleNamespace(id=user_id)
        self.message = SimpleNamespace(edit_text=self._edit_text)
        self.edits = []
        self.answers = []
        self.edit_error = edit_error

    async def _edit_text(self, text, reply_markup=None):
        if self.edit_error is not None:
            raise self.edit_error
        self.edits.append(text)

    async def answer(self, text=None):
        self.answers.append(text)


def test_language_selected_updates_menu(option, loc):
    repo = FakeRepo()
    callback = FakeCallback("lang_de")
    asyncio.run(handle_language_selected(callback, option, LanguageStorage(repo, option)))

    assert loc.language == "de"
    assert repo.languages == {1: "de"}
    assert callback.edits == ["Sprache"]
    assert callback.answers == ["Deutsch"]


def test_same_language_does_not_edit_message(option, loc):
    callback = FakeCallback("lang_en")
    asyncio.run(handle_language_selected(callback, option, LanguageStorage(FakeRepo(), option)))

    assert callback.edits == [], "Сообщение не меняется, Telegram отклонил бы такое редактирование"
    assert callback.answers == ["English"], "Нажатие всё равно подтверждается"


def test_unknown_language_falls_back_without_edit(option, loc):
    callback = FakeCallback("lang_xx")
    asyncio.run(handle_language_selected(callback, option, LanguageStorage(FakeRepo(), option)))

    assert loc.language == "en"
    assert callback.edits == []
    assert callback.answers == ["English"]


def test_edit_error_still_answers(option, loc):
    error = TelegramBadRequest(method=None, message="Bad Request: message is not modified")
    callback = FakeCallback("lang_de", edit_error=error)
    asyncio.run(handle_language_selected(callback, option, LanguageStorage(FakeRepo(), option)))

    assert loc.language == "de"
    assert callback.answers == ["Deutsch"]
