"""
Клавиатура выбора языка для Telegram (aiogram).
"""

from typing import Optional

from aiogram.types import InlineKeyboardMarkup, InlineKeyboardButton

from core.menu import LanguageOption

CALLBACK_PREFIX = "lang_"


def kb_languages(option: LanguageOption) -> InlineKeyboardMarkup:
    """Кнопка на каждый язык, текущий выбор отмечен галочкой."""
    buttons = []
    for language in option.localization.languages():
        mark = "✅ " if language == option.pending else ""
        buttons.append([InlineKeyboardButton(
            text=f"{mark}{option.status_text(language)}",
            callback_data=f"{CALLBACK_PREFIX}{language}"
        )])
    return InlineKeyboardMarkup(inline_keyboard=buttons)


def parse_language_callback(data: Optional[str]) -> Optional[str]:
    """lang_de -> "de". Чужие callback возвращают None."""
    if not data or not data.startswith(CALLBACK_PREFIX):
        return None
    return data[len(CALLBACK_PREFIX):]
