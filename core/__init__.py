"""
Интеграция локализации с приложением.

Содержит:
- menu.py: LanguageOption — выбор языка в меню настроек
- storage.py: LanguageStorage — сохранение выбранного языка
- keyboards.py: клавиатура выбора языка (aiogram)
- handlers.py: роутер /language (aiogram)
"""

from .menu import LanguageOption, parse_labels
from .storage import LanguageStorage

__all__ = [
    'LanguageOption',
    'parse_labels',
    'LanguageStorage',
]
