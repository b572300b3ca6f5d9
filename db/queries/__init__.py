"""
Функции для работы с базой данных.

Модули:
- languages.py: работа с таблицей language_settings
"""

from .languages import LanguageRepository

__all__ = [
    'LanguageRepository',
]
