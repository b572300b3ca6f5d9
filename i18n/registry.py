"""
LanguageRegistry — таблицы переводов по языкам и текущий язык.

Использование:
    registry = LanguageRegistry()
    registry.set_languages(["en", "de"])
    registry.load("en", {"hero": "Harold"})

    registry.is_ready()        # False, пока не загружен "de"
    registry.set_active("fr")  # неизвестный язык -> "en"
"""

import logging
from typing import Any, Optional

from .flatten import flatten

logger = logging.getLogger(__name__)

# Ключ таблицы для нераспознанного языка. Не совпадает ни с одним кодом языка.
UNRECOGNIZED = object()


class LanguageRegistry:
    """
    Хранит плоские таблицы для каждого языка.

    Таблица языка равна None, пока язык не загружен.
    Первый язык из списка — язык по умолчанию и начальный текущий язык.
    """

    def __init__(self, languages: Optional[list[str]] = None):
        self._languages: list[str] = []
        self._tables: dict[Any, Optional[dict[str, Any]]] = {UNRECOGNIZED: {}}
        self._active: Optional[str] = None
        if languages is not None:
            self.set_languages(languages)

    def set_languages(self, languages: list[str]) -> None:
        """
        Задаёт список поддерживаемых языков. Загруженные ранее таблицы сбрасываются.

        Args:
            languages: Коды языков, первый — язык по умолчанию
        """
        self._languages = list(languages)
        self._tables = {lang: None for lang in self._languages}
        self._tables[UNRECOGNIZED] = {}
        self._active = self.default
        logger.debug(f"Configured languages: {self._languages}")

    @property
    def default(self) -> Optional[str]:
        return self._languages[0] if self._languages else None

    def load(self, language: str, document: Any) -> None:
        """Флаттенит документ и сохраняет как таблицу языка. Повторный вызов перезаписывает таблицу."""
        self.load_table(language, flatten(document))

    def load_table(self, language: str, table: dict[str, Any]) -> None:
        """Сохраняет уже плоскую таблицу."""
        if language not in self._languages:
            raise KeyError(f"Language '{language}' is not configured")
        self._tables[language] = dict(table)
        logger.debug(f"Loaded {len(table)} keys for language: {language}")

    def is_ready(self) -> bool:
        """True, если загружены таблицы всех языков."""
        return all(self._tables.get(lang) is not None for lang in self._languages)

    def is_loaded(self, language: str) -> bool:
        return language in self._languages and self._tables.get(language) is not None

    @property
    def active(self) -> Optional[str]:
        return self._active

    @active.setter
    def active(self, value: Optional[str]) -> None:
        self.set_active(value)

    def get_active(self) -> Optional[str]:
        return self._active

    def set_active(self, value: Optional[str]) -> str:
        """
        Меняет текущий язык. Неизвестный язык молча заменяется языком по умолчанию.

        Returns:
            Язык, который стал текущим
        """
        if value in self._languages:
            self._active = value
        else:
            logger.debug(f"Unknown language {value!r}, falling back to {self.default!r}")
            self._active = self.default
        return self._active

    def table_for(self, language: Optional[str]) -> dict[str, Any]:
        """Таблица языка или пустая таблица, если язык неизвестен или ещё не загружен."""
        if language not in self._languages:
            return self._tables[UNRECOGNIZED]
        table = self._tables.get(language)
        return table if table is not None else self._tables[UNRECOGNIZED]

    def active_table(self) -> dict[str, Any]:
        return self.table_for(self._active)

    def list_languages(self) -> list[str]:
        """Список языков в порядке регистрации."""
        return list(self._languages)
