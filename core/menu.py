"""
LanguageOption — пункт "Язык" в меню настроек.

Выбор в меню хранится отдельно от текущего языка (pending) и применяется
только при сохранении настроек, чтобы интерфейс не переключался на ходу.

Использование:
    option = LanguageOption(loc, label="#{menu.language}", labels="en:English, de:Deutsch")

    option.next_language()      # pending: "de"
    option.status_text()        # "Deutsch"
    option.make_data()          # применяет "de", -> {"language": "de"}
"""

import re
from typing import Any, Optional

from i18n import Localization

_ENTRY_SEPARATOR = re.compile(r"\s*,\s*")


def parse_labels(value: str) -> dict[str, str]:
    """
    Разбирает подписи языков "en:English, de:Deutsch".

    Элементы, в которых не ровно одно двоеточие, пропускаются.
    """
    labels = {}
    for entry in _ENTRY_SEPARATOR.split(value.strip()):
        parts = entry.split(":")
        if len(parts) == 2:
            labels[parts[0]] = parts[1]
    return labels


class LanguageOption:
    """Выбор языка с циклическим перебором."""

    def __init__(self, localization: Localization, label: str = "Language", labels: str = ""):
        self.localization = localization
        self.label = label
        self.labels = parse_labels(labels)
        self.pending: Optional[str] = localization.language

    def title(self) -> str:
        """Подпись пункта меню (может содержать токены)."""
        return self.localization.localize(self.label)

    def status_text(self, language: Optional[str] = None) -> str:
        """Подпись языка, по умолчанию — выбранного в меню."""
        if language is None:
            language = self.pending
        return self.labels.get(language, language or "")

    def _shift(self, step: int) -> Optional[str]:
        languages = self.localization.languages()
        if not languages:
            return None
        if self.pending in languages:
            index = (languages.index(self.pending) + step) % len(languages)
        else:
            index = 0
        self.pending = languages[index]
        return self.pending

    def next_language(self) -> Optional[str]:
        """Следующий язык, после последнего — первый."""
        return self._shift(1)

    def previous_language(self) -> Optional[str]:
        """Предыдущий язык, перед первым — последний."""
        return self._shift(-1)

    def select(self, language: Optional[str]) -> None:
        self.pending = language

    def apply(self) -> Optional[str]:
        """Применяет выбранный язык и возвращает фактический (с учётом fallback)."""
        self.localization.language = self.pending
        self.pending = self.localization.language
        return self.pending

    def make_data(self) -> dict[str, Any]:
        """Данные для сохранения настроек. Выбор применяется перед сохранением."""
        return {"language": self.apply()}

    def apply_data(self, config: Optional[dict]) -> Optional[str]:
        """Восстанавливает язык из сохранённых настроек. Невалидное значение даёт язык по умолчанию."""
        self.pending = (config or {}).get("language")
        return self.apply()
