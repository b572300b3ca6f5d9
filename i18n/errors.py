"""Исключения движка локализации."""


class LocalizationError(Exception):
    """Базовая ошибка локализации."""
    pass


class DocumentLoadError(LocalizationError):
    """Не удалось прочитать или разобрать файл языка."""

    def __init__(self, language: str, source: str, reason: str):
        self.language = language
        self.source = source
        self.reason = reason
        super().__init__(f"Error loading language '{language}' from '{source}': {reason}")


class ResolutionError(LocalizationError):
    """Подстановка не сошлась за допустимое число проходов (вероятно, циклическая ссылка)."""

    def __init__(self, text: str, keys: list[str], passes: int):
        self.text = text
        self.keys = keys
        self.passes = passes
        chain = " -> ".join(keys)
        super().__init__(f"Text did not resolve after {passes} passes, last substituted keys: {chain}")
