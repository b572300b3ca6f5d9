"""
Localization — точка входа для приложения.

Связывает реестр языков, шаблон токена и Resolver.

Использование:
    from i18n import get_localization

    loc = get_localization()
    loc.load()

    loc.language = "de"
    loc.localize("#{menu.language}")   # -> "Sprache"
"""

import asyncio
import logging
import time
from typing import Any, Callable, Optional

from config import BASE_DIR, LocalizationConfig

from .loader import FileDocumentSource, load_all, load_all_async
from .matcher import compile_pattern
from .registry import LanguageRegistry
from .resolver import UNDEFINED, Resolver

logger = logging.getLogger(__name__)

LanguageListener = Callable[[Optional[str]], None]


class Localization:
    """
    Фасад локализации.

    Хранит один текущий язык на процесс. Слушатели смены языка вызываются
    после каждого присваивания language, с фактически выбранным языком.
    """

    def __init__(
        self,
        escape_code: str,
        languages: list[str],
        source=None,
        undefined: str = UNDEFINED,
        max_passes: Optional[int] = 100,
    ):
        """
        Args:
            escape_code: Шаблон токена, например "#{{key}}"
            languages: Коды языков, первый — по умолчанию
            source: Источник документов (FileDocumentSource/HttpDocumentSource)
            undefined: Подстановка для отсутствующих ключей
            max_passes: Предел проходов подстановки
        """
        self.pattern = compile_pattern(escape_code)
        self.registry = LanguageRegistry(languages)
        self.resolver = Resolver(self.pattern, self.registry, undefined, max_passes)
        self.source = source
        self._listeners: list[LanguageListener] = []

    @classmethod
    def from_config(cls, config: Optional[LocalizationConfig] = None) -> "Localization":
        """Создаёт экземпляр по localization.yaml (и переменным окружения)."""
        if config is None:
            config = LocalizationConfig()
        return cls(
            escape_code=config.escape_code,
            languages=config.languages,
            source=FileDocumentSource(config.file_path, base_dir=BASE_DIR),
            undefined=config.undefined,
            max_passes=config.max_passes,
        )

    # ============= ЗАГРУЗКА =============

    def load(self) -> None:
        """Загружает все языки из источника. DocumentLoadError пробрасывается."""
        if self.source is None:
            raise RuntimeError("No document source configured")
        load_all(self.registry, self.source)

    async def load_async(self) -> None:
        if self.source is None:
            raise RuntimeError("No document source configured")
        await load_all_async(self.registry, self.source)

    def is_ready(self) -> bool:
        return self.registry.is_ready()

    async def wait_ready(self, poll_interval: float = 0.05, timeout: Optional[float] = None) -> bool:
        """
        Ждёт, пока загрузятся все языки.

        Returns:
            True если готово, False если истёк timeout
        """
        started = time.monotonic()
        while not self.is_ready():
            if timeout is not None and time.monotonic() - started >= timeout:
                logger.warning(f"Localization not ready after {timeout}s")
                return False
            await asyncio.sleep(poll_interval)
        return True

    # ============= ЯЗЫК =============

    @property
    def language(self) -> Optional[str]:
        return self.registry.active

    @language.setter
    def language(self, value: Optional[str]) -> None:
        applied = self.registry.set_active(value)
        for listener in list(self._listeners):
            try:
                listener(applied)
            except Exception as e:
                logger.error(f"Language listener failed: {e}")

    def languages(self) -> list[str]:
        return self.registry.list_languages()

    def on_language_change(self, listener: LanguageListener) -> LanguageListener:
        """Подписывает слушателя на смену языка. Можно использовать как декоратор."""
        self._listeners.append(listener)
        return listener

    # ============= ПЕРЕВОД =============

    def localize(self, text: Any) -> Any:
        return self.resolver.resolve(text)

    def __call__(self, text: Any) -> Any:
        """Позволяет вызывать как функцию: loc("#{hero}")"""
        return self.localize(text)


# Глобальный экземпляр, создаётся при первом обращении
_localization: Optional[Localization] = None


def get_localization() -> Localization:
    """Возвращает глобальный экземпляр (без загрузки языков)."""
    global _localization
    if _localization is None:
        _localization = Localization.from_config()
    return _localization


def localize(text: Any) -> Any:
    """Shortcut для get_localization().localize(text)."""
    return get_localization().localize(text)
