"""
Resolver — подстановка токенов до неподвижной точки.

Значения в таблице могут сами содержать токены:

    hero: "Harold"
    greet: "Hi, I'm #{hero}"

Каждый проход заменяет все найденные токены, затем строка сканируется заново.
Цикл заканчивается, когда очередной проход не нашёл ни одного токена.
Циклические ссылки (a -> b -> a) обрываются пределом max_passes.
"""

import logging
from typing import Any, Iterable, Optional

from .errors import ResolutionError
from .matcher import TokenPattern
from .registry import LanguageRegistry

logger = logging.getLogger(__name__)

UNDEFINED = "undefined"


def to_text(value: Any) -> str:
    """Строковое представление значения из таблицы или входного текста."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class Resolver:
    """
    Заменяет токены в тексте значениями из таблицы текущего языка.

    Таблица читается из реестра в момент вызова, поэтому смена языка
    сразу влияет на результат.
    """

    def __init__(
        self,
        pattern: TokenPattern,
        registry: LanguageRegistry,
        undefined: str = UNDEFINED,
        max_passes: Optional[int] = 100,
    ):
        """
        Args:
            pattern: Скомпилированный шаблон токена
            registry: Реестр языковых таблиц
            undefined: Подстановка для отсутствующих ключей
            max_passes: Предел проходов, None или 0 — без предела
        """
        self.pattern = pattern
        self.registry = registry
        self.undefined = undefined
        # 0 и отрицательные значения отключают предел, как в localization.yaml
        self.max_passes = max_passes if max_passes is not None and max_passes > 0 else None

    def _lookup(self, table: dict[str, Any], language: Optional[str]):
        def replace(key: str) -> str:
            if key not in table:
                logger.warning(f"Translation not found: {key} ({language})")
                return self.undefined
            return to_text(table[key])
        return replace

    def _passes(self, text: str):
        """Генерирует (строка, подставленные ключи) после каждого прохода с заменами."""
        language = self.registry.active
        replace = self._lookup(self.registry.table_for(language), language)
        passes = 0

        while True:
            text, keys = self.pattern.sub(replace, text)
            if not keys:
                return
            passes += 1
            if self.max_passes is not None and passes > self.max_passes:
                raise ResolutionError(text, keys, self.max_passes)
            yield text, keys

    def resolve(self, text: Any) -> Any:
        """
        Локализует текст.

        None возвращается как есть, остальные значения приводятся к строке.

        Raises:
            ResolutionError: Если подстановка не сошлась за max_passes проходов
        """
        if text is None:
            return None

        result = to_text(text)
        for result, _ in self._passes(result):
            pass
        return result

    def resolve_many(self, texts: Iterable[Any]) -> list:
        return [self.resolve(text) for text in texts]

    def trace(self, text: Any) -> list[str]:
        """Промежуточные строки после каждого прохода, начиная с исходной. Для отладки цепочек ссылок."""
        if text is None:
            return []
        text = to_text(text)
        return [text] + [step for step, _ in self._passes(text)]
