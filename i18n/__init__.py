"""
Модуль локализации по escape-кодам.

Архитектура:
- flatten.py: вложенный документ -> плоская таблица ключей через точку
- matcher.py: шаблон токена ("#{{key}}") -> регулярное выражение
- registry.py: таблицы по языкам, текущий язык с fallback на язык по умолчанию
- resolver.py: подстановка токенов до неподвижной точки
- loader.py: чтение документов с диска или по HTTP
- localization.py: фасад для приложения

Использование:
    from i18n import get_localization

    loc = get_localization()
    loc.load()

    loc.localize("#{greet}")   # -> "Hi, I'm Harold"
    loc.language = "de"

CLI:
    python -m i18n.checker check
    python -m i18n.checker refs
    python -m i18n.checker export --lang de --format csv
"""

from .errors import LocalizationError, DocumentLoadError, ResolutionError
from .flatten import flatten, unflatten
from .matcher import TokenPattern, compile_pattern, find_all
from .registry import LanguageRegistry
from .resolver import Resolver, UNDEFINED
from .loader import FileDocumentSource, HttpDocumentSource, load_all, load_all_async
from .localization import Localization, get_localization, localize

__all__ = [
    'LocalizationError',
    'DocumentLoadError',
    'ResolutionError',
    'flatten',
    'unflatten',
    'TokenPattern',
    'compile_pattern',
    'find_all',
    'LanguageRegistry',
    'Resolver',
    'UNDEFINED',
    'FileDocumentSource',
    'HttpDocumentSource',
    'load_all',
    'load_all_async',
    'Localization',
    'get_localization',
    'localize',
]
