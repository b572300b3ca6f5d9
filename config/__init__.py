"""
Модуль конфигурации.

Содержит:
- settings.py: пути, переменные окружения, логирование
- localization.py: параметры движка локализации (localization.yaml + env)
"""

from .settings import (
    # Пути
    BASE_DIR,
    LOCALES_DIR,
    I18N_CONFIG_PATH,

    # База данных
    DATABASE_URL,
    validate_env,

    # Логирование
    get_logger,
)

from .localization import LocalizationConfig, parse_languages

__all__ = [
    'BASE_DIR',
    'LOCALES_DIR',
    'I18N_CONFIG_PATH',
    'DATABASE_URL',
    'validate_env',
    'get_logger',
    'LocalizationConfig',
    'parse_languages',
]
