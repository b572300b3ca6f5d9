"""
Конфигурация движка локализации.

Позволяет:
- Задавать шаблон токена, список языков и путь к файлам в localization.yaml
- Переопределять любые значения через переменные окружения

Использование:
    from config.localization import LocalizationConfig

    config = LocalizationConfig()
    config.escape_code   # "#{{key}}"
    config.languages     # ["en", "de"]
"""

import os
import re
from pathlib import Path
from typing import Any

import yaml

from .settings import I18N_CONFIG_PATH

DEFAULT_ESCAPE_CODE = "#{{key}}"
DEFAULT_LANGUAGES = ["en"]
DEFAULT_FILE_PATH = "{lang}.json"
DEFAULT_UNDEFINED = "undefined"
DEFAULT_MAX_PASSES = 100

_LANGUAGE_SEPARATOR = re.compile(r"\s*,\s*")


def parse_languages(value: Any) -> list[str]:
    """
    Приводит список языков к виду ["en", "de"].

    Принимает список или строку через запятую ("en, de"). Пустые элементы отбрасываются.
    """
    if value is None:
        return []
    if isinstance(value, str):
        items = _LANGUAGE_SEPARATOR.split(value.strip())
    elif not isinstance(value, (list, tuple)):
        # Одиночное значение, например из env: LOCALIZATION_LANGUAGES=1
        items = [str(value).strip()]
    else:
        items = [str(item).strip() for item in value]
    return [item for item in items if item]


class LocalizationConfig:
    """
    Параметры локализации.

    Загружает конфигурацию из localization.yaml.
    Переменные окружения имеют приоритет над значениями в файле.

    Формат env переменных: путь с точками заменяется на подчёркивания в верхнем регистре.
    Пример: "localization.languages" → "LOCALIZATION_LANGUAGES"
    """

    def __init__(self, config_path: str = None):
        """
        Args:
            config_path: Путь к localization.yaml. По умолчанию I18N_CONFIG_PATH
        """
        if config_path is None:
            config_path = I18N_CONFIG_PATH

        self._config: dict = {}
        self._load_config(Path(config_path))

    def _load_config(self, path: Path) -> None:
        """Загружает конфигурацию из YAML файла."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                self._config = yaml.safe_load(f) or {}
        except FileNotFoundError:
            # Без файла работаем на значениях по умолчанию
            self._config = {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path.name}: {e}")

    def get(self, path: str, default: Any = None) -> Any:
        """
        Получает значение по пути через точку.

        Args:
            path: Путь к значению (например, "localization.escape_code")
            default: Значение по умолчанию

        Returns:
            Значение из env, из конфига или default
        """
        env_name = path.upper().replace(".", "_")
        env_value = os.getenv(env_name)

        if env_value is not None:
            try:
                return int(env_value)
            except ValueError:
                pass
            return env_value

        value = self._get_value(path)
        return value if value is not None else default

    def _get_value(self, path: str) -> Any:
        """Получает значение по пути через точку."""
        keys = path.split(".")
        value = self._config

        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return None

        return value

    @property
    def escape_code(self) -> str:
        return str(self.get("localization.escape_code", DEFAULT_ESCAPE_CODE))

    @property
    def languages(self) -> list[str]:
        return parse_languages(self.get("localization.languages", DEFAULT_LANGUAGES))

    @property
    def file_path(self) -> str:
        return str(self.get("localization.file_path", DEFAULT_FILE_PATH))

    @property
    def undefined(self) -> str:
        return str(self.get("localization.undefined", DEFAULT_UNDEFINED))

    @property
    def max_passes(self) -> int | None:
        value = self.get("localization.max_passes", DEFAULT_MAX_PASSES)
        try:
            passes = int(value)
        except (TypeError, ValueError):
            raise ValueError(f"localization.max_passes must be an integer, got {value!r}")
        # 0 или отрицательное значение отключает предел
        return passes if passes > 0 else None

    @property
    def option_label(self) -> str:
        return str(self.get("menu.option_label", "Language"))

    @property
    def language_labels(self) -> str:
        return str(self.get("menu.language_labels", ""))

    def reload(self, config_path: str = None) -> None:
        """Перезагружает конфигурацию из файла."""
        if config_path is None:
            config_path = I18N_CONFIG_PATH
        self._load_config(Path(config_path))
