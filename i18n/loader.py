"""
Загрузка документов с переводами.

Путь к файлу языка задаётся шаблоном с "{lang}":

    locales/{lang}.yaml   -> locales/en.yaml, locales/de.yaml
    https://cdn.example.com/i18n/{lang}.json

Формат файла определяется по расширению: .json — JSON, .yaml/.yml — YAML.

Использование:
    from i18n.loader import FileDocumentSource, load_all

    source = FileDocumentSource("locales/{lang}.yaml", base_dir=BASE_DIR)
    load_all(registry, source)

Ошибка чтения любого языка фатальна: DocumentLoadError пробрасывается вызывающему.
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Any

import aiohttp
import yaml

from .errors import DocumentLoadError
from .registry import LanguageRegistry

logger = logging.getLogger(__name__)

LANG_PLACEHOLDER = "{lang}"


def _is_yaml(name: str) -> bool:
    return name.lower().endswith((".yaml", ".yml"))


def parse_document(content: str, name: str) -> Any:
    """Разбирает содержимое файла языка в зависимости от расширения."""
    if _is_yaml(name):
        return yaml.safe_load(content) or {}
    return json.loads(content)


class FileDocumentSource:
    """Читает документы языков с диска."""

    def __init__(self, path_template: str, base_dir: Path | str | None = None):
        """
        Args:
            path_template: Путь с "{lang}", например "locales/{lang}.yaml"
            base_dir: Папка, относительно которой разрешаются относительные пути
        """
        self.path_template = path_template
        self.base_dir = Path(base_dir) if base_dir is not None else None

    def path_for(self, language: str) -> Path:
        path = Path(self.path_template.replace(LANG_PLACEHOLDER, language))
        if self.base_dir is not None and not path.is_absolute():
            path = self.base_dir / path
        return path

    def load(self, language: str) -> Any:
        """
        Читает документ языка.

        Raises:
            DocumentLoadError: Файл не найден, не читается или содержит невалидный JSON/YAML
        """
        path = self.path_for(language)
        try:
            with open(path, "r", encoding="utf-8") as f:
                return parse_document(f.read(), path.name)
        except FileNotFoundError:
            raise DocumentLoadError(language, str(path), "file not found")
        except OSError as e:
            raise DocumentLoadError(language, str(path), f"cannot read file: {e}")
        except UnicodeDecodeError as e:
            raise DocumentLoadError(language, str(path), f"invalid encoding: {e}")
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise DocumentLoadError(language, str(path), f"invalid document: {e}")

    async def load_async(self, language: str) -> Any:
        return self.load(language)


class HttpDocumentSource:
    """Загружает документы языков по HTTP."""

    def __init__(self, url_template: str, timeout: float = 30):
        """
        Args:
            url_template: URL с "{lang}"
            timeout: Таймаут запроса в секундах
        """
        self.url_template = url_template
        self.timeout = timeout

    def url_for(self, language: str) -> str:
        return self.url_template.replace(LANG_PLACEHOLDER, language)

    async def load_async(self, language: str) -> Any:
        """
        Загружает документ языка.

        Raises:
            DocumentLoadError: HTTP ошибка, таймаут или невалидный документ
        """
        url = self.url_for(language)
        try:
            async with aiohttp.ClientSession() as session:
                async with session.get(
                    url,
                    timeout=aiohttp.ClientTimeout(total=self.timeout)
                ) as resp:
                    if resp.status != 200:
                        raise DocumentLoadError(language, url, f"HTTP error {resp.status}")
                    content = await resp.text()
        except asyncio.TimeoutError:
            raise DocumentLoadError(language, url, "request timeout")
        except aiohttp.ClientError as e:
            raise DocumentLoadError(language, url, str(e))
        except UnicodeDecodeError as e:
            raise DocumentLoadError(language, url, f"invalid encoding: {e}")

        try:
            return parse_document(content, url)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise DocumentLoadError(language, url, f"invalid document: {e}")

    def load(self, language: str) -> Any:
        return asyncio.run(self.load_async(language))


def load_all(registry: LanguageRegistry, source) -> None:
    """Загружает документы всех настроенных языков в реестр."""
    for language in registry.list_languages():
        registry.load(language, source.load(language))
    logger.info(f"Loaded languages: {registry.list_languages()}")


async def load_all_async(registry: LanguageRegistry, source) -> None:
    """Асинхронно загружает документы всех языков параллельно."""
    languages = registry.list_languages()
    documents = await asyncio.gather(*(source.load_async(lang) for lang in languages))
    for language, document in zip(languages, documents):
        registry.load(language, document)
    logger.info(f"Loaded languages: {languages}")
