"""
Настройки приложения.

Все значения читаются из переменных окружения с разумными значениями по умолчанию.
"""

import logging
import os
from pathlib import Path

# ============= ПУТИ =============

BASE_DIR = Path(__file__).resolve().parent.parent
LOCALES_DIR = BASE_DIR / "locales"
I18N_CONFIG_PATH = Path(os.getenv("I18N_CONFIG", BASE_DIR / "config" / "localization.yaml"))

# ============= БАЗА ДАННЫХ =============

DATABASE_URL = os.getenv("DATABASE_URL")

# ============= ЛОГИРОВАНИЕ =============

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

_logging_configured = False


def get_logger(name: str) -> logging.Logger:
    """Возвращает логгер, при первом вызове настраивает корневое логирование."""
    global _logging_configured
    if not _logging_configured:
        logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
        _logging_configured = True
    return logging.getLogger(name)


def validate_env() -> list[str]:
    """Возвращает список незаданных переменных окружения, нужных для хранения языка."""
    missing = []
    if not DATABASE_URL:
        missing.append("DATABASE_URL")
    return missing
