"""
Управление подключением к базе данных.

Пул соединений PostgreSQL через asyncpg. Используется для хранения
выбранного языка между перезапусками.
"""

import asyncpg
from typing import Optional

from config import DATABASE_URL, get_logger

logger = get_logger(__name__)

# Глобальный пул соединений
_pool: Optional[asyncpg.Pool] = None


async def get_pool() -> asyncpg.Pool:
    """Получить пул соединений (создать если не существует)"""
    global _pool
    if _pool is None:
        if not DATABASE_URL:
            raise RuntimeError("DATABASE_URL is not set")
        try:
            _pool = await asyncpg.create_pool(DATABASE_URL)
            logger.info("Connection pool created")
        except Exception as e:
            logger.error(f"Failed to create connection pool: {e}")
            raise
    return _pool


async def close_pool():
    """Закрыть пул соединений"""
    global _pool
    if _pool:
        await _pool.close()
        _pool = None
        logger.info("Connection pool closed")


async def init_db() -> asyncpg.Pool:
    """Создать пул и таблицы"""
    pool = await get_pool()

    from .models import create_tables
    await create_tables(pool)

    logger.info("Database initialized")
    return pool
