"""
Модели базы данных (SQL схемы).
"""

import asyncpg
from config import get_logger

logger = get_logger(__name__)


async def create_tables(pool: asyncpg.Pool):
    """Создание таблиц"""
    async with pool.acquire() as conn:
        # Выбранный язык владельца (пользователь, чат, сохранение)
        await conn.execute('''
            CREATE TABLE IF NOT EXISTS language_settings (
                owner_id BIGINT PRIMARY KEY,
                language TEXT DEFAULT NULL,
                updated_at TIMESTAMP DEFAULT NOW()
            )
        ''')

    logger.info("Tables created")
