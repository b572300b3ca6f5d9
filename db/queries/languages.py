"""
Запросы для работы с выбранным языком (таблица language_settings).
"""

from typing import Optional

from config import get_logger
from db.connection import get_pool

logger = get_logger(__name__)


class LanguageRepository:
    """Хранение выбранного языка в PostgreSQL."""

    def __init__(self, pool=None):
        """
        Args:
            pool: asyncpg пул. По умолчанию берётся глобальный из db.connection
        """
        self._pool = pool

    async def _get_pool(self):
        if self._pool is None:
            self._pool = await get_pool()
        return self._pool

    async def get_language(self, owner_id: int) -> Optional[str]:
        """Получить сохранённый язык или None"""
        pool = await self._get_pool()
        async with pool.acquire() as conn:
            row = await conn.fetchrow(
                'SELECT language FROM language_settings WHERE owner_id = $1', owner_id
            )
        return row['language'] if row else None

    async def set_language(self, owner_id: int, language: str) -> None:
        """Сохранить язык (upsert)"""
        pool = await self._get_pool()
        async with pool.acquire() as conn:
            await conn.execute(
                '''INSERT INTO language_settings (owner_id, language, updated_at)
                   VALUES ($1, $2, NOW())
                   ON CONFLICT (owner_id)
                   DO UPDATE SET language = EXCLUDED.language, updated_at = NOW()''',
                owner_id, language
            )
        logger.debug(f"Saved language {language} for {owner_id}")
