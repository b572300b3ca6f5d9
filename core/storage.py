"""
LanguageStorage — сохранение выбранного языка между перезапусками.

Использование:
    from core.storage import LanguageStorage
    from db.queries import LanguageRepository

    storage = LanguageStorage(LanguageRepository(), option)

    # При старте
    language = await storage.load_language(owner_id)

    # После смены языка в меню
    await storage.save_language(owner_id)
"""

import logging
from typing import Optional

from core.menu import LanguageOption

logger = logging.getLogger(__name__)


class LanguageStorage:
    """
    Связывает пункт меню языка с хранилищем.

    Репозиторий должен иметь async методы get_language(owner_id) и
    set_language(owner_id, language).
    """

    def __init__(self, repo, option: LanguageOption):
        self.repo = repo
        self.option = option

    async def load_language(self, owner_id: int) -> Optional[str]:
        """
        Загружает сохранённый язык и применяет его.

        Returns:
            Фактический язык. При ошибке хранилища — язык по умолчанию
        """
        try:
            language = await self.repo.get_language(owner_id)
        except Exception as e:
            logger.error(f"Failed to load language for {owner_id}: {e}")
            language = None

        applied = self.option.apply_data({"language": language})
        logger.debug(f"Language for {owner_id}: {applied}")
        return applied

    async def save_language(self, owner_id: int) -> bool:
        """
        Применяет выбранный в меню язык и сохраняет его.

        Returns:
            True если сохранение успешно
        """
        data = self.option.make_data()
        try:
            await self.repo.set_language(owner_id, data["language"])
            return True
        except Exception as e:
            logger.error(f"Failed to save language for {owner_id}: {e}")
            return False
