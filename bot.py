"""
Telegram-бот на движке локализации.

Загружает языки при старте, ждёт готовности реестра, восстанавливает
сохранённый язык и локализует все исходящие тексты через localize().

Запуск:
    TELEGRAM_BOT_TOKEN=... DATABASE_URL=... python bot.py
"""

import asyncio
import os

from aiogram import Bot, Dispatcher, Router
from aiogram.filters import CommandStart
from aiogram.fsm.storage.memory import MemoryStorage
from aiogram.types import Message, BotCommand

from config import LocalizationConfig, get_logger, validate_env
from core.handlers import create_language_router
from core.menu import LanguageOption
from core.storage import LanguageStorage
from db import init_db
from db.queries import LanguageRepository
from i18n import get_localization

logger = get_logger(__name__)

BOT_TOKEN = os.getenv("TELEGRAM_BOT_TOKEN")


def create_start_router(storage: LanguageStorage) -> Router:
    router = Router(name="start")
    loc = storage.option.localization

    @router.message(CommandStart())
    async def cmd_start(message: Message):
        await storage.load_language(message.from_user.id)
        await message.answer(loc.localize("#{menu.start}"))

    return router


async def main():
    if not BOT_TOKEN:
        raise ValueError("TELEGRAM_BOT_TOKEN is not set")
    missing = validate_env()
    if missing:
        raise ValueError(f"Missing environment variables: {', '.join(missing)}")

    config = LocalizationConfig()
    loc = get_localization()
    await loc.load_async()
    if not await loc.wait_ready(timeout=30):
        raise RuntimeError("Languages were not loaded")
    logger.info(loc.localize("#{menu.ready}") + f": {loc.languages()}")

    await init_db()
    option = LanguageOption(loc, label=config.option_label, labels=config.language_labels)
    storage = LanguageStorage(LanguageRepository(), option)

    bot = Bot(token=BOT_TOKEN)
    dp = Dispatcher(storage=MemoryStorage())
    dp.include_router(create_start_router(storage))
    dp.include_router(create_language_router(option, storage))

    await bot.set_my_commands([
        BotCommand(command="start", description=loc.localize("#{menu.start}")),
        BotCommand(command="language", description=loc.localize("#{menu.language}")),
    ])

    logger.info("Bot started")
    await dp.start_polling(bot)


if __name__ == "__main__":
    asyncio.run(main())
