"""
Хендлеры выбора языка для Telegram (aiogram).

Использование:
    router = create_language_router(option, storage)
    dp.include_router(router)
"""

import logging

from aiogram import Router, F
from aiogram.exceptions import TelegramBadRequest
from aiogram.filters import Command
from aiogram.types import Message, CallbackQuery

from core.keyboards import CALLBACK_PREFIX, kb_languages, parse_language_callback
from core.menu import LanguageOption
from core.storage import LanguageStorage

logger = logging.getLogger(__name__)


async def handle_language_selected(callback: CallbackQuery, option: LanguageOption,
                                   storage: LanguageStorage) -> None:
    """
    Применяет язык из нажатой кнопки и обновляет сообщение с клавиатурой.

    Повторное нажатие на текущий язык не редактирует сообщение:
    Telegram отвечает "message is not modified" на неизменённый текст.
    """
    previous = option.localization.language
    option.select(parse_language_callback(callback.data))
    await storage.save_language(callback.from_user.id)
    logger.info(f"User {callback.from_user.id} switched language to {option.pending}")

    if option.pending != previous:
        try:
            await callback.message.edit_text(option.title(), reply_markup=kb_languages(option))
        except TelegramBadRequest as e:
            logger.warning(f"Cannot update language menu: {e}")
    await callback.answer(option.status_text())


def create_language_router(option: LanguageOption, storage: LanguageStorage) -> Router:
    """Роутер с командой /language и обработкой нажатий на кнопки языка."""
    router = Router(name="language")

    @router.message(Command("language"))
    async def cmd_language(message: Message):
        await message.answer(option.title(), reply_markup=kb_languages(option))

    @router.callback_query(F.data.startswith(CALLBACK_PREFIX))
    async def on_language_selected(callback: CallbackQuery):
        await handle_language_selected(callback, option, storage)

    return router
