# app/bot/handlers/chat_id.py
"""
Команда /id - бот отвечает id текущего чата.

Нужна чтобы узнать что писать в BOT_CHAT.
Работает только в личке с ботом.
"""

from typing import Union

from aiogram import Router, types
from aiogram.enums import ChatType
from aiogram.filters import Command
import structlog

from app.bot.filters.chat_type import ChatTypeFilter

logger = structlog.get_logger()

router = Router(name="chat_id")
router.message.filter(ChatTypeFilter(ChatType.PRIVATE))


def chat_id_reply(chat_id: Union[int, str]) -> str:
    return f"Ваш чат id - {chat_id}"


@router.message(Command("id"))
async def cmd_id(message: types.Message):
    """Обработчик команды /id"""
    logger.info(
        "command_id",
        chat_id=message.chat.id,
        user_id=message.from_user.id if message.from_user else None
    )
    await message.answer(chat_id_reply(message.chat.id))
