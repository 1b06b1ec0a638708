# app/bot/middlewares/logging.py
"""
Middleware для логирования всех входящих сообщений.
"""

from typing import Any, Awaitable, Callable

from aiogram import BaseMiddleware
from aiogram.types import Message
import structlog

logger = structlog.get_logger()


class LoggingMiddleware(BaseMiddleware):
    """Middleware который логирует каждое сообщение."""

    async def __call__(
        self,
        handler: Callable[[Message, dict[str, Any]], Awaitable[Any]],
        event: Message,
        data: dict[str, Any]
    ) -> Any:
        logger.info(
            "message_received",
            chat_id=event.chat.id,
            chat_type=event.chat.type,
            user_id=event.from_user.id if event.from_user else None,
            text=event.text[:50] if event.text else None
        )

        return await handler(event, data)
