# app/bot/services/notifications.py
"""
Сервис для отправки уведомлений в чат.

Отправка идёт "в фоне": HTTP-ответ не ждёт Telegram.
Если отправка упала - клиент об этом не узнает, ошибка попадёт только в лог.
"""

import asyncio
from typing import Set, Union

from aiogram import Bot
import structlog

from app.bot.services.formatters import Notification

logger = structlog.get_logger()

# Держим ссылки на задачи, иначе сборщик мусора может их убить до завершения
_pending: Set[asyncio.Task] = set()


def pending_notifications() -> Set[asyncio.Task]:
    """Задачи отправки которые ещё не завершились."""
    return set(_pending)


def _on_done(chat_id: Union[int, str], task: asyncio.Task) -> None:
    _pending.discard(task)

    if task.cancelled():
        logger.warning("notification_dispatch_cancelled", chat_id=chat_id)
        return

    error = task.exception()
    if error is not None:
        logger.error(
            "notification_dispatch_failed",
            chat_id=chat_id,
            error=str(error),
            error_type=type(error).__name__
        )
    else:
        logger.info("notification_sent", chat_id=chat_id)


def dispatch_notification(
    bot: Bot,
    chat_id: Union[int, str],
    notification: Notification,
) -> asyncio.Task:
    """
    Отправляет уведомление и НЕ ждёт результата.

    bot.send_message вызывается сразу, а ожидание ответа Telegram
    уходит в отдельную задачу.
    """
    coro = bot.send_message(
        chat_id=chat_id,
        text=notification.text,
        parse_mode=notification.parse_mode
    )
    task = asyncio.ensure_future(coro)
    _pending.add(task)
    task.add_done_callback(lambda t: _on_done(chat_id, t))
    return task
