# app/bot/handlers/errors.py
"""
Ловушка для ошибок внутри обработчиков бота.

Если обработчик упал - логируем и считаем апдейт обработанным,
чтобы polling/webhook не спотыкались на одном и том же апдейте.
"""

from aiogram import Router
from aiogram.types import ErrorEvent
import structlog

logger = structlog.get_logger()

router = Router(name="errors")


@router.errors()
async def handle_error(event: ErrorEvent):
    update = event.update
    logger.error(
        "bot_update_error",
        update_id=update.update_id if update else None,
        error=str(event.exception),
        error_type=type(event.exception).__name__
    )
    return True
