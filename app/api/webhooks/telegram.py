# app/api/webhooks/telegram.py
"""
Вебхук от Telegram.

Подключается только когда BOT_MODE=webhook.
Telegram присылает апдейт POST запросом, мы передаём его в диспетчер aiogram.
"""

import hmac

from aiogram import types
from fastapi import APIRouter, HTTPException, Request
import structlog

logger = structlog.get_logger()

router = APIRouter(tags=["telegram"])

SECRET_HEADER = "X-Telegram-Bot-Api-Secret-Token"


@router.post("/webhook")
async def handle_telegram_webhook(request: Request):
    """
    1. Проверяем секретный токен (если задан BOT_WEBHOOK_SECRET)
    2. Собираем Update из JSON
    3. Отдаём диспетчеру
    """
    secret = request.app.state.config.bot_webhook_secret

    if secret:
        provided = request.headers.get(SECRET_HEADER, "")
        # TIMING-SAFE сравнение
        if not hmac.compare_digest(provided.encode(), secret.encode()):
            logger.warning(
                "invalid_webhook_secret",
                remote_ip=request.client.host if request.client else "unknown"
            )
            raise HTTPException(401, "Unauthorized")

    bot = request.app.state.bot
    update = types.Update.model_validate(await request.json(), context={"bot": bot})

    await request.app.state.dispatcher.feed_update(bot, update)
    return {"ok": True}
