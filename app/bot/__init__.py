# app/bot/__init__.py
"""
🤖 TELEGRAM BOT

Сборка бота и диспетчера (handlers + middlewares + startup/shutdown).
"""

from aiogram import Bot, Dispatcher
from aiogram.client.default import DefaultBotProperties
from aiogram.enums import ParseMode
import structlog

from app.bot.handlers import main_router
from app.bot.middlewares import LoggingMiddleware
from config.settings import Settings

logger = structlog.get_logger()


# ==========================================
# BOT STARTUP & SHUTDOWN
# ==========================================

async def on_startup(bot: Bot):
    """Запускается когда диспетчер стартует."""
    me = await bot.get_me()
    logger.info("bot_started", bot_username=f"@{me.username}")


async def on_shutdown(bot: Bot):
    """Запускается когда диспетчер выключается."""
    logger.info("bot_shutdown", message="🔴 Бот выключается...")


# ==========================================
# СОЗДАНИЕ БОТА И ДИСПЕТЧЕРА
# ==========================================

def create_bot(config: Settings) -> Bot:
    """Объект бота (который будет отправлять/получать сообщения)."""
    if not config.bot_token:
        logger.error("bot_token_missing", message="❌ BOT_TOKEN не установлен в .env")
        raise ValueError("BOT_TOKEN не найден в переменных окружения")

    return Bot(
        token=config.bot_token,
        default=DefaultBotProperties(parse_mode=ParseMode.HTML)
    )


def create_dispatcher(config: Settings) -> Dispatcher:
    """
    Диспетчер (объект который управляет обработчиками).

    config кладём в workflow_data - он будет доступен в обработчиках.
    """
    dp = Dispatcher(config=config)

    dp.message.middleware(LoggingMiddleware())
    dp.include_router(main_router)

    dp.startup.register(on_startup)
    dp.shutdown.register(on_shutdown)

    logger.info("dispatcher_created", bot_mode=config.bot_mode)
    return dp


__all__ = ["create_bot", "create_dispatcher"]
