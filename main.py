# main.py
"""
🚀 ГЛАВНЫЙ ФАЙЛ ЗАПУСКА

Это точка входа - отсюда всё начинается!

Функция: запускает бота (polling или webhook) и HTTP сервер для заявок с сайта.
"""

import asyncio

import structlog

from config.settings import Settings, config
from infrastructure.logger import setup_logging
from app.api import ServerManager, create_server
from app.bot import create_bot, create_dispatcher

logger = structlog.get_logger()


# ==========================================
# ✅ ПРОВЕРКА НАСТРОЕК
# ==========================================

def check_settings(settings: Settings):
    """
    Проверяем критические переменные окружения.

    - BOT_MODE=webhook без BOT_WEBHOOK → ошибка (бот не получит апдейты)
    - BOT_CHAT не задан → только предупреждение: сервер работает,
      но заявки с /delivery и /order отправлять некуда
    """
    if settings.is_webhook_mode and not settings.bot_webhook:
        logger.error("bot_webhook_missing", message="❌ BOT_WEBHOOK не установлен в .env")
        raise ValueError("BOT_WEBHOOK обязателен при BOT_MODE=webhook")

    if not settings.bot_chat:
        logger.warning(
            "bot_chat_not_set",
            message="⚠️ BOT_CHAT не установлен в .env - заявки с /delivery и /order не дойдут"
        )


# ==========================================
# 🚀 ГЛАВНАЯ ФУНКЦИЯ ЗАПУСКА
# ==========================================

async def main(settings: Settings = config):
    """
    Главная асинхронная функция.

    Порядок:
    1. Логирование
    2. Бот + диспетчер
    3. HTTP сервер
    4. polling или webhook (BOT_MODE)
    """

    # ========== ИНИЦИАЛИЗАЦИЯ ==========

    setup_logging(settings.log_level)
    logger.info("application_start", bot_mode=settings.bot_mode)

    check_settings(settings)

    bot = create_bot(settings)
    dp = create_dispatcher(settings)

    server = create_server(bot, dp, settings)
    server_manager = ServerManager(
        server,
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level
    )

    # ========== ЗАПУСК ==========

    try:
        await server_manager.start()

        if settings.is_webhook_mode:
            await bot.set_webhook(
                url=settings.bot_webhook,
                secret_token=settings.bot_webhook_secret or None,
                allowed_updates=settings.bot_allowed_updates or None
            )
            logger.info("webhook_set", url=settings.bot_webhook)

            await dp.emit_startup(bot=bot)
            try:
                # Сервер работает пока его не остановят (Ctrl+C / SIGTERM)
                await server_manager.wait()
            finally:
                await dp.emit_shutdown(bot=bot)
        else:
            await bot.delete_webhook()
            logger.info("polling_started", message="👂 Бот начинает слушать сообщения...")

            # Запускаем polling (startup/shutdown вызовет сам диспетчер)
            await dp.start_polling(
                bot,
                allowed_updates=settings.bot_allowed_updates or None
            )

    except asyncio.CancelledError:
        logger.info("application_cancelled", message="⛔ Приложение остановлено")
        raise

    except Exception as e:
        logger.error(
            "fatal_error",
            error=str(e),
            error_type=type(e).__name__
        )
        raise

    finally:
        # ========== ВЫКЛЮЧЕНИЕ ==========
        await server_manager.stop()
        await bot.session.close()
        logger.info("app_shutdown", message="👋 Приложение выключено")


# ==========================================
# 📌 ENTRY POINT (точка входа)
# ==========================================

def run():
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("app_interrupted", message="⛔ Приложение остановлено пользователем (Ctrl+C)")


if __name__ == "__main__":
    run()
