# app/api/app.py
"""
FastAPI приложение: заявки с сайта + (опционально) вебхук Telegram.

FastAPI = веб-фреймворк для создания REST API.
"""

from aiogram import Bot, Dispatcher
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import structlog

from app import __version__
from app.api.errors import register_error_handlers
from app.api.middlewares import RequestIdMiddleware, RequestLoggerMiddleware
from app.api.routes import router as submissions_router
from app.api.webhooks.telegram import router as telegram_router
from config.settings import Settings

logger = structlog.get_logger()


def create_server(bot: Bot, dispatcher: Dispatcher, config: Settings) -> FastAPI:
    """
    Собирает FastAPI приложение.

    bot, dispatcher и config кладём в app.state -
    обработчики достают их через request.app.state.
    """

    app = FastAPI(
        title="Delivery Relay Bot API",
        description="Заявки с сайта → сообщения в Telegram",
        version=__version__
    )

    app.state.bot = bot
    app.state.dispatcher = dispatcher
    app.state.config = config

    # ==========================================
    # MIDDLEWARE
    # ==========================================

    # Последний добавленный = самый внешний
    register_error_handlers(app)
    if config.debug:
        app.add_middleware(RequestLoggerMiddleware)
    app.add_middleware(RequestIdMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ==========================================
    # РЕГИСТРИРУЕМ РОУТЕРЫ
    # ==========================================

    app.include_router(submissions_router)

    if config.is_webhook_mode:
        app.include_router(telegram_router)

    logger.info(
        "server_created",
        webhook_route=config.is_webhook_mode,
        debug=config.debug
    )
    return app
