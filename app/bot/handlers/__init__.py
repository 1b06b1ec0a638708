# app/bot/handlers/__init__.py
"""
🤖 BOT HANDLERS (обработчики команд)

Все команды бота собираются в один main_router.
"""

from aiogram import Router

from .chat_id import router as chat_id_router
from .errors import router as errors_router

# ==========================================
# СОЗДАЁМ MAIN ROUTER
# ==========================================

main_router = Router(name="main")

main_router.include_router(chat_id_router)
main_router.include_router(errors_router)

# ==========================================
# ЭКСПОРТ
# ==========================================

__all__ = ["main_router"]
