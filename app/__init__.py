# app/__init__.py
"""
Delivery Relay Bot - пересылает заявки с сайта в Telegram.

Структура:
- app/ - основное приложение (бот + API)
  - bot/ - Telegram бот (handlers, middlewares, filters, services)
  - api/ - FastAPI endpoints (заявки + вебхук Telegram)
- config/ - конфигурация (settings.py)
- infrastructure/ - инфраструктура (логирование)
"""

__version__ = "1.0.0"
