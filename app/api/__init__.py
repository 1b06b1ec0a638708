# app/api/__init__.py
"""
🌐 API (FastAPI)

Заявки с сайта приходят сюда и улетают в Telegram.
"""

from .app import create_server
from .server import ServerManager

__all__ = ["create_server", "ServerManager"]
