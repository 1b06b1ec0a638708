"""Shared test fixtures for the relay bot."""

from __future__ import annotations

import asyncio
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient

from app.api.app import create_server
from app.bot.services.notifications import pending_notifications
from config.settings import Settings

BOT_CHAT = -1001234567890


def make_settings(**overrides: Any) -> Settings:
    values: dict[str, Any] = {
        "bot_token": "42:TEST",
        "bot_chat": BOT_CHAT,
        "bot_mode": "polling",
        "debug": False,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def bot() -> MagicMock:
    bot = MagicMock()
    bot.send_message = AsyncMock(return_value=None)
    return bot


@pytest.fixture
def dispatcher() -> MagicMock:
    dp = MagicMock()
    dp.feed_update = AsyncMock(return_value=None)
    return dp


@pytest.fixture
def make_client(bot: MagicMock, dispatcher: MagicMock):
    def _make(settings: Settings) -> AsyncClient:
        app = create_server(bot, dispatcher, settings)
        return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")

    return _make


@pytest.fixture
async def client(make_client, settings: Settings):
    async with make_client(settings) as c:
        yield c
    # let fire-and-forget sends finish before the loop closes
    await asyncio.gather(*pending_notifications(), return_exceptions=True)


def sent_texts(bot: MagicMock) -> list[str]:
    return [c.kwargs["text"] for c in bot.send_message.call_args_list]
