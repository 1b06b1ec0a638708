"""Tests for the Telegram webhook route."""

from __future__ import annotations

from unittest.mock import MagicMock

from aiogram import types

from app.api.webhooks.telegram import SECRET_HEADER
from tests.conftest import make_settings

UPDATE = {
    "update_id": 7,
    "message": {
        "message_id": 1,
        "date": 1700000000,
        "chat": {"id": 12345, "type": "private"},
        "text": "/id",
    },
}


class TestWebhookMounting:
    async def test_absent_in_polling_mode(self, make_client, dispatcher: MagicMock) -> None:
        async with make_client(make_settings(bot_mode="polling")) as client:
            resp = await client.post("/webhook", json=UPDATE)

        assert resp.status_code == 404
        dispatcher.feed_update.assert_not_called()

    async def test_feeds_update_in_webhook_mode(
        self, make_client, dispatcher: MagicMock, bot: MagicMock
    ) -> None:
        settings = make_settings(bot_mode="webhook", bot_webhook_secret="s3cret")
        async with make_client(settings) as client:
            resp = await client.post(
                "/webhook", json=UPDATE, headers={SECRET_HEADER: "s3cret"}
            )

        assert resp.status_code == 200
        assert resp.json() == {"ok": True}
        dispatcher.feed_update.assert_awaited_once()
        fed_bot, update = dispatcher.feed_update.await_args.args
        assert fed_bot is bot
        assert isinstance(update, types.Update)
        assert update.update_id == 7
        assert update.message.chat.id == 12345


class TestWebhookSecret:
    async def test_wrong_secret_is_rejected(
        self, make_client, dispatcher: MagicMock
    ) -> None:
        settings = make_settings(bot_mode="webhook", bot_webhook_secret="s3cret")
        async with make_client(settings) as client:
            missing = await client.post("/webhook", json=UPDATE)
            wrong = await client.post("/webhook", json=UPDATE, headers={SECRET_HEADER: "nope"})

        assert missing.status_code == 401
        assert wrong.status_code == 401
        assert wrong.json() == {"detail": "Unauthorized"}
        dispatcher.feed_update.assert_not_called()

    async def test_no_secret_configured_accepts_any(
        self, make_client, dispatcher: MagicMock
    ) -> None:
        async with make_client(make_settings(bot_mode="webhook")) as client:
            resp = await client.post("/webhook", json=UPDATE)

        assert resp.status_code == 200
        dispatcher.feed_update.assert_awaited_once()

    async def test_invalid_update_is_generic_error(
        self, make_client, dispatcher: MagicMock
    ) -> None:
        async with make_client(make_settings(bot_mode="webhook")) as client:
            resp = await client.post("/webhook", json={"message": "no update id"})

        assert resp.status_code == 500
        dispatcher.feed_update.assert_not_called()
