"""Tests for the error envelope and HTTP middlewares."""

from __future__ import annotations

from unittest.mock import MagicMock

from fastapi import HTTPException
from httpx import ASGITransport, AsyncClient
from structlog.testing import capture_logs

from app.api.app import create_server
from app.api.errors import GENERIC_ERROR
from tests.conftest import make_settings


class TestMalformedBody:
    async def test_non_json_body_is_500_and_logged(
        self, client: AsyncClient, bot: MagicMock
    ) -> None:
        with capture_logs() as logs:
            resp = await client.post(
                "/delivery",
                content=b"{not json",
                headers={"Content-Type": "application/json"},
            )

        assert resp.status_code == 500
        assert resp.json() == GENERIC_ERROR
        bot.send_message.assert_not_called()
        errors = [e for e in logs if e["event"] == "unexpected_error"]
        assert len(errors) == 1
        assert errors[0]["log_level"] == "error"
        assert errors[0]["method"] == "POST"
        assert errors[0]["path"] == "/delivery"

    async def test_server_keeps_serving_after_failure(self, client: AsyncClient) -> None:
        bad = await client.post("/order", content=b"oops")
        good = await client.post("/delivery", json={"name": "Ann", "phone": "1"})

        assert bad.status_code == 500
        assert good.status_code == 200
        assert good.json() == {"status": "Success"}


class TestHttpErrors:
    async def test_not_found_is_passed_through(self, client: AsyncClient) -> None:
        with capture_logs() as logs:
            resp = await client.get("/nope")

        assert resp.status_code == 404
        assert resp.json() == {"detail": "Not Found"}
        entries = [e for e in logs if e["event"] == "http_error"]
        assert entries[0]["log_level"] == "info"
        assert entries[0]["status_code"] == 404

    async def test_wrong_method(self, client: AsyncClient) -> None:
        resp = await client.get("/delivery")
        assert resp.status_code == 405

    async def test_server_side_http_exception_is_hidden(
        self, bot: MagicMock, dispatcher: MagicMock
    ) -> None:
        app = create_server(bot, dispatcher, make_settings())

        @app.get("/boom")
        async def boom():
            raise HTTPException(503, "secret internals")

        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test"
        ) as client:
            with capture_logs() as logs:
                resp = await client.get("/boom")

        assert resp.status_code == 500
        assert resp.json() == GENERIC_ERROR
        assert any(
            e["event"] == "unexpected_error" and e["path"] == "/boom" for e in logs
        )

    async def test_client_http_exception_keeps_headers(
        self, bot: MagicMock, dispatcher: MagicMock
    ) -> None:
        app = create_server(bot, dispatcher, make_settings())

        @app.get("/teapot")
        async def teapot():
            raise HTTPException(418, "short and stout", headers={"X-Pot": "1"})

        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test"
        ) as client:
            resp = await client.get("/teapot")

        assert resp.status_code == 418
        assert resp.json() == {"detail": "short and stout"}
        assert resp.headers["x-pot"] == "1"


class TestMiddlewares:
    async def test_request_id_is_echoed(self, client: AsyncClient) -> None:
        resp = await client.get("/", headers={"X-Request-Id": "abc-123"})
        assert resp.headers["x-request-id"] == "abc-123"

    async def test_request_id_is_generated(self, client: AsyncClient) -> None:
        resp = await client.get("/")
        assert len(resp.headers["x-request-id"]) == 32

    async def test_cors_is_permissive(self, client: AsyncClient) -> None:
        resp = await client.options(
            "/order",
            headers={
                "Origin": "https://shop.example",
                "Access-Control-Request-Method": "POST",
            },
        )
        assert resp.status_code == 200
        assert resp.headers["access-control-allow-origin"] == "*"

    async def test_cors_on_error_response(self, client: AsyncClient) -> None:
        resp = await client.post(
            "/delivery", content=b"nope", headers={"Origin": "https://shop.example"}
        )
        assert resp.status_code == 500
        assert resp.headers["access-control-allow-origin"] == "*"

    async def test_request_logger_only_in_debug(self, make_client) -> None:
        async with make_client(make_settings(debug=True)) as client:
            with capture_logs() as logs:
                await client.get("/")
        completed = [e for e in logs if e["event"] == "request_completed"]
        assert completed[0]["status_code"] == 200
        assert completed[0]["path"] == "/"

        async with make_client(make_settings(debug=False)) as client:
            with capture_logs() as logs:
                await client.get("/")
        assert not any(e["event"] == "request_completed" for e in logs)
