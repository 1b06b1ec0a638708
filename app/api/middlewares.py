# app/api/middlewares.py
"""
🔄 HTTP MIDDLEWARE

- RequestIdMiddleware: у каждого запроса свой request_id (попадает во все логи)
- RequestLoggerMiddleware: подробный лог запросов (только при DEBUG=true)
"""

import time
from uuid import uuid4

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
import structlog

from infrastructure.logger import logger

REQUEST_ID_HEADER = "X-Request-Id"


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Берём X-Request-Id из запроса или генерируем новый."""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex

        with structlog.contextvars.bound_contextvars(request_id=request_id):
            response = await call_next(request)

        response.headers[REQUEST_ID_HEADER] = request_id
        return response


class RequestLoggerMiddleware(BaseHTTPMiddleware):
    """Логирует начало и конец каждого запроса."""

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        logger.debug(
            "incoming_request",
            method=request.method,
            path=request.url.path
        )

        response = await call_next(request)

        logger.info(
            "request_completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            elapsed_ms=round((time.perf_counter() - started) * 1000, 2)
        )
        return response
