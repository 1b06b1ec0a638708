# app/api/errors.py
"""
Единая обработка ошибок для всех маршрутов.

- HTTPException со статусом < 500 - ожидаемая ошибка (кривой запрос,
  неизвестный путь и т.д.): логируем как info и отдаём как есть.
- Всё остальное (статус >= 500 или неожиданное исключение):
  логируем как error с методом и путём, клиенту - общий ответ 500.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
import structlog

logger = structlog.get_logger()

GENERIC_ERROR = {"error": "Oops! Something went wrong."}


def unexpected_error_response(request: Request, error: Exception) -> JSONResponse:
    logger.error(
        "unexpected_error",
        method=request.method,
        path=request.url.path,
        error=str(error),
        error_type=type(error).__name__
    )
    return JSONResponse(GENERIC_ERROR, status_code=500)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code >= 500:
        return unexpected_error_response(request, exc)

    logger.info(
        "http_error",
        method=request.method,
        path=request.url.path,
        status_code=exc.status_code,
        detail=exc.detail
    )
    return JSONResponse(
        {"detail": exc.detail},
        status_code=exc.status_code,
        headers=exc.headers
    )


class ErrorEnvelopeMiddleware(BaseHTTPMiddleware):
    """Ловит всё что не является HTTPException."""

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as e:
            return unexpected_error_response(request, e)


def register_error_handlers(app: FastAPI):
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_middleware(ErrorEnvelopeMiddleware)
