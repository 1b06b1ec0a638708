# app/api/server.py
"""
Запуск и остановка HTTP сервера (uvicorn) внутри нашего event loop.
"""

import asyncio
from typing import Optional

from fastapi import FastAPI
import structlog
import uvicorn

logger = structlog.get_logger()


class ServerManager:
    """
    Обёртка над uvicorn.Server.

    start() - запускает сервер фоновой задачей и ждёт пока он начнёт слушать порт
    stop()  - просит uvicorn завершиться и ждёт его
    """

    def __init__(self, app: FastAPI, host: str, port: int, log_level: str = "info"):
        self.host = host
        self.port = port
        self._server = uvicorn.Server(
            uvicorn.Config(
                app,
                host=host,
                port=port,
                log_level=log_level,
                access_log=False,  # запросы логирует RequestLoggerMiddleware
            )
        )
        self._task: Optional[asyncio.Task] = None

    @property
    def url(self) -> str:
        if ":" in self.host:
            return f"http://[{self.host}]:{self.port}"
        return f"http://{self.host}:{self.port}"

    async def start(self) -> str:
        self._task = asyncio.create_task(self._server.serve())

        while not self._server.started:
            if self._task.done():
                # uvicorn не смог стартовать - пробрасываем ошибку
                await self._task
                raise RuntimeError(f"Server on {self.url} stopped during startup")
            await asyncio.sleep(0.05)

        logger.info("server_started", url=self.url)
        return self.url

    async def wait(self):
        """Ждём пока сервер не остановится сам (сигнал, Ctrl+C)."""
        if self._task is not None:
            await self._task

    async def stop(self):
        if self._task is None:
            return

        self._server.should_exit = True
        task, self._task = self._task, None
        if not task.done():
            await task
        logger.info("server_stopped", url=self.url)
