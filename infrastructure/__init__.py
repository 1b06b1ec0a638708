# infrastructure/__init__.py
"""Инфраструктура приложения."""

from .logger import logger, setup_logging

__all__ = [
    "logger",
    "setup_logging",
]
