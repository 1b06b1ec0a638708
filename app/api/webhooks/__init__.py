"""Вебхуки от внешних сервисов."""
