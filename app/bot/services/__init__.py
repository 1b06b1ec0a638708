"""Сервисы бота: тексты уведомлений и их отправка."""
