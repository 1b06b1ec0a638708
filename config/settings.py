# config/settings.py
"""
Settings файл - здесь живут все настройки приложения.

Логика: когда приложение запускается, оно читает .env файл
и создает объект 'config' со всеми необходимыми значениями.

После старта настройки только читаются (никто их не меняет),
поэтому один и тот же объект спокойно передаётся во все обработчики.
"""

from typing import List, Literal, Union

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Основной класс настроек.

    BaseSettings = специальный класс Pydantic который:
    1. Автоматически читает .env файл
    2. Валидирует типы (SERVER_PORT должен быть int и т.д.)
    3. Выдает ошибку если значение неправильного типа
    """

    # ==========================================
    # TELEGRAM BOT
    # ==========================================
    bot_token: str = ""
    bot_mode: Literal["polling", "webhook"] = "polling"
    bot_webhook: str = ""
    bot_webhook_secret: str = ""
    bot_allowed_updates: List[str] = []

    # Чат куда летят заявки с /delivery и /order.
    # Сначала пробуем int ("-100123" → -100123), иначе строка ("@orders")
    bot_chat: Union[int, str] = Field(0, union_mode="left_to_right")

    # ==========================================
    # HTTP SERVER
    # ==========================================
    server_host: str = "0.0.0.0"
    server_port: int = 80

    # ==========================================
    # ENVIRONMENT
    # ==========================================
    log_level: str = "info"
    debug: bool = False

    # Конфигурация Pydantic
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        case_sensitive=False
    )

    @property
    def is_webhook_mode(self) -> bool:
        """Бот получает апдейты через POST /webhook"""
        return self.bot_mode == "webhook"

    @property
    def is_polling_mode(self) -> bool:
        """Бот сам опрашивает Telegram (long polling)"""
        return self.bot_mode == "polling"


config = Settings()
