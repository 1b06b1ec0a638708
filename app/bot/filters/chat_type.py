# app/bot/filters/chat_type.py
"""
Фильтры в aiogram - это способ ограничить доступ к определенным обработчикам.

Пример:
    router.message.filter(ChatTypeFilter("private"))

    @router.message(Command("id"))
    async def cmd_id(message: Message):
        # Выполнится ТОЛЬКО в личке с ботом
        ...

Если команду напишут в группе, ничего не произойдет.
"""

from typing import Union

from aiogram import types
from aiogram.filters import BaseFilter


class ChatTypeFilter(BaseFilter):
    """
    Фильтр: проверяет тип чата (private, group, supergroup, channel).
    """

    def __init__(self, chat_type: Union[str, list]):
        """
        chat_type - один тип или список допустимых типов
        """
        if isinstance(chat_type, str):
            chat_type = [chat_type]
        # ChatType.PRIVATE → "private"
        self.chat_types = {getattr(item, "value", item) for item in chat_type}

    async def __call__(self, message: types.Message) -> bool:
        """
        Возвращаем True = разрешить обработчику выполниться
        Возвращаем False = запретить (обработчик не выполнится)
        """
        chat_type = getattr(message.chat.type, "value", message.chat.type)
        return chat_type in self.chat_types
