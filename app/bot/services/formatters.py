# app/bot/services/formatters.py
"""
Тексты уведомлений о заявках.

Заявка (submission) - это просто JSON из тела запроса (обычно dict,
но может быть и массив, и строка). Схему не проверяем: если поля нет,
в тексте будет "undefined", а явный null так и будет "null".

⚠️ Пользовательский текст НЕ экранируется. Если в имени окажутся
символы разметки (* _ [ < и т.д.), Telegram может отклонить сообщение
при отправке.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Mapping

from aiogram.enums import ParseMode

MISSING = "undefined"
_ABSENT = object()


class NotificationKind(str, Enum):
    """Какой шаблон использовать."""

    DELIVERY_PLAIN = "delivery-plain"
    DELIVERY_HTML = "delivery-html"
    ORDER = "order"


@dataclass(frozen=True)
class Notification:
    """Готовое сообщение + режим разметки для Telegram."""

    text: str
    parse_mode: ParseMode


# ==========================================
# ВСПОМОГАТЕЛЬНЫЕ ФУНКЦИИ
# ==========================================

def _text(value: Any) -> str:
    """Значение из JSON → строка для сообщения."""
    if value is _ABSENT:
        return MISSING
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _field(source: Any, key: str) -> Any:
    # Нет ключа (или source вообще не объект) → _ABSENT, явный null → None
    if isinstance(source, Mapping):
        return source.get(key, _ABSENT)
    return _ABSENT


def _iter_items(items: Any) -> Iterable[Any]:
    # items приходит объектом {"<id>": {...}} - берём значения по порядку
    if isinstance(items, Mapping):
        return items.values()
    if isinstance(items, list):
        return items
    return ()


def item_line(item: Any) -> str:
    """Строка товара: "<название>   X   <количество>"."""
    product_name = _field(_field(item, "product"), "name")
    return f"{_text(product_name)}   X   {_text(_field(item, 'quantity'))}"


# ==========================================
# ШАБЛОНЫ
# ==========================================

def _delivery_plain(submission: Any) -> str:
    name = _text(_field(submission, "name"))
    phone = _text(_field(submission, "phone"))
    return (
        "*Новая заявка на доставку*\n"
        f"      от: *{name}*\n"
        f"      Телефон: [{phone}](tel:{phone})"
    )


def _delivery_html(submission: Any) -> str:
    return (
        "<b>Новая заявка на доставку</b>\n"
        "\n"
        f"от:   <b>{_text(_field(submission, 'name'))}</b>\n"
        f"Телефон: {_text(_field(submission, 'phone'))}"
    )


def _order(submission: Any) -> str:
    details = "".join(
        f"\n{item_line(item)}" for item in _iter_items(_field(submission, "items"))
    )
    return (
        f"{_delivery_html(submission)}\n"
        "\n"
        "Детали:\n"
        f"{details}\n"
        "\n"
        f"Сумма:   <b>{_text(_field(submission, 'amount'))}</b>"
    )


_TEMPLATES = {
    NotificationKind.DELIVERY_PLAIN: (_delivery_plain, ParseMode.MARKDOWN_V2),
    NotificationKind.DELIVERY_HTML: (_delivery_html, ParseMode.HTML),
    NotificationKind.ORDER: (_order, ParseMode.HTML),
}


def format_notification(kind, submission: Any) -> str:
    """
    Рендерит текст уведомления.

    kind - NotificationKind или его строковое значение ("order" и т.д.)
    Неизвестный kind → ValueError.
    """
    render, _ = _TEMPLATES[NotificationKind(kind)]
    return render(submission)


def build_notification(kind, submission: Any) -> Notification:
    """Текст + parse_mode, готово к отправке."""
    kind = NotificationKind(kind)
    render, parse_mode = _TEMPLATES[kind]
    return Notification(text=render(submission), parse_mode=parse_mode)
