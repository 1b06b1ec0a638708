# app/api/routes.py
"""
🌐 API ROUTES (маршруты FastAPI)

Сайт отправляет сюда заявки, мы пересылаем их в Telegram.

Тело запроса не валидируем: читаем JSON как есть.
Уведомление отправляется в фоне - ответ клиенту уходит сразу,
не дожидаясь Telegram.
"""

from fastapi import APIRouter, Request

from app.bot.services.formatters import NotificationKind, build_notification
from app.bot.services.notifications import dispatch_notification
from infrastructure.logger import logger

router = APIRouter(tags=["submissions"])

# Тестовый чат для /test
TEST_CHAT_ID = 6773775244


def _notify(request: Request, chat_id, kind: NotificationKind, submission):
    notification = build_notification(kind, submission)
    dispatch_notification(request.app.state.bot, chat_id, notification)
    logger.info("submission_dispatched", kind=kind.value, chat_id=chat_id)


# ==========================================
# ENDPOINT: Health check
# ==========================================

@router.get("/")
async def index():
    return {"status": True}


# ==========================================
# ENDPOINT: POST /test
# ==========================================

@router.post("/test")
async def submit_test(request: Request):
    """Заявка на доставку в тестовый чат (MarkdownV2)."""
    body = await request.json()
    _notify(request, TEST_CHAT_ID, NotificationKind.DELIVERY_PLAIN, body)
    return {"status": "Success"}


# ==========================================
# ENDPOINT: POST /delivery
# ==========================================

@router.post("/delivery")
async def submit_delivery(request: Request):
    """
    Заявка на доставку.

    Пример:
        POST /delivery {"name": "Иван", "phone": "+79991234567"}
        → {"status": "Success"}
    """
    body = await request.json()
    _notify(request, request.app.state.config.bot_chat, NotificationKind.DELIVERY_HTML, body)
    return {"status": "Success"}


# ==========================================
# ENDPOINT: POST /order
# ==========================================

@router.post("/order")
async def submit_order(request: Request):
    """
    Заказ с товарами. В ответ возвращаем то что пришло.

    Пример:
        POST /order
        {
            "name": "Иван",
            "phone": "+79991234567",
            "items": {"a1": {"product": {"name": "Капучино"}, "quantity": 2}},
            "amount": 500
        }
    """
    body = await request.json()
    _notify(request, request.app.state.config.bot_chat, NotificationKind.ORDER, body)
    return body
