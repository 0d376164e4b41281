# catalog/services/notification_service.py
from typing import Any

from catalog.celery_worker import celery_app
from catalog.utils.logging import get_logger

logger = get_logger(__name__)


class NotificationService:
    """
    Order notifications, processed by the Celery worker.
    """

    @staticmethod
    def send_order_notification(user: Any, order_id: str, total: float, item_count: int):
        send_order_notification_task.delay(user, order_id, total, item_count)


@celery_app.task(name="catalog.services.notification_service.send_order_notification_task")
def send_order_notification_task(user: Any, order_id: str, total: float, item_count: int):
    """
    Celery task - the store is notified of a new order. For now it only logs.
    """
    logger.info(f"[NOTIFICATION] New order {order_id} from {user}: {item_count} item(s), total {total}")

    return {"user": user, "order_id": order_id, "status": "sent"}
