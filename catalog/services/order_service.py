# catalog/services/order_service.py
import uuid
from typing import Any, List, Mapping

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from catalog.data.models.order import OrderModel
from catalog.domain.errors import NotFoundError
from catalog.domain.validation import validate_order_create
from catalog.repos.order_repo import OrderRepo
from catalog.services.notification_service import NotificationService
from catalog.utils.logging import get_logger

logger = get_logger(__name__)


class OrderService:
    """
    Orders placed from the shop's cart. Creating one is public,
    reading them is for staff (enforced at the router).
    """

    def __init__(self, db: Session):
        self.repo = OrderRepo(db)
        self.notification_service = NotificationService()

    def create_order(self, payload: Mapping[str, Any]) -> OrderModel:
        """
        Use Case: place an order.

        1. Validate the cart (items must not be empty)
        2. Store the order with the initial status
        3. Notify the store (async)
        """
        record = validate_order_create(payload)

        order = OrderModel(
            id=uuid.uuid4().hex,
            user=record["user"],
            items=record["items"],
            total=record["total"],
            date=record["date"],
            status=record["status"],
            created_at=record["createdAt"],
        )
        try:
            created = self.repo.create_order(order)
        except SQLAlchemyError:
            self.repo.rollback()
            raise

        logger.info(f"Order {created.id} created for {created.user}, total {created.total}")

        #order is already stored, a broker outage must not fail the request
        try:
            self.notification_service.send_order_notification(
                created.user, created.id, created.total, len(created.items)
            )
        except Exception as e:
            logger.warning(f"Failed to queue notification for order {created.id}: {e}")

        return created

    def list_orders(self) -> List[OrderModel]:
        """Newest first."""
        return self.repo.list_orders()

    def get_order(self, order_id: str) -> OrderModel:
        order = self.repo.get_order(order_id)
        if not order:
            raise NotFoundError("Orden no encontrada")
        return order
