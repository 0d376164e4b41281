# catalog/data/models/order.py
from datetime import datetime, timezone

from sqlalchemy import Column, String, Float, DateTime, JSON

from catalog.data.database import Base


class OrderModel(Base):
    __tablename__ = "orders"

    id = Column(String(64), primary_key=True)
    user = Column(JSON, nullable=False, default="guest")  # uid, email or a user object sent by the shop

    items = Column(JSON, nullable=False)
    total = Column(Float, nullable=False, default=0)
    date = Column(DateTime(timezone=True), nullable=False)

    status = Column(String, nullable=False, default="pendiente")
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc), index=True)
