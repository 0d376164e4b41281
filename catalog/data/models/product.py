# catalog/data/models/product.py
from datetime import datetime, timezone

from sqlalchemy import Column, String, Float, DateTime, JSON

from catalog.data.database import Base


class ProductModel(Base):
    __tablename__ = "productos"

    id = Column(String(64), primary_key=True)

    title = Column(String(100), nullable=False, index=True)
    description = Column(String(500), nullable=False, default="")
    details = Column(String(300), nullable=False, default="")
    image = Column(String, nullable=False, default="", index=True)
    badge = Column(String, nullable=False, default="")

    price = Column(Float, nullable=False)
    original_price = Column(Float, nullable=False)
    category = Column(String, nullable=False, index=True)
    sizes = Column(JSON, nullable=False, default=list)

    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(DateTime(timezone=True), nullable=True)
