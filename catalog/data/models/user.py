# catalog/data/models/user.py
from datetime import datetime, timezone

from sqlalchemy import Column, String, DateTime

from catalog.data.database import Base


class UserModel(Base):
    __tablename__ = "users"

    #id is the uid assigned by the identity provider
    id = Column(String(64), primary_key=True)
    nombre = Column(String, nullable=False)
    email = Column(String, nullable=False)
    telefono = Column(String, nullable=True)
    region = Column(String, nullable=False)
    comuna = Column(String, nullable=False)
    role = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
