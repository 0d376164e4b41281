# catalog/data/models/credential.py
from datetime import datetime, timezone

from sqlalchemy import Column, String, DateTime

from catalog.data.database import Base


class CredentialModel(Base):
    __tablename__ = "credentials"

    uid = Column(String(64), primary_key=True)
    email = Column(String, nullable=False, unique=True, index=True)
    password_hash = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
