import os

#before anything from catalog is imported: settings are read at import time
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["CELERY_TASK_ALWAYS_EAGER"] = "true"
os.environ["JWT_SECRET"] = "test-secret"
os.environ.pop("ADMIN_EMAIL", None)
os.environ.pop("ADMIN_PASSWORD", None)

from typing import Dict, Optional

import pytest
from fastapi.testclient import TestClient

from catalog.data.database import Base, SessionLocal, engine
from catalog.data.models import UserModel
from catalog.main import app
from catalog.repos.user_repo import UserRepo
from catalog.services.identity_provider import IdentityProvider

PASSWORD = "secreto123"


@pytest.fixture
def db():
    """Fresh schema and a session on it."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_account(db):
    """
    Creates credentials + account record, returns the Authorization header.
    role=None leaves the stored role unset.
    """

    def _make(role: Optional[str], email: str) -> Dict[str, str]:
        identity = IdentityProvider(db)
        uid = identity.create_account(email, PASSWORD)
        UserRepo(db).create_user(
            UserModel(
                id=uid,
                nombre=email.split("@")[0],
                email=email,
                region="Metropolitana",
                comuna="Providencia",
                role=role,
            )
        )
        token = identity.issue_token(uid, email)
        return {"Authorization": f"Bearer {token}"}

    return _make


@pytest.fixture
def admin_headers(make_account):
    return make_account("Administrador", "admin@stagestyle.cl")


@pytest.fixture
def seller_headers(make_account):
    return make_account("Vendedor", "ventas@stagestyle.cl")


@pytest.fixture
def customer_headers(make_account):
    return make_account("Cliente", "cliente@stagestyle.cl")
