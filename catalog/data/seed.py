# catalog/data/seed.py
from catalog.data.database import SessionLocal
from catalog.data.models.user import UserModel
from catalog.domain.schemas import Role
from catalog.services.identity_provider import IdentityProvider, normalize_email
from catalog.services.user_service import UserService
from catalog.utils.settings import ADMIN_EMAIL, ADMIN_PASSWORD, ADMIN_NAME
from catalog.utils.logging import get_logger

logger = get_logger(__name__)


def seed_admin(email: str | None = None, password: str | None = None, name: str | None = None) -> str | None:
    """
    Fresh database has nobody allowed to call POST /users,
    so the first Administrador comes from the environment.
    Does nothing when not configured or the account already exists.
    A credential left without its account record gets the record added.
    """
    email = email or ADMIN_EMAIL
    password = password or ADMIN_PASSWORD
    if not email or not password:
        return None

    db = SessionLocal()
    try:
        identity = IdentityProvider(db)
        users = UserService(db, identity)

        uid = identity.find_uid(email)
        if uid and users.repo.get_user(uid):
            return None
        if not uid:
            uid = identity.create_account(email, password)

        users.add_profile(
            UserModel(
                id=uid,
                nombre=name or ADMIN_NAME,
                email=normalize_email(email),
                region="",
                comuna="",
                role=Role.ADMIN.value,
            )
        )
        logger.info(f"Seeded administrator account {uid} ({email})")
        return uid
    finally:
        db.close()
