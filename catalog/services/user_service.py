# catalog/services/user_service.py
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from catalog.data.models.user import UserModel
from catalog.domain.errors import NotFoundError
from catalog.domain.schemas import UserCreate
from catalog.repos.user_repo import UserRepo
from catalog.services.identity_provider import IdentityProvider, normalize_email
from catalog.utils.logging import get_logger

logger = get_logger(__name__)


class UserService:
    def __init__(self, db: Session, identity: IdentityProvider | None = None):
        self.repo = UserRepo(db)
        self.identity = identity or IdentityProvider(db)

    def create_user(self, payload: UserCreate) -> str:
        """
        The identity provider owns the credentials; the users collection keeps
        the profile and the role under the same uid.
        """
        uid = self.identity.create_account(payload.email, payload.password)

        user = UserModel(
            id=uid,
            nombre=payload.nombre,
            email=normalize_email(payload.email),
            telefono=payload.telefono,
            region=payload.region,
            comuna=payload.comuna,
            role=payload.role.value,
        )
        self.add_profile(user)

        logger.info(f"User {uid} created with role {user.role}")
        return uid

    def add_profile(self, user: UserModel) -> UserModel:
        """
        Stores the account record for an existing credential. If that fails
        the credential is removed too, so the email can be registered again.
        """
        try:
            return self.repo.create_user(user)
        except SQLAlchemyError as e:
            logger.error(f"Failed to store account record {user.id}, removing credential: {e}")
            self.repo.rollback()
            self.identity.delete_account(user.id)
            raise

    def list_users(self) -> List[UserModel]:
        return self.repo.list_users()

    def get_user(self, user_id: str) -> UserModel:
        user = self.repo.get_user(user_id)
        if not user:
            raise NotFoundError("Usuario no encontrado")
        return user
