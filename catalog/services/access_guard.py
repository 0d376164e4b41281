# catalog/services/access_guard.py
"""
Two independent steps gate every protected route:

authenticate(header, provider) -> subject id   (401 / 403 on failure)
authorize(subject id, allowed roles, users)    (403 on failure)

The FastAPI side (catalog.api.deps) only composes them and turns
AccessError into an HTTP response.
"""
from typing import Any, Dict, Optional, Protocol, Sequence

from catalog.data.models.user import UserModel
from catalog.domain.schemas import Role
from catalog.services.identity_provider import IdentityProviderError
from catalog.utils.logging import get_logger

logger = get_logger(__name__)

BEARER_PREFIX = "Bearer "
DEFAULT_ROLE = Role.CUSTOMER.value

ADMIN_ONLY = (Role.ADMIN.value,)
STAFF = (Role.ADMIN.value, Role.SELLER.value)


class TokenVerifier(Protocol):
    def verify_token(self, token: str) -> Dict[str, Any]: ...


class UserLookup(Protocol):
    def get_user(self, user_id: str) -> Optional[UserModel]: ...


class AccessError(Exception):
    status_code = 403

    def __init__(self, message: str, error: str | None = None):
        self.message = message
        self.error = error
        super().__init__(message)

    @property
    def detail(self) -> Dict[str, str]:
        body = {"mensaje": self.message}
        if self.error:
            body["error"] = self.error
        return body


class Unauthenticated(AccessError):
    pass


class CredentialMissing(Unauthenticated):
    status_code = 401


class CredentialRejected(Unauthenticated):
    status_code = 403


class Forbidden(AccessError, PermissionError):
    status_code = 403


def authenticate(authorization: str | None, verifier: TokenVerifier) -> str:
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise CredentialMissing("Acceso denegado. No se proporcionó un token válido.")

    token = authorization.split(" ")[1]
    try:
        claims = verifier.verify_token(token)
    except IdentityProviderError as e:
        logger.warning(f"Token rejected: {e}")
        raise CredentialRejected("Token inválido o expirado.", error=str(e))

    return claims["uid"]


def authorize(subject_id: str, allowed_roles: Sequence[str], users: UserLookup) -> UserModel:
    user = users.get_user(subject_id)
    if user is None:
        logger.warning(f"Subject {subject_id} has no account record")
        raise Forbidden("Usuario no registrado en base de datos.")

    role = user.role or DEFAULT_ROLE
    if role not in allowed_roles:
        logger.warning(f"Subject {subject_id} with role {role} denied, requires {list(allowed_roles)}")
        raise Forbidden(f"Acceso denegado. Se requiere rol: {', '.join(allowed_roles)}")

    return user
