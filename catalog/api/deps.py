# catalog/api/deps.py
from typing import Optional, Sequence

from fastapi import Depends, Header, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from catalog.data.database import get_db
from catalog.data.models.user import UserModel
from catalog.repos.user_repo import UserRepo
from catalog.services.access_guard import AccessError, authenticate, authorize
from catalog.services.identity_provider import IdentityProvider
from catalog.utils.logging import get_logger

logger = get_logger(__name__)


def get_identity_provider(db: Session = Depends(get_db)) -> IdentityProvider:
    return IdentityProvider(db)


def verify_token(
    authorization: Optional[str] = Header(None),
    identity: IdentityProvider = Depends(get_identity_provider),
) -> str:
    try:
        return authenticate(authorization, identity)
    except AccessError as e:
        raise HTTPException(status_code=e.status_code, detail=e.detail)


def check_role(allowed_roles: Sequence[str]):
    """
    Route dependency: verified token + stored role in allowed_roles.
    Usage: @router.post(..., dependencies=[Depends(check_role(ADMIN_ONLY))])
    """

    def role_checker(
        subject_id: str = Depends(verify_token),
        db: Session = Depends(get_db),
    ) -> UserModel:
        try:
            return authorize(subject_id, allowed_roles, UserRepo(db))
        except AccessError as e:
            raise HTTPException(status_code=e.status_code, detail=e.detail)
        except SQLAlchemyError as e:
            logger.error(f"Role lookup failed for {subject_id}: {e}")
            raise HTTPException(
                status_code=500,
                detail={"mensaje": "Error interno al validar permisos.", "error": str(e)},
            )

    return role_checker


def server_error(mensaje: str, e: Exception) -> HTTPException:
    logger.error(f"{mensaje}: {e}")
    return HTTPException(status_code=500, detail={"mensaje": mensaje, "error": str(e)})
