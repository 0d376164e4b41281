# catalog/api/routers/users.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from catalog.api.deps import check_role, server_error
from catalog.data.database import get_db
from catalog.domain.errors import NotFoundError
from catalog.domain.schemas import UserCreate, UserCreated, UserRead
from catalog.services.access_guard import ADMIN_ONLY, STAFF
from catalog.services.identity_provider import IdentityProviderError
from catalog.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "",
    response_model=UserCreated,
    status_code=201,
    dependencies=[Depends(check_role(ADMIN_ONLY))],
)
def create_user(payload: UserCreate, db: Session = Depends(get_db)):
    service = UserService(db)
    try:
        uid = service.create_user(payload)
    except (IdentityProviderError, SQLAlchemyError) as e:
        raise server_error("Error al crear usuario", e)
    return UserCreated(mensaje="Usuario creado correctamente.", uid=uid)


@router.get("", response_model=List[UserRead], dependencies=[Depends(check_role(STAFF))])
def list_users(db: Session = Depends(get_db)):
    service = UserService(db)
    try:
        return service.list_users()
    except SQLAlchemyError as e:
        raise server_error("Error al obtener usuarios", e)


@router.get("/{user_id}", response_model=UserRead, dependencies=[Depends(check_role(STAFF))])
def get_user(user_id: str, db: Session = Depends(get_db)):
    service = UserService(db)
    try:
        return service.get_user(user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except SQLAlchemyError as e:
        raise server_error("Error al obtener usuario", e)
