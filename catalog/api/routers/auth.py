# catalog/api/routers/auth.py
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError

from catalog.api.deps import get_identity_provider, server_error
from catalog.domain.schemas import LoginIn, TokenOut
from catalog.services.identity_provider import IdentityProvider, IdentityProviderError

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=TokenOut)
def login(payload: LoginIn, identity: IdentityProvider = Depends(get_identity_provider)):
    try:
        uid, token = identity.sign_in(payload.email, payload.password)
    except IdentityProviderError as e:
        raise HTTPException(status_code=401, detail={"mensaje": "Credenciales inválidas", "error": str(e)})
    except SQLAlchemyError as e:
        raise server_error("Error al iniciar sesión", e)

    return TokenOut(token=token, uid=uid)
