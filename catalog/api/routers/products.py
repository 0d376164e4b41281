# catalog/api/routers/products.py
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query, Response
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from catalog.api.deps import check_role, server_error
from catalog.data.database import get_db
from catalog.domain.errors import NotFoundError, ProductValidationError
from catalog.domain.schemas import ProductOut, ProductCreated, ProductUpdated
from catalog.services.access_guard import ADMIN_ONLY
from catalog.services.product_service import ProductService

router = APIRouter(prefix="/productos", tags=["productos"])


def get_service(db: Session):
    return ProductService(db)


@router.get("", response_model=List[ProductOut])
def list_products(
    categoria: Optional[str] = Query(None, description="Filtrar por categoría, p.ej. Hoodie"),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    try:
        return svc.list_products(categoria)
    except SQLAlchemyError as e:
        raise server_error("Error al obtener productos", e)


@router.get("/{product_id}", response_model=ProductOut)
def get_product(product_id: str, db: Session = Depends(get_db)):
    svc = get_service(db)
    try:
        return svc.get_product(product_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except SQLAlchemyError as e:
        raise server_error("Error al obtener producto", e)


@router.post(
    "",
    response_model=ProductCreated,
    status_code=201,
    dependencies=[Depends(check_role(ADMIN_ONLY))],
)
def create_product(payload: Dict[str, Any] = Body(...), db: Session = Depends(get_db)):
    svc = get_service(db)
    try:
        created = svc.create_product(payload)
    except ProductValidationError as e:
        raise HTTPException(status_code=400, detail={"mensaje": e.message, "codigo": e.reason.value})
    except SQLAlchemyError as e:
        raise server_error("Error al crear producto", e)

    return ProductCreated(
        mensaje="Producto creado correctamente.",
        id=created.id,
        data=ProductOut.model_validate(created),
    )


@router.put(
    "/{product_id}",
    response_model=ProductUpdated,
    dependencies=[Depends(check_role(ADMIN_ONLY))],
)
def update_product(product_id: str, payload: Dict[str, Any] = Body(...), db: Session = Depends(get_db)):
    svc = get_service(db)
    try:
        changes = svc.update_product(product_id, payload)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except ProductValidationError as e:
        raise HTTPException(status_code=400, detail={"mensaje": e.message, "codigo": e.reason.value})
    except SQLAlchemyError as e:
        raise server_error("Error al actualizar producto", e)

    return ProductUpdated(mensaje="Producto actualizado correctamente.", id=product_id, data=changes)


@router.delete(
    "/{product_id}",
    status_code=204,
    dependencies=[Depends(check_role(ADMIN_ONLY))],
)
def delete_product(product_id: str, db: Session = Depends(get_db)):
    svc = get_service(db)
    try:
        svc.delete_product(product_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except SQLAlchemyError as e:
        raise server_error("Error al eliminar producto", e)

    return Response(status_code=204)
