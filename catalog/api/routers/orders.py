# catalog/api/routers/orders.py
from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from catalog.api.deps import check_role, server_error
from catalog.data.database import get_db
from catalog.domain.errors import NotFoundError, OrderValidationError
from catalog.domain.schemas import OrderOut
from catalog.services.access_guard import STAFF
from catalog.services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["orders"])


def get_service(db: Session):
    return OrderService(db)


@router.post("", response_model=OrderOut, status_code=201)
def create_order(payload: Dict[str, Any] = Body(...), db: Session = Depends(get_db)):
    """
    Public: the shop places orders for guests too.
    """
    svc = get_service(db)
    try:
        return svc.create_order(payload)
    except OrderValidationError as e:
        raise HTTPException(status_code=400, detail={"mensaje": e.message, "codigo": e.reason.value})
    except SQLAlchemyError as e:
        raise server_error("Error al crear la orden", e)


@router.get("", response_model=List[OrderOut], dependencies=[Depends(check_role(STAFF))])
def list_orders(db: Session = Depends(get_db)):
    svc = get_service(db)
    try:
        return svc.list_orders()
    except SQLAlchemyError as e:
        raise server_error("Error al obtener órdenes", e)


@router.get("/{order_id}", response_model=OrderOut, dependencies=[Depends(check_role(STAFF))])
def get_order(order_id: str, db: Session = Depends(get_db)):
    svc = get_service(db)
    try:
        return svc.get_order(order_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except SQLAlchemyError as e:
        raise server_error("Error al obtener la orden", e)
