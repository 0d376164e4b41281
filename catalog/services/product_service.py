# catalog/services/product_service.py
import uuid
from typing import Any, Dict, List, Mapping, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from catalog.data.models.product import ProductModel
from catalog.domain.errors import NotFoundError
from catalog.domain.validation import validate_product_create, validate_product_update
from catalog.repos.product_repo import ProductRepo
from catalog.utils.logging import get_logger

logger = get_logger(__name__)

#public name -> model attribute
_COLUMNS = {
    "originalPrice": "original_price",
    "createdAt": "created_at",
    "updatedAt": "updated_at",
}


def _to_columns(record: Mapping[str, Any]) -> Dict[str, Any]:
    return {_COLUMNS.get(key, key): value for key, value in record.items()}


class ProductService:
    """
    Use cases for products.
    queries (list, get) read only
    commands (create, update, delete) go through the validator first

    Uniqueness is read-then-write without a transaction around it,
    two concurrent creates with the same title can both pass.
    """

    def __init__(self, db: Session):
        self.repo = ProductRepo(db)

    #queries
    def list_products(self, category: Optional[str] = None) -> List[ProductModel]:
        return self.repo.list_products(category)

    def get_product(self, product_id: str) -> ProductModel:
        product = self.repo.get_product(product_id)
        if not product:
            raise NotFoundError("Producto no encontrado")
        return product

    #commands
    def create_product(self, payload: Mapping[str, Any]) -> ProductModel:
        record = validate_product_create(payload, self.repo)

        #stored under the caller's id, or a generated one echoed back into the record
        record["id"] = record["id"] or uuid.uuid4().hex

        try:
            created = self.repo.create_product(ProductModel(**_to_columns(record)))
        except SQLAlchemyError:
            self.repo.rollback()
            raise
        logger.info(f"Product {created.id} created ({created.title!r}, category {created.category!r})")
        return created

    def update_product(self, product_id: str, payload: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Partial update, returns only the fields that changed (plus updatedAt).
        """
        product = self.get_product(product_id)

        changes = validate_product_update(product_id, payload, self.repo)
        try:
            self.repo.update_product(product, _to_columns(changes))
        except SQLAlchemyError:
            self.repo.rollback()
            raise

        logger.info(f"Product {product_id} updated: {sorted(changes)}")
        return changes

    def delete_product(self, product_id: str) -> None:
        product = self.get_product(product_id)
        try:
            self.repo.delete_product(product)
        except SQLAlchemyError:
            self.repo.rollback()
            raise
        logger.info(f"Product {product_id} deleted")
