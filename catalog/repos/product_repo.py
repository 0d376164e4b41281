# catalog/repos/product_repo.py
from typing import Any, Dict, List, Optional

from sqlalchemy import select, exists
from sqlalchemy.orm import Session

from catalog.data.models.product import ProductModel


class ProductRepo:
    """
    Products collection. Also serves as the ProductLookup
    for the uniqueness checks in catalog.domain.validation.
    """

    def __init__(self, db: Session):
        self.db = db

    def list_products(self, category: Optional[str] = None) -> List[ProductModel]:
        stmt = select(ProductModel)
        if category:
            stmt = stmt.where(ProductModel.category == category)
        return list(self.db.execute(stmt).scalars().all())

    def get_product(self, product_id: str) -> ProductModel | None:
        return self.db.get(ProductModel, product_id)

    #lookup
    def id_exists(self, product_id: str) -> bool:
        return self.get_product(product_id) is not None

    def _field_taken(self, column, value: str, exclude_id: Optional[str]) -> bool:
        cond = column == value
        if exclude_id is not None:
            cond = cond & (ProductModel.id != exclude_id)
        return bool(self.db.execute(select(exists().where(cond))).scalar())

    def title_taken(self, title: str, exclude_id: Optional[str] = None) -> bool:
        return self._field_taken(ProductModel.title, title, exclude_id)

    def image_taken(self, image: str, exclude_id: Optional[str] = None) -> bool:
        return self._field_taken(ProductModel.image, image, exclude_id)

    #writes
    def create_product(self, product: ProductModel) -> ProductModel:
        self.db.add(product)
        self.db.commit()
        self.db.refresh(product)
        return product

    def update_product(self, product: ProductModel, fields: Dict[str, Any]) -> ProductModel:
        for name, value in fields.items():
            setattr(product, name, value)
        self.db.commit()
        self.db.refresh(product)
        return product

    def delete_product(self, product: ProductModel) -> None:
        self.db.delete(product)
        self.db.commit()

    def rollback(self):
        self.db.rollback()
