from typing import List, Optional

from inventory_api.models.product import Product
from sqlalchemy import func
from sqlalchemy.orm import Session

UPDATABLE_FIELDS = ("name", "description", "stock_quantity", "low_stock_threshold")


class ProductRepository:
    def __init__(self, db: Session):
        self.db = db

    def list_all(self) -> List[Product]:
        return self.db.query(Product).order_by(Product.id).all()

    def get(self, product_id: int) -> Optional[Product]:
        return self.db.query(Product).filter(Product.id == product_id).first()

    def count(self) -> int:
        return self.db.query(func.count(Product.id)).scalar() or 0

    def create(
        self,
        name: str,
        stock_quantity: int,
        description: Optional[str] = None,
        low_stock_threshold: int = 10,
    ) -> Product:
        p = Product(
            name=name,
            description=description,
            stock_quantity=stock_quantity,
            low_stock_threshold=low_stock_threshold,
        )
        self.db.add(p)
        self.db.flush()  # ensure id assigned
        return p

    def update(self, product_id: int, **fields) -> Optional[Product]:
        """
        Apply only the supplied fields. Returns the row after the update,
        or None when no product has this id.
        """
        unknown = set(fields) - set(UPDATABLE_FIELDS)
        if unknown:
            raise ValueError(f"Unknown product fields: {sorted(unknown)}")
        p = self.get(product_id)
        if not p:
            return None
        for key, value in fields.items():
            setattr(p, key, value)
        if fields:
            self.db.flush()
        return p

    def delete(self, product_id: int) -> bool:
        removed = (
            self.db.query(Product)
            .filter(Product.id == product_id)
            .delete(synchronize_session="fetch")
        )
        self.db.flush()
        return removed > 0

    def list_low_stock(self) -> List[Product]:
        return (
            self.db.query(Product)
            .filter(Product.low_stock)
            .order_by(Product.id)
            .all()
        )
