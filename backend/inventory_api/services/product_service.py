from typing import List, Optional

from sqlalchemy.orm import Session

from inventory_api.config import settings
from inventory_api.models.product import MAX_INTEGER, Product
from inventory_api.repositories.product_repo import ProductRepository
from inventory_api.utils.logger import get_logger

log = get_logger("products")


class ProductServiceException(Exception):
    pass


class ProductNotFound(ProductServiceException):
    def __init__(self, product_id: int):
        self.product_id = product_id
        super().__init__(f"Product not found with ID: {product_id}")


class InsufficientStock(ProductServiceException):
    def __init__(self, available: int, requested: int):
        self.available = available
        self.requested = requested
        super().__init__(
            f"Insufficient stock. Available: {available}, Requested: {requested}"
        )


class ProductValidationError(ProductServiceException):
    pass


class ProductService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = ProductRepository(db)

    def _commit(self):
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    def _get_or_raise(self, product_id: int) -> Product:
        p = self.repo.get(product_id)
        if not p:
            raise ProductNotFound(product_id)
        return p

    @staticmethod
    def _check_in_range(value, label: str):
        if value is None or value < 0:
            raise ProductValidationError(f"{label} cannot be negative")
        if value > MAX_INTEGER:
            raise ProductValidationError(f"{label} is too large")

    @staticmethod
    def _check_quantity(quantity):
        if quantity is None or quantity <= 0:
            raise ProductValidationError("Quantity must be greater than 0")
        if quantity > MAX_INTEGER:
            raise ProductValidationError("Quantity is too large")

    def list_products(self) -> List[Product]:
        log.info("Fetching all products")
        return self.repo.list_all()

    def list_low_stock(self) -> List[Product]:
        log.info("Fetching products with low stock")
        return self.repo.list_low_stock()

    def get_product(self, product_id: int) -> Product:
        log.info("Fetching product with ID: %s", product_id)
        return self._get_or_raise(product_id)

    def create_product(
        self,
        name: str,
        stock_quantity: int,
        description: Optional[str] = None,
        low_stock_threshold: Optional[int] = None,
    ) -> Product:
        log.info("Creating product with name: %s", name)
        if not name or not name.strip():
            raise ProductValidationError("Product name is required")
        if stock_quantity is None:
            raise ProductValidationError("Stock quantity is required")
        self._check_in_range(stock_quantity, "Stock quantity")
        if low_stock_threshold is None:
            low_stock_threshold = settings.DEFAULT_LOW_STOCK_THRESHOLD
        self._check_in_range(low_stock_threshold, "Low stock threshold")

        p = self.repo.create(
            name=name.strip(),
            description=(description or "").strip() or None,
            stock_quantity=stock_quantity,
            low_stock_threshold=low_stock_threshold,
        )
        self._commit()
        log.info("Product created with ID: %s", p.id)
        return p

    def update_product(self, product_id: int, **changes) -> Product:
        """
        Partial update: only the keys present in `changes` are written.
        Accepted keys are name, description, stock_quantity and
        low_stock_threshold.
        """
        log.info("Updating product with ID: %s", product_id)
        if "name" in changes:
            name = changes["name"]
            if not name or not name.strip():
                raise ProductValidationError("Product name cannot be empty")
            changes["name"] = name.strip()
        if "description" in changes and changes["description"] is not None:
            changes["description"] = changes["description"].strip()
        if "stock_quantity" in changes:
            self._check_in_range(changes["stock_quantity"], "Stock quantity")
        if "low_stock_threshold" in changes:
            self._check_in_range(changes["low_stock_threshold"], "Low stock threshold")

        p = self.repo.update(product_id, **changes)
        if not p:
            raise ProductNotFound(product_id)
        self._commit()
        log.info("Product updated with ID: %s", product_id)
        return p

    def delete_product(self, product_id: int) -> None:
        log.info("Deleting product with ID: %s", product_id)
        if not self.repo.delete(product_id):
            raise ProductNotFound(product_id)
        self._commit()
        log.info("Product deleted with ID: %s", product_id)

    def increase_stock(self, product_id: int, quantity: int) -> Product:
        log.info(
            "Increasing stock for product ID: %s by quantity: %s", product_id, quantity
        )
        self._check_quantity(quantity)
        p = self._get_or_raise(product_id)
        if p.stock_quantity + quantity > MAX_INTEGER:
            raise ProductValidationError(
                f"Stock quantity cannot exceed {MAX_INTEGER}. "
                f"Available: {p.stock_quantity}, Requested: {quantity}"
            )
        p = self.repo.update(product_id, stock_quantity=p.stock_quantity + quantity)
        self._commit()
        log.info(
            "Stock increased for product ID: %s. New stock: %s",
            product_id,
            p.stock_quantity,
        )
        return p

    def decrease_stock(self, product_id: int, quantity: int) -> Product:
        log.info(
            "Decreasing stock for product ID: %s by quantity: %s", product_id, quantity
        )
        self._check_quantity(quantity)
        p = self._get_or_raise(product_id)
        if p.stock_quantity < quantity:
            err = InsufficientStock(available=p.stock_quantity, requested=quantity)
            log.error("Insufficient stock for product ID: %s. %s", product_id, err)
            raise err
        p = self.repo.update(product_id, stock_quantity=p.stock_quantity - quantity)
        self._commit()
        log.info(
            "Stock decreased for product ID: %s. New stock: %s",
            product_id,
            p.stock_quantity,
        )
        return p
