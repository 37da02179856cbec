from contextlib import contextmanager
from typing import Annotated, List

from fastapi import APIRouter, Depends, Path, Response
from sqlalchemy.orm import Session

from inventory_api.api.errors import ApiError
from inventory_api.db import get_db
from inventory_api.models.product import MAX_INTEGER, MIN_INTEGER
from inventory_api.schemas.product_schema import (
    ProductCreate,
    ProductOut,
    ProductUpdate,
    StockUpdate,
)
from inventory_api.services.product_service import (
    InsufficientStock,
    ProductNotFound,
    ProductService,
    ProductValidationError,
)
from inventory_api.utils.logger import get_logger

log = get_logger("api")

router = APIRouter(tags=["products"])

# ids outside the column range cannot be bound to a query; reject them as bad ids
ProductId = Annotated[int, Path(ge=MIN_INTEGER, le=MAX_INTEGER)]


@contextmanager
def _service_errors(failure: str):
    """Translate domain exceptions raised inside the block into ApiErrors."""
    try:
        yield
    except ProductNotFound as e:
        raise ApiError(404, "Product Not Found", str(e))
    except InsufficientStock as e:
        raise ApiError(400, "Insufficient Stock", str(e))
    except ProductValidationError as e:
        raise ApiError(400, "Validation Failed", str(e))
    except Exception:
        log.exception(failure)
        raise ApiError(500, "Internal Server Error", failure)


@router.get("", summary="List products", response_model=List[ProductOut])
def list_products(db: Session = Depends(get_db)):
    with _service_errors("Failed to fetch products"):
        items = ProductService(db).list_products()
    return [ProductOut.model_validate(p) for p in items]


# must be registered before /{product_id}, which would reject "low-stock" as an id
@router.get("/low-stock", summary="List low-stock products", response_model=List[ProductOut])
def list_low_stock(db: Session = Depends(get_db)):
    with _service_errors("Failed to fetch low stock products"):
        items = ProductService(db).list_low_stock()
    return [ProductOut.model_validate(p) for p in items]


@router.get("/{product_id}", summary="Get product by ID", response_model=ProductOut)
def get_product(product_id: ProductId, db: Session = Depends(get_db)):
    with _service_errors("Failed to fetch product"):
        p = ProductService(db).get_product(product_id)
    return ProductOut.model_validate(p)


@router.post("", summary="Create product", status_code=201, response_model=ProductOut)
def create_product(payload: ProductCreate, db: Session = Depends(get_db)):
    log.info("Creating product: %s", payload.name)
    with _service_errors("Failed to create product"):
        p = ProductService(db).create_product(
            name=payload.name,
            stock_quantity=payload.stock_quantity,
            description=payload.description,
            low_stock_threshold=payload.low_stock_threshold,
        )
    return ProductOut.model_validate(p)


@router.put("/{product_id}", summary="Update product", response_model=ProductOut)
def update_product(product_id: ProductId, payload: ProductUpdate, db: Session = Depends(get_db)):
    changes = payload.model_dump(exclude_unset=True)
    with _service_errors("Failed to update product"):
        p = ProductService(db).update_product(product_id, **changes)
    return ProductOut.model_validate(p)


@router.delete("/{product_id}", summary="Delete product", status_code=204)
def delete_product(product_id: ProductId, db: Session = Depends(get_db)):
    with _service_errors("Failed to delete product"):
        ProductService(db).delete_product(product_id)
    return Response(status_code=204)


@router.post(
    "/{product_id}/stock/increase", summary="Increase stock", response_model=ProductOut
)
def increase_stock(product_id: ProductId, payload: StockUpdate, db: Session = Depends(get_db)):
    with _service_errors("Failed to increase stock"):
        p = ProductService(db).increase_stock(product_id, payload.quantity)
    return ProductOut.model_validate(p)


@router.post(
    "/{product_id}/stock/decrease", summary="Decrease stock", response_model=ProductOut
)
def decrease_stock(product_id: ProductId, payload: StockUpdate, db: Session = Depends(get_db)):
    with _service_errors("Failed to decrease stock"):
        p = ProductService(db).decrease_stock(product_id, payload.quantity)
    return ProductOut.model_validate(p)
