import pytest

from inventory_api.models.product import MAX_INTEGER
from inventory_api.services.product_service import (
    InsufficientStock,
    ProductNotFound,
    ProductService,
    ProductValidationError,
)


def test_create_product_stores_input(db):
    svc = ProductService(db)
    p = svc.create_product(name=" Tablet ", stock_quantity=12, description=" 10-inch ", low_stock_threshold=12)
    assert p.id is not None
    assert p.name == "Tablet"
    assert p.description == "10-inch"
    assert p.stock_quantity == 12
    assert p.low_stock is True


def test_create_product_default_threshold(db):
    p = ProductService(db).create_product(name="Charger", stock_quantity=50)
    assert p.low_stock_threshold == 10
    assert p.low_stock is False


@pytest.mark.parametrize(
    "kwargs, message",
    [
        ({"name": "", "stock_quantity": 1}, "Product name is required"),
        ({"name": "   ", "stock_quantity": 1}, "Product name is required"),
        ({"name": "X", "stock_quantity": None}, "Stock quantity is required"),
        ({"name": "X", "stock_quantity": -1}, "Stock quantity cannot be negative"),
        ({"name": "X", "stock_quantity": 1, "low_stock_threshold": -2}, "Low stock threshold cannot be negative"),
    ],
)
def test_create_product_validation(db, kwargs, message):
    with pytest.raises(ProductValidationError) as exc:
        ProductService(db).create_product(**kwargs)
    assert str(exc.value) == message


def test_get_unknown_product_raises_not_found(db):
    with pytest.raises(ProductNotFound) as exc:
        ProductService(db).get_product(999)
    assert exc.value.product_id == 999
    assert str(exc.value) == "Product not found with ID: 999"


def test_update_product_only_changes_supplied_fields(db):
    svc = ProductService(db)
    p = svc.update_product(3, low_stock_threshold=80)
    assert p.name == "Keyboard"
    assert p.stock_quantity == 75
    assert p.low_stock_threshold == 80
    assert p.low_stock is True


def test_update_product_rejects_blank_name(db):
    with pytest.raises(ProductValidationError, match="Product name cannot be empty"):
        ProductService(db).update_product(1, name=" ")


def test_update_unknown_product(db):
    with pytest.raises(ProductNotFound):
        ProductService(db).update_product(999, name="Ghost")


def test_delete_product(db):
    svc = ProductService(db)
    svc.delete_product(6)
    with pytest.raises(ProductNotFound):
        svc.get_product(6)
    with pytest.raises(ProductNotFound):
        svc.delete_product(6)


def test_increase_and_decrease_stock(db):
    svc = ProductService(db)
    assert svc.increase_stock(1, 5).stock_quantity == 30
    assert svc.decrease_stock(1, 5).stock_quantity == 25


def test_decrease_stock_insufficient(db):
    svc = ProductService(db)
    with pytest.raises(InsufficientStock) as exc:
        svc.decrease_stock(1, 1000)
    assert exc.value.available == 25
    assert exc.value.requested == 1000
    assert "Insufficient stock" in str(exc.value)
    assert svc.get_product(1).stock_quantity == 25


@pytest.mark.parametrize("quantity", [0, -1, None])
def test_stock_delta_must_be_positive(db, quantity):
    svc = ProductService(db)
    with pytest.raises(ProductValidationError, match="Quantity must be greater than 0"):
        svc.increase_stock(1, quantity)
    with pytest.raises(ProductValidationError, match="Quantity must be greater than 0"):
        svc.decrease_stock(1, quantity)


def test_stock_change_unknown_product(db):
    with pytest.raises(ProductNotFound):
        ProductService(db).increase_stock(999, 1)


def test_list_low_stock(db):
    svc = ProductService(db)
    low = svc.list_low_stock()
    assert [p.name for p in low] == ["Monitor", "Headphones"]
    assert all(p.stock_quantity <= p.low_stock_threshold for p in svc.list_products() if p.low_stock)


def test_increase_stock_past_integer_range(db):
    svc = ProductService(db)
    svc.update_product(1, stock_quantity=MAX_INTEGER)
    with pytest.raises(ProductValidationError, match="cannot exceed"):
        svc.increase_stock(1, 1)
    assert svc.get_product(1).stock_quantity == MAX_INTEGER


def test_create_product_rejects_oversized_values(db):
    svc = ProductService(db)
    with pytest.raises(ProductValidationError, match="Stock quantity is too large"):
        svc.create_product(name="Big", stock_quantity=MAX_INTEGER + 1)
    with pytest.raises(ProductValidationError, match="Low stock threshold is too large"):
        svc.create_product(name="Big", stock_quantity=1, low_stock_threshold=MAX_INTEGER + 1)


def test_create_product_blank_description_is_none(db):
    assert ProductService(db).create_product(name="Plain", stock_quantity=1, description="").description is None
