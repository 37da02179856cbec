import pytest
from sqlalchemy.exc import IntegrityError

from inventory_api.repositories.product_repo import ProductRepository


def test_list_all_ordered_by_id(db):
    items = ProductRepository(db).list_all()
    assert [p.id for p in items] == [1, 2, 3, 4, 5, 6]


def test_get_missing_returns_none(db):
    assert ProductRepository(db).get(999) is None


def test_create_assigns_id(db):
    repo = ProductRepository(db)
    p = repo.create(name="Stand", stock_quantity=3)
    assert p.id == 7
    assert p.low_stock_threshold == 10
    assert repo.count() == 7


def test_update_partial(db):
    repo = ProductRepository(db)
    p = repo.update(2, description=None)
    assert p.description is None
    assert p.name == "Mouse"
    assert repo.update(999, name="x") is None


def test_update_rejects_unknown_fields(db):
    with pytest.raises(ValueError):
        ProductRepository(db).update(1, price_cents=5)


def test_delete(db):
    repo = ProductRepository(db)
    assert repo.delete(1) is True
    assert repo.delete(1) is False
    assert repo.get(1) is None


def test_low_stock_filter_in_sql(db):
    repo = ProductRepository(db)
    repo.create(name="Boundary", stock_quantity=4, low_stock_threshold=4)
    low = repo.list_low_stock()
    assert [p.name for p in low] == ["Monitor", "Headphones", "Boundary"]


def test_negative_stock_violates_check_constraint(db):
    repo = ProductRepository(db)
    with pytest.raises(IntegrityError):
        repo.create(name="Broken", stock_quantity=-1)
    db.rollback()
