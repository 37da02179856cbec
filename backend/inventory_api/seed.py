"""
Sample data and JSON loading for the products table.

JSON sources may be a list of product entries or an object with an "items"
list. Entry keys are accepted in camelCase or snake_case, and "stock" or
"quantity" are taken as the stock quantity when "stockQuantity" is absent.
"""
import json
import os
from typing import List, Optional

from sqlalchemy.orm import Session

from inventory_api.repositories.product_repo import ProductRepository
from inventory_api.services.product_service import ProductService, ProductValidationError
from inventory_api.utils.logger import get_logger

log = get_logger("seed")

SAMPLE_PRODUCTS = [
    {"name": "Laptop",     "description": "High-performance laptop",     "stock_quantity": 25,  "low_stock_threshold": 5},
    {"name": "Mouse",      "description": "Wireless optical mouse",      "stock_quantity": 150, "low_stock_threshold": 20},
    {"name": "Keyboard",   "description": "Mechanical keyboard",         "stock_quantity": 75,  "low_stock_threshold": 10},
    {"name": "Monitor",    "description": "24-inch LED monitor",         "stock_quantity": 8,   "low_stock_threshold": 15},
    {"name": "Headphones", "description": "Noise-cancelling headphones", "stock_quantity": 3,   "low_stock_threshold": 10},
    {"name": "Webcam",     "description": "HD webcam for video calls",   "stock_quantity": 45,  "low_stock_threshold": 8},
]


def seed_sample_products(db: Session) -> int:
    """Insert SAMPLE_PRODUCTS when the table is empty. Returns rows created."""
    repo = ProductRepository(db)
    if repo.count():
        return 0
    for ent in SAMPLE_PRODUCTS:
        repo.create(**ent)
    db.commit()
    return len(SAMPLE_PRODUCTS)


def _first(entry: dict, *keys):
    for k in keys:
        if entry.get(k) is not None:
            return entry[k]
    return None


def _to_int(value) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def normalize_entry(entry: dict) -> dict:
    """Return a dict with keys: name, description, stock_quantity, low_stock_threshold"""
    name = _first(entry, "name", "title")
    description = _first(entry, "description")
    return {
        # a non-string name is left blank so validation rejects the entry
        "name": name if isinstance(name, str) else "",
        "description": str(description) if description is not None else None,
        "stock_quantity": _to_int(
            _first(entry, "stockQuantity", "stock_quantity", "stock", "quantity")
        ),
        "low_stock_threshold": _to_int(
            _first(entry, "lowStockThreshold", "low_stock_threshold")
        ),
    }


def load_entries(path: str) -> List[dict]:
    if not os.path.exists(path):
        raise FileNotFoundError(path)
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise RuntimeError(f"Failed to parse JSON from {path}: {e}")

    if isinstance(data, dict):
        source = data["items"] if isinstance(data.get("items"), list) else list(data.values())
    elif isinstance(data, list):
        source = data
    else:
        source = []
    return [normalize_entry(e) for e in source if isinstance(e, dict)]


def seed_from_file(path: str, db: Session) -> int:
    """
    Create a product for every valid entry in the JSON file at `path`.
    Entries rejected by the service are logged and skipped.
    """
    svc = ProductService(db)
    created = 0
    for entry in load_entries(path):
        try:
            svc.create_product(**entry)
            created += 1
        except ProductValidationError as e:
            log.warning("Skipping entry %r: %s", entry.get("name"), e)
    log.info("Seeded products: %d", created)
    return created
