# backend/inventory_api/schemas/product_schema.py
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from inventory_api.models.product import MAX_INTEGER

# JSON is camelCase; snake_case names are accepted too.
_CAMEL = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProductCreate(BaseModel):
    model_config = _CAMEL

    # optional at the type level so a missing value reports the messages below
    name: Optional[str] = Field(None, validate_default=True)
    description: Optional[str] = None
    stock_quantity: Optional[int] = Field(None, validate_default=True)
    low_stock_threshold: Optional[int] = None

    @field_validator("name")
    @classmethod
    def name_required(cls, v):
        if v is None or not v.strip():
            raise ValueError("Product name is required")
        return v

    @field_validator("stock_quantity")
    @classmethod
    def stock_required(cls, v):
        if v is None:
            raise ValueError("Stock quantity is required")
        if v < 0:
            raise ValueError("Stock quantity cannot be negative")
        if v > MAX_INTEGER:
            raise ValueError("Stock quantity is too large")
        return v

    @field_validator("low_stock_threshold")
    @classmethod
    def threshold_non_negative(cls, v):
        if v is not None and v < 0:
            raise ValueError("Low stock threshold cannot be negative")
        if v is not None and v > MAX_INTEGER:
            raise ValueError("Low stock threshold is too large")
        return v


class ProductUpdate(BaseModel):
    """Every field is optional; only the ones present in the body are applied."""

    model_config = _CAMEL

    name: Optional[str] = None
    description: Optional[str] = None
    stock_quantity: Optional[int] = None
    low_stock_threshold: Optional[int] = None

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, v):
        if v is None or not v.strip():
            raise ValueError("Product name cannot be empty")
        return v

    @field_validator("stock_quantity")
    @classmethod
    def stock_non_negative(cls, v):
        if v is None or v < 0:
            raise ValueError("Stock quantity cannot be negative")
        if v > MAX_INTEGER:
            raise ValueError("Stock quantity is too large")
        return v

    @field_validator("low_stock_threshold")
    @classmethod
    def threshold_non_negative(cls, v):
        if v is None or v < 0:
            raise ValueError("Low stock threshold cannot be negative")
        if v > MAX_INTEGER:
            raise ValueError("Low stock threshold is too large")
        return v


class StockUpdate(BaseModel):
    quantity: Optional[int] = Field(None, validate_default=True)

    @field_validator("quantity")
    @classmethod
    def quantity_positive(cls, v):
        if v is None or v <= 0:
            raise ValueError("Quantity must be greater than 0")
        if v > MAX_INTEGER:
            raise ValueError("Quantity is too large")
        return v


class ProductOut(BaseModel):
    model_config = ConfigDict(
        from_attributes=True, alias_generator=to_camel, populate_by_name=True
    )
    id: int
    name: str
    description: Optional[str] = None
    stock_quantity: int
    low_stock_threshold: int
    low_stock: bool
