from sqlalchemy import CheckConstraint, Column, Integer, String, Text
from sqlalchemy.ext.hybrid import hybrid_property
from inventory_api.db import Base

# bounds of the 64-bit INTEGER columns
MAX_INTEGER = 2**63 - 1
MIN_INTEGER = -(2**63)

class Product(Base):
    __tablename__ = "products"
    __table_args__ = (
        CheckConstraint("stock_quantity >= 0", name="ck_products_stock_quantity"),
        CheckConstraint("low_stock_threshold >= 0", name="ck_products_low_stock_threshold"),
    )

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(256), nullable=False)
    description = Column(Text, nullable=True)
    stock_quantity = Column(Integer, nullable=False, default=0)
    low_stock_threshold = Column(Integer, nullable=False, default=10)

    @hybrid_property
    def low_stock(self):
        # same comparison on instances and in SQL filters
        return self.stock_quantity <= self.low_stock_threshold

    def __repr__(self):
        return f"<Product id={self.id} name={self.name} stock={self.stock_quantity}>"
