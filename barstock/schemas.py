from enum import Enum
from typing import NamedTuple
from pydantic import BaseModel, Field


class UnitOfMeasure(str, Enum):
    """
    Closed set of stock units. The member name is the tag, the value is the
    label shown to staff and suppliers (and what the catalog JSON carries).
    """

    BOTTLES = "botellas"
    LITERS = "litros"
    MILLILITERS = "ml"
    KEGS = "barriles"
    CASES = "cajones"
    CANS = "latas"
    SHOTS = "onzas/medidas"
    GRAMS = "gramos"
    KILOGRAMS = "kg"
    UNITS = "unidades"

    @property
    def label(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value

    @classmethod
    def _missing_(cls, value):
        # Accept the tag as well ("bottles", "BOTTLES") for CLI and form input
        if isinstance(value, str):
            return cls.__members__.get(value.strip().upper())
        return None


class StockStatus(str, Enum):
    """Traffic-light classification of a product's stock level."""

    CRITICAL = "CRITICAL"
    LOW = "LOW"
    OK = "OK"

    @property
    def label(self) -> str:
        return _STATUS_DISPLAY[self][0]

    @property
    def color(self) -> str:
        return _STATUS_DISPLAY[self][1]


_STATUS_DISPLAY = {
    StockStatus.CRITICAL: ("REPONER", "#ef4444"),
    StockStatus.LOW: ("STOCK BAJO", "#facc15"),
    StockStatus.OK: ("STOCK OK", "#10b981"),
}


class Product(BaseModel):
    """
    A single stocked item behind the bar.
    Quantities are real numbers so partial bottles can be tracked.
    """

    id: str = Field(..., frozen=True)
    name: str = Field(..., min_length=1)
    quantity: float = Field(default=0, ge=0)
    max_capacity: float = Field(..., gt=0, alias="maxCapacity")
    unit: UnitOfMeasure = UnitOfMeasure.BOTTLES
    min_stock_alert: float = Field(default=0, ge=0, alias="minStockAlert")

    class Config:
        # Accept both snake_case and the camelCase keys used by the catalog JSON
        populate_by_name = True


class Supplier(BaseModel):
    """
    A contact that restock orders are sent to.
    An empty product_ids list means the supplier carries the whole catalog.
    """

    id: str = Field(..., frozen=True)
    name: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)
    description: str = ""
    product_ids: list[str] = Field(default_factory=list, alias="productIds")

    class Config:
        populate_by_name = True


class CartItem(BaseModel):
    product_id: str = Field(..., alias="productId")
    order_quantity: float = Field(default=1, ge=1, alias="orderQuantity")

    class Config:
        populate_by_name = True


class OrderLine(NamedTuple):
    product_name: str
    order_quantity: float
    unit: UnitOfMeasure
