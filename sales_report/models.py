from collections.abc import Callable
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Identifiers may arrive as numbers; they are keyed as strings.
_INPUT_CONFIG = ConfigDict(coerce_numbers_to_str=True)


class Seller(BaseModel):
    model_config = _INPUT_CONFIG

    id: str
    first_name: str
    last_name: str


class Customer(BaseModel):
    # opaque to the report; only its presence is checked
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    id: Optional[str] = None


class Product(BaseModel):
    model_config = _INPUT_CONFIG

    sku: str
    purchase_price: float
    name: Optional[str] = None


class Item(BaseModel):
    model_config = _INPUT_CONFIG

    sku: str
    quantity: int
    sale_price: float
    discount: float = Field(default=0, ge=0, le=100)  # percent, 0-100


class PurchaseRecord(BaseModel):
    model_config = _INPUT_CONFIG

    seller_id: str
    total_amount: float
    items: list[Item]
    receipt_id: Optional[str] = None
    customer_id: Optional[str] = None


class SalesDataset(BaseModel):
    sellers: list[Seller] = Field(min_length=1)
    customers: list[Customer] = Field(min_length=1)
    products: list[Product] = Field(min_length=1)
    purchase_records: list[PurchaseRecord] = Field(min_length=1)

    @model_validator(mode="after")
    def _unique_seller_ids(self) -> "SalesDataset":
        seen: set[str] = set()
        for seller in self.sellers:
            if seller.id in seen:
                raise ValueError(f"duplicate seller id '{seller.id}'")
            seen.add(seller.id)
        return self


# ── Working state ────────────────────────────────────────────────────────────

class SellerAccumulator(BaseModel):
    id: str
    name: str
    revenue: float = 0.0
    profit: float = 0.0
    sales_count: int = 0
    # sku -> cumulative quantity, in order of first sale
    products_sold: dict[str, int] = Field(default_factory=dict)


class AnalysisOptions(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    calculate_revenue: Callable[[Item], float] = Field(alias="calculateRevenue")
    calculate_bonus: Callable[[int, int, SellerAccumulator], float] = Field(
        alias="calculateBonus"
    )


# ── Response models ──────────────────────────────────────────────────────────

class TopProduct(BaseModel):
    sku: str
    quantity: int


class SellerReport(BaseModel):
    seller_id: str
    name: str
    revenue: float
    profit: float
    sales_count: int
    top_products: list[TopProduct]
    bonus: float

