from typing import List
from pydantic import BaseModel, Field, constr


class LineItem(BaseModel):
    name: str
    price: float


class ItemSchema(LineItem):
    """Item accepted from a shopper: named, with a finite non-negative price."""
    name: constr(strip_whitespace=True, min_length=1)
    price: float = Field(..., ge=0, allow_inf_nan=False, strict=True)


class ShippingFlag(LineItem):
    free_shipping: bool


class CartSummary(BaseModel):
    items: List[LineItem] = []
    total: float = 0.0
    tax: float = 0.0
    free_shipping: bool = False
    shipping: List[ShippingFlag] = []
