# mart/models/cart.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Tuple
import math


class CartValidationError(ValueError):
    pass


def _check_name(name: Any) -> str:
    if not isinstance(name, str):
        raise CartValidationError(f"Item name must be a string, got {type(name).__name__}")
    return name


def _check_price(price: Any) -> float:
    # bool is an int subclass; True is not a price
    if isinstance(price, bool) or not isinstance(price, (int, float)):
        raise CartValidationError(f"Item price must be a number, got {type(price).__name__}")
    if not math.isfinite(price):
        raise CartValidationError(f"Item price must be finite, got {price!r}")
    return price


@dataclass(frozen=True)
class Item:
    name: str
    price: float

    def __post_init__(self):
        _check_name(self.name)
        _check_price(self.price)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Item":
        if d is None:
            raise CartValidationError("Cannot construct Item from None")
        return cls(name=d.get("name"), price=d.get("price"))

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "price": self.price}


@dataclass(frozen=True)
class Cart:
    """
    Ordered, immutable snapshot of the items in a shopping session.
    Duplicates are allowed and insertion order is preserved. Growing a cart
    always goes through add_item, which returns a new Cart and leaves this one
    untouched, so older snapshots stay valid for "what if" computations.
    """
    items: Tuple[Item, ...] = field(default_factory=tuple)

    def __post_init__(self):
        items = tuple(self.items)
        for it in items:
            if not isinstance(it, Item):
                raise CartValidationError(f"Cart entries must be Item, got {type(it).__name__}")
        # frozen dataclass: normalize lists passed by callers into a tuple
        object.__setattr__(self, "items", items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Cart":
        if d is None:
            raise CartValidationError("Cannot construct Cart from None")
        raw_items = d.get("items") or []
        items_list: List[Item] = []
        for it in raw_items:
            if isinstance(it, Item):
                items_list.append(it)
            elif isinstance(it, dict):
                items_list.append(Item.from_dict(it))
            else:
                raise CartValidationError(f"Unsupported cart entry: {it!r}")
        return cls(items=tuple(items_list))

    def to_dict(self) -> Dict[str, Any]:
        return {"items": [it.to_dict() for it in self.items]}

    def add(self, item: Item) -> "Cart":
        return add_item(self, item)


def make_item(name: str, price: float) -> Item:
    """
    Build an Item. Malformed names or prices raise CartValidationError;
    a negative price is accepted here and left for the caller to police.
    """
    return Item(name=name, price=price)


def empty_cart() -> Cart:
    return Cart()


def add_item(cart: Cart, item: Item) -> Cart:
    """Return a new cart with `item` appended. `cart` itself is not modified."""
    if not isinstance(cart, Cart):
        raise CartValidationError(f"Expected Cart, got {type(cart).__name__}")
    if not isinstance(item, Item):
        raise CartValidationError(f"Expected Item, got {type(item).__name__}")
    return Cart(items=cart.items + (item,))
