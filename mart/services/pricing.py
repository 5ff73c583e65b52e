# mart/services/pricing.py
"""
Pure pricing calculations over a cart snapshot.

Nothing here keeps state or performs I/O: the same cart always yields the
same total, tax and shipping eligibility.

    cart -> calc_total -> calc_tax
                       -> gets_free_shipping
"""
from __future__ import annotations
from typing import Iterable, List

from mart.config import TAX_RATE, FREE_SHIPPING_THRESHOLD
from mart.models.cart import Cart, CartValidationError, Item, add_item
from mart.schemas.cart import CartSummary, LineItem, ShippingFlag
from mart.utils.functional import reduce


def _require_cart(cart) -> Cart:
    if not isinstance(cart, Cart):
        raise CartValidationError(f"Expected Cart, got {type(cart).__name__}")
    return cart


def calc_total(cart: Cart) -> float:
    return reduce(_require_cart(cart), 0, lambda total, item: total + item.price)


def calc_tax(total: float, rate: float = TAX_RATE) -> float:
    return total * rate


def gets_free_shipping(cart: Cart, threshold: float = FREE_SHIPPING_THRESHOLD) -> bool:
    return calc_total(cart) >= threshold


def would_get_free_shipping(cart: Cart, item: Item, threshold: float = FREE_SHIPPING_THRESHOLD) -> bool:
    """Eligibility if `item` were added. `cart` is left as it was."""
    return gets_free_shipping(add_item(cart, item), threshold)


def summarize(
    cart: Cart,
    offered: Iterable[Item] = (),
    rate: float = TAX_RATE,
    threshold: float = FREE_SHIPPING_THRESHOLD,
) -> CartSummary:
    """
    Collect everything a storefront renders for a cart: the running total,
    the tax on it, whether the cart already ships free, and for every offered
    item whether adding it would make the cart ship free.
    """
    total = calc_total(cart)
    shipping: List[ShippingFlag] = [
        ShippingFlag(
            name=item.name,
            price=item.price,
            free_shipping=would_get_free_shipping(cart, item, threshold),
        )
        for item in offered
    ]
    return CartSummary(
        items=[LineItem(**it.to_dict()) for it in cart],
        total=total,
        tax=calc_tax(total, rate),
        free_shipping=total >= threshold,
        shipping=shipping,
    )
