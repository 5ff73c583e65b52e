# mart/services/actions.py
"""
Session-level actions: the side-effecting layer that owns the current cart,
calls into the pure pricing functions and reports the results.

Every report goes through the "mart" logger; the computed values are also
returned so callers can render them however they like.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Optional
import logging

from pydantic import ValidationError

from mart.config import FREE_SHIPPING_THRESHOLD, TAX_RATE
from mart.models.cart import Cart, CartValidationError, Item, add_item, empty_cart, make_item
from mart.schemas.cart import CartSummary, ItemSchema
from mart.services import pricing

logger = logging.getLogger("mart.actions")


@dataclass(frozen=True)
class BuyButton:
    item: Item


# mock storefront buttons used when the caller does not inject its own
DEFAULT_BUY_BUTTONS: List[BuyButton] = [
    BuyButton(item=make_item("sword", 15)),
    BuyButton(item=make_item("shield", 22)),
    BuyButton(item=make_item("potion", 2)),
]


class ShoppingSession:
    """
    Holds the cart for one shopping session.

    Usage:
      session = ShoppingSession()
      summary = session.add_item_to_cart("sword", 12)
      summary.total, summary.tax, [f.free_shipping for f in summary.shipping]

    `cart` is always an immutable snapshot; adding an item swaps in a new one,
    so snapshots handed out earlier never change underneath the caller.
    """

    def __init__(
        self,
        buttons: Optional[Iterable[BuyButton]] = None,
        tax_rate: float = TAX_RATE,
        threshold: float = FREE_SHIPPING_THRESHOLD,
    ):
        self.buttons: List[BuyButton] = list(DEFAULT_BUY_BUTTONS if buttons is None else buttons)
        self.tax_rate = tax_rate
        self.threshold = threshold
        self.cart: Cart = empty_cart()
        self.total: float = 0

    def add_item_to_cart(self, name: str, price: float) -> CartSummary:
        try:
            checked = ItemSchema(name=name, price=price)
        except ValidationError as e:
            logger.warning("Rejected item %r: %s", name, e)
            raise CartValidationError(f"Invalid item {name!r}: {e.errors()[0]['msg']}") from e

        self.cart = add_item(self.cart, make_item(checked.name, checked.price))
        logger.info("Added %s (%s) to cart", checked.name, checked.price)
        return self.calc_cart_total()

    def calc_cart_total(self) -> CartSummary:
        summary = pricing.summarize(
            self.cart,
            [b.item for b in self.buttons],
            rate=self.tax_rate,
            threshold=self.threshold,
        )
        self.total = summary.total
        self.set_cart_total()
        self.update_shipping_icons(summary)
        self.update_tax(summary)
        return summary

    def set_cart_total(self) -> None:
        logger.info("Cart total: %s", self.total)

    def shipping_flags(self) -> List[bool]:
        return [pricing.would_get_free_shipping(self.cart, b.item, self.threshold) for b in self.buttons]

    def update_shipping_icons(self, summary: CartSummary) -> None:
        for flag in summary.shipping:
            if flag.free_shipping:
                logger.info("%s: gets free shipping", flag.name)
            else:
                logger.info("%s: no free shipping", flag.name)

    def update_tax(self, summary: CartSummary) -> None:
        logger.info("Tax: %s", summary.tax)


def run_demo(session: Optional[ShoppingSession] = None) -> ShoppingSession:
    """Add a sword to a fresh cart and log the resulting cart contents."""
    session = session or ShoppingSession()
    session.add_item_to_cart("sword", 12)
    logger.info("Cart: %s", session.cart.to_dict()["items"])
    return session
