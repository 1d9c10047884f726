"""In‑memory shopping cart."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import List

from online_store.catalog import Product
from online_store.config import MAX_CART_ITEMS
from online_store.errors import CapacityExceeded, InvalidQuantity

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CartEntry:
    """A line in the shopping cart."""
    product: Product
    quantity: int

    @property
    def line_total(self) -> Decimal:
        return self.product.price * self.quantity


class Cart:
    """Ordered, bounded list of cart entries.

    Adding the same product twice produces two separate entries; the
    cart never merges lines.
    """

    def __init__(self, capacity: int = MAX_CART_ITEMS) -> None:
        self.capacity = capacity
        self._entries: List[CartEntry] = []

    def add(self, product: Product, quantity: int) -> CartEntry:
        """Append ``quantity`` units of ``product`` to the cart.

        Raises:
            InvalidQuantity: If ``quantity`` is not positive.
            CapacityExceeded: If the cart already holds ``capacity`` entries.
        """
        if quantity <= 0:
            raise InvalidQuantity(quantity)
        if len(self._entries) >= self.capacity:
            raise CapacityExceeded("Shopping cart", self.capacity)
        entry = CartEntry(product=product, quantity=quantity)
        self._entries.append(entry)
        logger.debug(
            "Cart entry added",
            extra={"extra": {"product_id": product.id, "quantity": quantity}},
        )
        return entry

    def list(self) -> List[CartEntry]:
        return list(self._entries)

    def total(self) -> Decimal:
        return sum((entry.line_total for entry in self._entries), Decimal("0"))

    def clear(self) -> None:
        self._entries.clear()

    def is_empty(self) -> bool:
        return not self._entries

    def __len__(self) -> int:
        return len(self._entries)
