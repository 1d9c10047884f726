"""Append‑only order ledger."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, List, Tuple

from online_store.cart import CartEntry
from online_store.config import MAX_ORDERS
from online_store.errors import CapacityExceeded

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Order:
    """A completed checkout.  Line items are a snapshot of the cart."""
    order_id: int
    total_amount: Decimal
    payment_method: str
    line_items: Tuple[CartEntry, ...]


class OrderLedger:
    """Bounded history of orders in creation order.

    Order ids are sequential: each new order gets ``len(ledger) + 1``.
    There is no update or delete.
    """

    def __init__(self, capacity: int = MAX_ORDERS) -> None:
        self.capacity = capacity
        self._orders: List[Order] = []

    def ensure_capacity(self) -> None:
        """Raise :class:`CapacityExceeded` if no further order fits."""
        if len(self._orders) >= self.capacity:
            raise CapacityExceeded("Order ledger", self.capacity)

    def record(self, total: Decimal, method_label: str, items: Iterable[CartEntry]) -> Order:
        """Store a new order and return it.

        :param total: Amount charged for the order.
        :param method_label: Human readable payment method, e.g. ``"GCash"``.
        :param items: Cart entries to snapshot into the order.
        :raises CapacityExceeded: If the ledger is full.
        """
        self.ensure_capacity()
        order = Order(
            order_id=len(self._orders) + 1,
            total_amount=total,
            payment_method=method_label,
            line_items=tuple(items),
        )
        self._orders.append(order)
        logger.info(
            "Order recorded",
            extra={"extra": {"order_id": order.order_id, "total": str(total), "items": len(order.line_items)}},
        )
        return order

    def list_all(self) -> List[Order]:
        return list(self._orders)

    def __len__(self) -> int:
        return len(self._orders)
