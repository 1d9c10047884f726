"""Plain-text audit trail of successful checkouts.

The file is opened in append mode, written and closed once per
checkout.  It does not go through :mod:`logging`; each order gets
exactly one fixed-format line.
"""

from __future__ import annotations

import logging
import os

from online_store.config import AUDIT_LOG_PATH
from online_store.orders import Order

logger = logging.getLogger(__name__)


def format_checkout_line(order: Order) -> str:
    return (
        f"[LOG] -> Order ID: {order.order_id} has been successfully checked out "
        f"and paid using {order.payment_method}"
    )


class AuditLog:
    """Append-only text file receiving one line per checkout."""

    def __init__(self, path: str = AUDIT_LOG_PATH) -> None:
        self.path = path

    def write_checkout(self, order: Order) -> str:
        """Append the audit line for ``order`` and return it."""
        line = format_checkout_line(order)
        parent = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(parent, exist_ok=True)
        with open(self.path, "a", encoding="utf-8") as logfile:
            logfile.write(line + "\n")
        logger.info("Audit line written", extra={"extra": {"order_id": order.order_id, "path": self.path}})
        return line
