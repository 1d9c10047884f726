# src/online_store/app.py
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import List, Optional

from online_store.audit_log import AuditLog
from online_store.cart import Cart, CartEntry
from online_store.catalog import Catalog, Product
from online_store.config import AUDIT_LOG_PATH, MAX_CART_ITEMS, MAX_ORDERS
from online_store.errors import CapacityExceeded, InvalidPaymentChoice, StoreError
from online_store.orders import Order, OrderLedger
from online_store.payment_service import PaymentService

from online_store.metrics import (
    CART_ADDITIONS_TOTAL,
    CHECKOUTS_TOTAL,
    CHECKOUT_CANCELLED_TOTAL,
    INPUT_ERRORS_TOTAL,
)
import logging
logger = logging.getLogger(__name__)


class CheckoutState(str, Enum):
    """Stages of a single checkout attempt."""
    BROWSING = "browsing"
    CART_REVIEW = "cart_review"
    PAYMENT_SELECTION = "payment_selection"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class CheckoutResult:
    """Outcome of :meth:`StoreApp.checkout`.

    ``order`` and ``confirmation`` are only set when ``state`` is
    :attr:`CheckoutState.COMPLETED`.
    """
    state: CheckoutState
    message: str
    order: Optional[Order] = None
    confirmation: str = ""

    @property
    def ok(self) -> bool:
        return self.state is CheckoutState.COMPLETED


class StoreApp:
    """
    Business logic for the store session.  Exposes catalog browsing, cart
    management, checkout and order history.  Holds no I/O besides the
    audit file; the interactive loop lives in :mod:`online_store.cli`.
    """

    def __init__(
        self,
        catalog: Catalog | None = None,
        audit_log_path: str = AUDIT_LOG_PATH,
        cart_capacity: int = MAX_CART_ITEMS,
        order_capacity: int = MAX_ORDERS,
    ) -> None:
        self.catalog = catalog if catalog is not None else Catalog()
        self.cart = Cart(capacity=cart_capacity)
        self.orders = OrderLedger(capacity=order_capacity)
        self.payment_service = PaymentService()
        self.audit_log = AuditLog(audit_log_path)
        self.checkout_state = CheckoutState.BROWSING

    # ---- Product catalogue ----

    def list_products(self) -> List[Product]:
        return self.catalog.list()

    def find_product(self, product_id: str) -> Product:
        try:
            return self.catalog.lookup(product_id)
        except StoreError as exc:
            self.record_input_error(exc)
            raise

    # ---- Cart operations ----

    def add_to_cart(self, product_id: str, qty: int) -> CartEntry:
        """Look up ``product_id`` and append ``qty`` units to the cart.

        Raises:
            ProductNotFound: Unknown product id.
            InvalidQuantity: ``qty`` is not positive.
            CapacityExceeded: The cart is full.
        """
        try:
            product = self.catalog.lookup(product_id)
            entry = self.cart.add(product, qty)
        except StoreError as exc:
            self.record_input_error(exc)
            raise
        self.checkout_state = CheckoutState.BROWSING
        CART_ADDITIONS_TOTAL.inc()
        logger.info(
            "Product added to cart",
            extra={"extra": {"product_id": product.id, "quantity": qty, "cart_size": len(self.cart)}},
        )
        return entry

    def view_cart(self) -> List[CartEntry]:
        """Return the cart contents and enter cart review when non-empty."""
        entries = self.cart.list()
        self.checkout_state = CheckoutState.CART_REVIEW if entries else CheckoutState.BROWSING
        return entries

    def cart_total(self) -> Decimal:
        return self.cart.total()

    def clear_cart(self) -> None:
        self.cart.clear()

    # ---- Orders ----

    def list_orders(self) -> List[Order]:
        return self.orders.list_all()

    # ---- Checkout ----

    def begin_checkout(self) -> bool:
        """Move from cart review to payment selection.

        Returns False (and changes nothing) unless the cart is being
        reviewed, i.e. :meth:`view_cart` returned a non-empty cart since
        the last change.
        """
        if self.checkout_state is not CheckoutState.CART_REVIEW:
            return False
        self.checkout_state = CheckoutState.PAYMENT_SELECTION
        return True

    def checkout(self, payment_choice: str) -> CheckoutResult:
        """Pay for the whole cart with the payment menu entry ``payment_choice``.

        Only allowed after :meth:`begin_checkout`.  On success the order
        is recorded, the audit line is written and the cart is cleared.
        An invalid choice, an empty cart, a checkout that was never begun
        or a full order ledger cancels the checkout and leaves the cart
        untouched.
        """
        if self.cart.is_empty():
            return self._cancel("empty_cart", "Shopping cart is empty!")
        if self.checkout_state is not CheckoutState.PAYMENT_SELECTION:
            return self._cancel("not_begun", "Review the shopping cart before checking out.")

        try:
            strategy = self.payment_service.select_strategy(payment_choice)
        except InvalidPaymentChoice as exc:
            self.record_input_error(exc)
            return self._cancel("invalid_payment_choice", str(exc))

        try:
            # Refuse before paying so a charge is never left without an order
            self.orders.ensure_capacity()
        except CapacityExceeded as exc:
            return self._cancel("ledger_full", str(exc))

        items = self.cart.list()
        total = self.cart.total()
        confirmation = self.payment_service.process_payment(strategy, total)
        order = self.orders.record(total, strategy.label, items)
        self.audit_log.write_checkout(order)
        self.cart.clear()

        self.checkout_state = CheckoutState.COMPLETED
        CHECKOUTS_TOTAL.inc(payment_method=strategy.label)
        logger.info(
            "Checkout completed",
            extra={"extra": {"order_id": order.order_id, "payment_method": strategy.label, "total": str(total)}},
        )
        return CheckoutResult(
            state=CheckoutState.COMPLETED,
            message="You have successfully checked out the products!",
            order=order,
            confirmation=confirmation,
        )

    def _cancel(self, reason: str, message: str) -> CheckoutResult:
        self.checkout_state = CheckoutState.CANCELLED
        CHECKOUT_CANCELLED_TOTAL.inc(reason=reason)
        logger.warning("Checkout cancelled", extra={"extra": {"reason": reason, "cart_size": len(self.cart)}})
        return CheckoutResult(state=CheckoutState.CANCELLED, message=message)

    # ---- Diagnostics ----

    @staticmethod
    def record_input_error(exc: StoreError) -> None:
        """Count and log a rejected user input."""
        INPUT_ERRORS_TOTAL.inc(type=type(exc).__name__)
        logger.warning("Input rejected", extra={"extra": {"error": type(exc).__name__, "detail": str(exc)}})
