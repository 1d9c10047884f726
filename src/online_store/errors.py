"""Exception types raised by the store's domain objects.

Every error derives from :class:`StoreError` so the interactive layer
can catch the whole family in one place, report it and re‑offer the
menu.  None of them is meant to terminate the program.
"""

from __future__ import annotations


class StoreError(Exception):
    """Base class for recoverable store errors."""


class ProductNotFound(StoreError, LookupError):
    """Raised when a product id is not in the catalog."""

    def __init__(self, product_id: str) -> None:
        self.product_id = product_id
        super().__init__("Product ID not found!")


class InvalidQuantity(StoreError, ValueError):
    """Raised when a cart quantity is zero or negative."""

    def __init__(self, quantity: int) -> None:
        self.quantity = quantity
        super().__init__("Invalid quantity!")


class InvalidPaymentChoice(StoreError, ValueError):
    """Raised when the payment menu selection is out of range."""

    def __init__(self, choice: str) -> None:
        self.choice = choice
        super().__init__("Invalid payment method. Transaction cancelled.")


class InvalidMenuChoice(StoreError, ValueError):
    """Raised when the main menu selection is out of range."""

    def __init__(self, choice: str) -> None:
        self.choice = choice
        super().__init__("Invalid choice. Please try again.")


class CapacityExceeded(StoreError):
    """Raised when a bounded collection (catalog, cart, ledger) is full."""

    def __init__(self, what: str, capacity: int) -> None:
        self.what = what
        self.capacity = capacity
        super().__init__(f"{what} is full (maximum {capacity}).")


class NonNumericInput(StoreError, ValueError):
    """Raised when a quantity or menu number is not an integer."""

    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__("Please enter valid numeric values.")
