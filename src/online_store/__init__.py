"""Top‑level package for the online store console application.

The business logic lives in :mod:`online_store.app`, the interactive
menu in :mod:`online_store.cli` and the payment strategies in
:mod:`online_store.payment_service`.
"""

from online_store.app import CheckoutResult, CheckoutState, StoreApp

__all__ = ["CheckoutResult", "CheckoutState", "StoreApp"]
