# payment_service.py
"""
Payment simulation used by the online store.

- Strategy-based processing (cash / credit-debit card / GCash).
- Strategies are registered under the number shown in the payment menu.
- No real gateway is called and no payment ever fails; each strategy only
  produces a confirmation message.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Dict, List, Tuple

from online_store.errors import InvalidPaymentChoice

logger = logging.getLogger(__name__)


def format_amount(amount: Decimal) -> str:
    return f"{amount:.2f}"


# ---------- Strategy interfaces ----------

class PaymentStrategy:
    """Abstract base for payment strategies."""
    label: str

    def pay(self, amount: Decimal) -> str:
        """Return the confirmation message for paying ``amount``."""
        raise NotImplementedError

    def _confirmation(self, amount: Decimal) -> str:
        return f"Paid {format_amount(amount)} using {self.label}."


class CashPaymentStrategy(PaymentStrategy):
    """Pay over the counter in cash."""
    label = "Cash"

    def pay(self, amount: Decimal) -> str:
        return self._confirmation(amount)


class CreditPaymentStrategy(PaymentStrategy):
    """Pay with a credit or debit card."""
    label = "Credit / Debit Card"

    def pay(self, amount: Decimal) -> str:
        return self._confirmation(amount)


class GCashPaymentStrategy(PaymentStrategy):
    """Pay with the GCash e-wallet."""
    label = "GCash"

    def pay(self, amount: Decimal) -> str:
        return self._confirmation(amount)


# ---------- Payment dispatcher ----------

class PaymentService:
    """
    Single dispatch point for every payment in a store session.

    The service is created by the application object that owns it; there is
    no module-level instance.
    """

    def __init__(self) -> None:
        # Strategy registry keyed by menu number
        self.strategies: Dict[str, PaymentStrategy] = {}
        self.register_strategy("1", CashPaymentStrategy())
        self.register_strategy("2", CreditPaymentStrategy())
        self.register_strategy("3", GCashPaymentStrategy())

    # ----- strategy registry -----
    def register_strategy(self, choice: str, strategy: PaymentStrategy) -> None:
        self.strategies[choice.strip()] = strategy

    def menu(self) -> List[Tuple[str, str]]:
        """Return ``(choice, label)`` pairs in menu order."""
        return [(choice, strategy.label) for choice, strategy in self.strategies.items()]

    def select_strategy(self, choice: str) -> PaymentStrategy:
        """Map a payment menu selection to its strategy.

        Raises:
            InvalidPaymentChoice: If ``choice`` is not a registered number.
        """
        strategy = self.strategies.get(choice.strip())
        if strategy is None:
            raise InvalidPaymentChoice(choice)
        return strategy

    # ----- main API -----
    def process_payment(self, strategy: PaymentStrategy, amount: Decimal) -> str:
        """Run ``strategy`` for ``amount`` and return its confirmation."""
        confirmation = strategy.pay(amount)
        logger.info(
            "Payment processed",
            extra={"extra": {"payment_method": strategy.label, "amount": format_amount(amount)}},
        )
        return confirmation
