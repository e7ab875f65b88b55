"""Payment processors: simulated payment sinks that emit one line per payment."""
from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable

Echo = Callable[[str], None]


@runtime_checkable
class PaymentProcessor(Protocol):
    """Order only needs process_payment; concrete processors are chosen by the caller."""

    def process_payment(self, amount: float) -> None:
        ...


def format_amount(amount: float) -> str:
    """Six significant digits, no trailing zeros: 1350.0 -> '1350', 1349.5 -> '1349.5'."""
    return format(amount, "g")


class _EchoProcessor:
    def __init__(self, echo: Echo = print) -> None:
        self._echo = echo


class CreditCardProcessor(_EchoProcessor):
    def process_payment(self, amount: float) -> None:
        self._echo(f"Processing credit card payment of ${format_amount(amount)}")


class PayPalProcessor(_EchoProcessor):
    def process_payment(self, amount: float) -> None:
        self._echo(f"Processing PayPal payment of ${format_amount(amount)}")
