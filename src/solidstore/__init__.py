"""
solidstore — a toy online store composed from small, substitutable parts.
Order depends on the Discount and PaymentProcessor capabilities, never on concrete classes.
"""
from solidstore.domain import (
    CreditCardProcessor,
    Discount,
    NoDiscount,
    Order,
    PaymentProcessor,
    PayPalProcessor,
    PercentageDiscount,
    Product,
)
from solidstore.example import run_example

__all__ = [
    "Product",
    "Discount",
    "NoDiscount",
    "PercentageDiscount",
    "PaymentProcessor",
    "CreditCardProcessor",
    "PayPalProcessor",
    "Order",
    "run_example",
]
