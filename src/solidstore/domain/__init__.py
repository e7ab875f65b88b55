"""Domain layer: Product value, Discount and PaymentProcessor strategies, Order aggregate."""
from solidstore.domain.value_object import ValueObject
from solidstore.domain.product import Product
from solidstore.domain.discount import Discount, NoDiscount, PercentageDiscount
from solidstore.domain.payment import (
    CreditCardProcessor,
    PaymentProcessor,
    PayPalProcessor,
    format_amount,
)
from solidstore.domain.order import Order

__all__ = [
    "ValueObject",
    "Product",
    "Discount",
    "NoDiscount",
    "PercentageDiscount",
    "PaymentProcessor",
    "CreditCardProcessor",
    "PayPalProcessor",
    "format_amount",
    "Order",
]
