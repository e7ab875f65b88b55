"""Order aggregate: products plus an optional discount strategy; payment is delegated."""
from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from solidstore.domain.discount import Discount
from solidstore.domain.payment import PaymentProcessor
from solidstore.domain.product import Product

logger = logging.getLogger(__name__)


class Order:
    """
    Mutable accumulator of products. The total is recomputed on every call,
    so there is no cached total to keep in sync with the product list.
    """

    def __init__(self) -> None:
        self._products: List[Product] = []
        self._discount_strategy: Optional[Discount] = None

    @property
    def products(self) -> Tuple[Product, ...]:
        return tuple(self._products)

    @property
    def discount_strategy(self) -> Optional[Discount]:
        return self._discount_strategy

    def add_product(self, product: Product) -> None:
        self._products.append(product)
        logger.debug("Added product %s (%s)", product.name, product.price)

    def set_discount_strategy(self, discount_strategy: Optional[Discount]) -> None:
        """Replace the current strategy; None clears it."""
        self._discount_strategy = discount_strategy
        logger.debug("Discount strategy set to %r", discount_strategy)

    def calculate_total(self) -> float:
        """Sum of all product prices, before any discount."""
        total = 0
        for product in self._products:
            total += product.price
        return total

    def process_order(self, payment_processor: PaymentProcessor) -> float:
        """Apply the discount (if any), charge the processor and return the charged amount."""
        subtotal = self.calculate_total()
        total = subtotal
        if self._discount_strategy is not None:
            total = self._discount_strategy.apply(total)
        logger.info(
            "Processing order: %d product(s), subtotal %s, total %s via %s",
            len(self._products),
            subtotal,
            total,
            type(payment_processor).__name__,
        )
        payment_processor.process_payment(total)
        return total
