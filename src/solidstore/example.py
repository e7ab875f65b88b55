"""Fixed example run: two products, 10% off, paid by credit card."""
from solidstore.domain import CreditCardProcessor, Order, PercentageDiscount, Product
from solidstore.domain.payment import Echo


def run_example(echo: Echo = print) -> float:
    order = Order()
    order.add_product(Product("Laptop", 1000))
    order.add_product(Product("Phone", 500))
    order.set_discount_strategy(PercentageDiscount(10))
    return order.process_order(CreditCardProcessor(echo=echo))
