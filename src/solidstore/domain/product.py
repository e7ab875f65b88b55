"""Product: name and price, fixed at construction."""
from dataclasses import dataclass

from solidstore.domain.value_object import ValueObject


@dataclass(frozen=True)
class Product(ValueObject):
    name: str
    price: float

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Product name must not be empty")
        if self.price < 0:
            raise ValueError(f"Product price must be non-negative, got {self.price}")
