"""Discount strategies: turn a pre-discount total into the amount to charge."""
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from solidstore.domain.value_object import ValueObject


@runtime_checkable
class Discount(Protocol):
    """Any object with apply(total) -> total can be set on an Order."""

    def apply(self, total: float) -> float:
        ...


@dataclass(frozen=True)
class NoDiscount(ValueObject):
    def apply(self, total: float) -> float:
        return total


@dataclass(frozen=True)
class PercentageDiscount(ValueObject):
    """Takes `percent` percent off the total. Percent must be within [0, 100]."""
    percent: float

    def __post_init__(self) -> None:
        if not 0 <= self.percent <= 100:
            raise ValueError(f"Discount percent must be between 0 and 100, got {self.percent}")

    def apply(self, total: float) -> float:
        return total - total * self.percent / 100
