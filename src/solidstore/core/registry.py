"""Named strategy registry: register a factory under a name, resolve by name."""
from __future__ import annotations

from typing import Any, Callable, Optional

from solidstore.domain.discount import Discount, NoDiscount, PercentageDiscount
from solidstore.domain.payment import CreditCardProcessor, Echo, PayPalProcessor


class StrategyRegistry:
    """
    Maps names to factories so callers pick a strategy without importing its class.
    Singletons are created on first resolve and reused afterwards.
    """

    def __init__(self) -> None:
        self._factories: dict[str, Callable[[], Any]] = {}
        self._singletons: dict[str, Any] = {}
        self._singleton_names: set[str] = set()

    def register(self, name: str, factory: Callable[[], Any], singleton: bool = True) -> None:
        self._factories[name] = factory
        self._singletons.pop(name, None)
        if singleton:
            self._singleton_names.add(name)
        else:
            self._singleton_names.discard(name)

    def register_instance(self, name: str, instance: Any) -> None:
        self._factories[name] = lambda: instance
        self._singletons[name] = instance
        self._singleton_names.add(name)

    def resolve(self, name: str) -> Any:
        if name not in self._factories:
            raise KeyError(f"No registration for {name}")
        if name in self._singletons:
            return self._singletons[name]
        instance = self._factories[name]()
        if name in self._singleton_names:
            self._singletons[name] = instance
        return instance

    def names(self) -> list[str]:
        return sorted(self._factories)

    def __contains__(self, name: object) -> bool:
        return name in self._factories


def default_processors(echo: Echo = print) -> StrategyRegistry:
    """Registry with the built-in payment processors writing to `echo`."""
    registry = StrategyRegistry()
    registry.register("credit-card", lambda: CreditCardProcessor(echo=echo))
    registry.register("paypal", lambda: PayPalProcessor(echo=echo))
    return registry


def discount_for(percent: Optional[float]) -> Discount:
    if not percent:
        return NoDiscount()
    return PercentageDiscount(percent)
