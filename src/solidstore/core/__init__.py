from solidstore.core.config import StoreConfig, load_from_env
from solidstore.core.registry import StrategyRegistry, default_processors, discount_for

__all__ = [
    "StoreConfig",
    "load_from_env",
    "StrategyRegistry",
    "default_processors",
    "discount_for",
]
