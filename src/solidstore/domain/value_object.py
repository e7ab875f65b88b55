"""ValueObject — immutable value without identity; equality by fields."""
from dataclasses import dataclass


@dataclass(frozen=True)
class ValueObject:
    """Base for frozen dataclasses. Subclasses validate in __post_init__ and are never mutated."""
    pass
