"""Store settings from the environment (STORE_* variables)."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional


def load_from_env(
    prefix: str = "STORE_", environ: Optional[Mapping[str, str]] = None, **defaults: Any
) -> dict[str, Any]:
    """Defaults overridden by env vars with prefix; keys are lowercased without the prefix."""
    env = os.environ if environ is None else environ
    result = dict(defaults)
    for key, value in env.items():
        if key.startswith(prefix):
            result[key[len(prefix):].lower()] = value
    return result


@dataclass
class StoreConfig:
    processor: str = "credit-card"
    discount_percent: Optional[float] = None
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> StoreConfig:
        """
        STORE_PROCESSOR, STORE_DISCOUNT_PERCENT and STORE_LOG_LEVEL.
        Unknown STORE_* variables are ignored; a non-numeric discount raises ValueError.
        """
        values = load_from_env(environ=environ)
        config = cls()
        if values.get("processor"):
            config.processor = values["processor"].strip()
        raw_percent = values.get("discount_percent")
        if raw_percent is not None and raw_percent.strip():
            try:
                config.discount_percent = float(raw_percent)
            except ValueError:
                raise ValueError(f"STORE_DISCOUNT_PERCENT must be a number, got {raw_percent!r}") from None
        if values.get("log_level"):
            config.log_level = values["log_level"].strip().upper()
        return config
