from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional

from .errors import ConfigError

ENV_PREFIX = "TYPEZERO_"


def _parse_bool(value: str) -> bool:
    parsed = value.strip().lower()
    if parsed in ("1", "true", "yes", "on"):
        return True
    if parsed in ("0", "false", "no", "off", ""):
        return False
    raise ConfigError(f"Expected a boolean, got {value!r}")


@dataclass(frozen=True)
class GenerationOptions:
    """Knobs for one generation call. Defaults mirror the engine's fixed caps."""

    root_name: str = "Root"
    sample_size: int = 50
    stats_array_sample_size: int = 25
    stats_budget: int = 10000
    enum_min_values: int = 2
    enum_max_values: int = 8
    max_depth: int = 64
    readonly_arrays: bool = False
    table_name: Optional[str] = None
    pydantic_optional_fields: bool = False

    def validate(self) -> "GenerationOptions":
        for name in ("sample_size", "stats_array_sample_size", "stats_budget", "max_depth"):
            if getattr(self, name) < 1:
                raise ConfigError(f"{name} must be a positive integer")
        if self.enum_min_values < 1 or self.enum_min_values > self.enum_max_values:
            raise ConfigError("enum_min_values must be >= 1 and <= enum_max_values")
        if not self.root_name or not self.root_name.strip():
            raise ConfigError("root_name must not be empty")
        return self

    def with_overrides(self, **overrides: Any) -> "GenerationOptions":
        clean = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **clean).validate()

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "GenerationOptions":
        """Build options from TYPEZERO_* variables (e.g. TYPEZERO_SAMPLE_SIZE=100)."""
        env = os.environ if environ is None else environ
        values: Dict[str, Any] = {}
        for f in fields(cls):
            raw = env.get(ENV_PREFIX + f.name.upper())
            if raw is None:
                continue
            if f.type in ("int", int):
                try:
                    values[f.name] = int(raw)
                except ValueError:
                    raise ConfigError(f"{ENV_PREFIX}{f.name.upper()} must be an integer, got {raw!r}") from None
            elif f.type in ("bool", bool):
                values[f.name] = _parse_bool(raw)
            else:
                values[f.name] = raw.strip() or None
        return cls(**values).validate()
