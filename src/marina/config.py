"""Runtime settings for the marina inventory.

Settings come from built-in defaults, optionally overridden by a YAML
file::

    capacity: 120
    rates:
      slip: 12.50
      land: 14.00
      trailer: 25.00
      storage: 11.20

Any subset of keys may be given; rates for unlisted kinds keep their
defaults.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

from marina.billing.billing import DEFAULT_RATES
from marina.model.boat import PlacementKind
from marina.registry.registry import DEFAULT_CAPACITY

logger = logging.getLogger(__name__)

_KNOWN_KEYS = frozenset({"capacity", "rates"})


class ConfigError(ValueError):
    """Raised when a settings file is malformed."""


@dataclass(frozen=True)
class MarinaSettings:
    """Immutable settings shared by the registry and billing.

    Parameters
    ----------
    capacity:
        Maximum number of boats the registry accepts.
    rates:
        Monthly per-foot rate for each placement kind.
    """

    capacity: int = DEFAULT_CAPACITY
    rates: Mapping[PlacementKind, float] = field(default_factory=lambda: DEFAULT_RATES)

    def with_capacity(self, capacity: int | None) -> "MarinaSettings":
        """Return a copy with ``capacity`` replaced, unless it is ``None``."""
        if capacity is None:
            return self
        return replace(self, capacity=_check_capacity(capacity))


def _check_capacity(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ConfigError(f"capacity must be a non-negative integer, got {value!r}")
    return value


def _parse_rates(raw: Any) -> Mapping[PlacementKind, float]:
    if not isinstance(raw, dict):
        raise ConfigError(f"rates must be a mapping, got {type(raw).__name__}")
    rates = dict(DEFAULT_RATES)
    for name, value in raw.items():
        try:
            kind = PlacementKind(str(name).lower())
        except ValueError:
            raise ConfigError(f"Unknown placement kind in rates: {name!r}") from None
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
            raise ConfigError(f"Rate for {name!r} must be a non-negative number, got {value!r}")
        rates[kind] = float(value)
    return MappingProxyType(rates)


def settings_from_dict(data: Mapping[str, Any]) -> MarinaSettings:
    """Build ``MarinaSettings`` from a plain dict (e.g. parsed YAML)."""
    unknown = set(data) - _KNOWN_KEYS
    if unknown:
        raise ConfigError(f"Unknown settings key(s): {', '.join(sorted(unknown))}")
    settings = MarinaSettings()
    if "capacity" in data:
        settings = replace(settings, capacity=_check_capacity(data["capacity"]))
    if "rates" in data:
        settings = replace(settings, rates=_parse_rates(data["rates"]))
    return settings


def load_settings(path: str | Path | None = None) -> MarinaSettings:
    """Load settings from a YAML file, or return the defaults.

    Raises
    ------
    ConfigError
        If the file is not a YAML mapping or holds invalid values.
    OSError
        If the file cannot be read.
    """
    if path is None:
        return MarinaSettings()
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Settings file {path} must contain a mapping")
    logger.debug("Loaded settings from %s", path)
    return settings_from_dict(data)
