"""
Settings registry: loads unit choices, range limits and defaults from YAML at
startup, validates them, and exposes a read-only query API.

The registry is a module-level singleton; call get_settings() to obtain it.
Nothing writes to the registry after startup.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, cast

import yaml

from wrenchsizes.schemas.request import BIAS_MAX, BIAS_MIN, METRIC_MAX_MM, SAE_MAX_INCH
from wrenchsizes.utilities.types import is_power_of_two

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent / "data"
_SETTINGS_FILE = "settings.yaml"


@dataclass(frozen=True)
class Limits:
    """Validation boundaries applied before a run starts."""

    metric_max_mm: float
    sae_max_inch: float
    bias_min: float
    bias_max: float


@dataclass(frozen=True)
class Defaults:
    """Initial values for every user-facing input, as the user would type them."""

    metric_first: str
    metric_last: str
    metric_unit: str
    sae_first: str
    sae_last: str
    sae_unit: str
    bias: str


class SizeSettings:
    """
    Read-only unit choices, limits and defaults.

    ``metric_units`` maps a label in mm per unit to steps per mm;
    ``sae_units`` maps a label in inch per unit to steps per inch. Both keep
    the order of the YAML file.

    Instantiate directly to use a custom data directory (e.g. in tests);
    otherwise use get_settings() for the module singleton.
    """

    def __init__(self, data_dir: Path = _DATA_DIR) -> None:
        self._data_dir = data_dir

        self.metric_units: MappingProxyType[str, float]
        self.sae_units: MappingProxyType[str, int]
        self.limits: Limits
        self.defaults: Defaults

        data = self._load_yaml(_SETTINGS_FILE)
        try:
            self._load_units(data)
            self._load_limits(data)
            self._load_defaults(data)
        except (KeyError, TypeError) as exc:
            raise ValueError(
                f"Malformed settings file {self._data_dir / _SETTINGS_FILE}: {exc!r}"
            ) from exc
        self._validate()
        logger.debug(
            "Loaded settings: %d metric units, %d SAE units",
            len(self.metric_units),
            len(self.sae_units),
        )

    # ── Loading ────────────────────────────────────────────────────────────────

    def _load_yaml(self, filename: str) -> dict[str, Any]:
        path = self._data_dir / filename
        try:
            with open(path) as f:
                return cast(dict[str, Any], yaml.safe_load(f))
        except FileNotFoundError:
            raise FileNotFoundError(f"Settings file not found: {path}") from None
        except yaml.YAMLError as exc:
            raise ValueError(f"Failed to parse settings file {path}: {exc}") from exc

    def _load_units(self, data: dict[str, Any]) -> None:
        metric: dict[str, float] = {}
        for entry in data["metric_units"]:
            metric[str(entry["label"])] = float(entry["steps_per_mm"])
        sae: dict[str, int] = {}
        for entry in data["sae_units"]:
            sae[str(entry["label"])] = entry["steps_per_inch"]
        self.metric_units = MappingProxyType(metric)
        self.sae_units = MappingProxyType(sae)

    def _load_limits(self, data: dict[str, Any]) -> None:
        limits = data["limits"]
        self.limits = Limits(
            metric_max_mm=float(limits["metric_max_mm"]),
            sae_max_inch=float(limits["sae_max_inch"]),
            bias_min=float(limits["bias_min"]),
            bias_max=float(limits["bias_max"]),
        )

    def _load_defaults(self, data: dict[str, Any]) -> None:
        defaults = data["defaults"]
        self.defaults = Defaults(**{k: str(v) for k, v in defaults.items()})

    # ── Validation ─────────────────────────────────────────────────────────────

    def _validate(self) -> None:
        """Raise ValueError listing every problem found, if any."""
        errors: list[str] = []
        if not self.metric_units:
            errors.append("metric_units is empty")
        if not self.sae_units:
            errors.append("sae_units is empty")
        for label, steps in self.metric_units.items():
            if steps <= 0:
                errors.append(f"metric unit {label!r}: steps_per_mm must be positive, got {steps}")
        for label, steps in self.sae_units.items():
            if not isinstance(steps, int) or not is_power_of_two(steps):
                errors.append(
                    f"SAE unit {label!r}: steps_per_inch must be a power of two, got {steps!r}"
                )
        if self.limits.metric_max_mm <= 0:
            errors.append(f"limits.metric_max_mm must be positive, got {self.limits.metric_max_mm}")
        elif self.limits.metric_max_mm > METRIC_MAX_MM:
            errors.append(
                f"limits.metric_max_mm {self.limits.metric_max_mm} exceeds {METRIC_MAX_MM}"
            )
        if self.limits.sae_max_inch <= 0:
            errors.append(f"limits.sae_max_inch must be positive, got {self.limits.sae_max_inch}")
        elif self.limits.sae_max_inch > SAE_MAX_INCH:
            errors.append(
                f"limits.sae_max_inch {self.limits.sae_max_inch} exceeds {SAE_MAX_INCH}"
            )
        if self.limits.bias_min > self.limits.bias_max:
            errors.append(
                f"limits.bias_min {self.limits.bias_min} exceeds bias_max {self.limits.bias_max}"
            )
        if self.limits.bias_min < BIAS_MIN or self.limits.bias_max > BIAS_MAX:
            errors.append(
                f"limits bias range [{self.limits.bias_min}, {self.limits.bias_max}] "
                f"exceeds [{BIAS_MIN}, {BIAS_MAX}]"
            )
        if self.defaults.metric_unit not in self.metric_units:
            errors.append(f"defaults.metric_unit {self.defaults.metric_unit!r} is not a metric unit")
        if self.defaults.sae_unit not in self.sae_units:
            errors.append(f"defaults.sae_unit {self.defaults.sae_unit!r} is not an SAE unit")
        if errors:
            raise ValueError(
                "Settings validation failed:\n" + "\n".join(f"  • {e}" for e in errors)
            )

    # ── Query API ──────────────────────────────────────────────────────────────

    def steps_per_mm(self, label: str) -> float:
        """Steps per mm for a metric unit label such as "0.5".

        Raises KeyError if the label is not offered.
        """
        try:
            return self.metric_units[label]
        except KeyError:
            raise KeyError(f"No metric unit {label!r}") from None

    def steps_per_inch(self, label: str) -> int:
        """Steps per inch for an SAE unit label such as "1/16".

        Raises KeyError if the label is not offered.
        """
        try:
            return self.sae_units[label]
        except KeyError:
            raise KeyError(f"No SAE unit {label!r}") from None


# ── Module-level singleton ─────────────────────────────────────────────────────
#
# Loaded eagerly at import time; read-only afterwards, so sharing it across
# threads is safe.

_settings: SizeSettings = SizeSettings()


def get_settings() -> SizeSettings:
    """Return the module-level settings singleton."""
    return _settings
