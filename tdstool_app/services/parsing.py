"""
Parse-or-default helpers shared by every calculator.

Form fields arrive as loosely typed values (numbers, numeric strings, blanks).
A blank or garbled field must degrade to a documented default instead of
blocking the planner, so every calculator coerces its numeric inputs here.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from tdstool_app.config.limits import FORCE_UNITS_N


@dataclass(slots=True)
class UnitError(Exception):
    message: str

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


def parse_float(value: Any, default: float = 0.0) -> float:
    """
    Return ``value`` as a finite float, or ``default``.

    ``None``, blank strings, booleans, non-numeric strings, NaN and +/-inf all
    fall back to ``default``.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return default
    try:
        result = float(value)
    except (TypeError, ValueError):
        return default
    if math.isnan(result) or math.isinf(result):
        return default
    return result


def parse_non_negative(value: Any, default: float = 0.0) -> float:
    """Parse like parse_float, clamping negative values to 0."""
    return max(0.0, parse_float(value, default))


def parse_positive_or(value: Any, fallback: float) -> float:
    """Parse a value that must be > 0; anything else yields ``fallback``."""
    result = parse_float(value, 0.0)
    return result if result > 0.0 else fallback


def parse_optional_float(value: Any) -> float | None:
    """Parse a value where blank means "not supplied"."""
    parsed = parse_float(value, math.nan)
    return None if math.isnan(parsed) else parsed


def to_newtons(value: Any, unit: str = "daN") -> float:
    """Convert a force given in N, daN or kN to Newtons."""
    try:
        factor = FORCE_UNITS_N[unit]
    except KeyError:
        raise UnitError(f"Unsupported force unit: {unit!r}. Use one of {', '.join(FORCE_UNITS_N)}.") from None
    return parse_float(value) * factor
