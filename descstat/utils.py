"""Separators, numeric type lookup and token parsing shared by the package."""

from __future__ import annotations

import math
import os
from decimal import Decimal
from fractions import Fraction
from typing import Any, Callable, Dict, Optional

import numpy as np

FIELD_SEP = "\t"
LINE_SEP = os.linesep
STDIN_SOURCE = "-"

NUMERIC_TYPES: Dict[str, Callable[[str], Any]] = {
    "int": int,
    "float": float,
    "decimal": Decimal,
    "fraction": Fraction,
    "int32": np.int32,
    "int64": np.int64,
    "float32": np.float32,
    "float64": np.float64,
}


class ObservationParseError(ValueError):
    """Raised when a text token cannot be used as an observation."""

    def __init__(
        self,
        token: str,
        message: str,
        *,
        source: Optional[str] = None,
        line_number: Optional[int] = None,
    ) -> None:
        self.token = token
        self.reason = message
        self.source = source
        self.line_number = line_number
        location = ""
        if source is not None:
            location = f"{source}:{line_number}: " if line_number else f"{source}: "
        super().__init__(f"{location}{message}: {token!r}")


def resolve_numeric_type(name: str) -> Callable[[str], Any]:
    try:
        return NUMERIC_TYPES[name.lower()]
    except KeyError:
        choices = ", ".join(NUMERIC_TYPES)
        raise ValueError(f"Unknown numeric type {name!r} (expected one of: {choices})") from None


def lowest_value(numeric_type: Optional[Callable[..., Any]] = None) -> Any:
    """Return the "no data yet" sentinel used for maximum tracking.

    Fixed-width NumPy integers report their minimum representable value;
    every other type gets ``-inf``, which orders below all finite values.
    """
    if isinstance(numeric_type, type) and issubclass(numeric_type, np.integer):
        return numeric_type(np.iinfo(numeric_type).min)
    return -math.inf


def parse_token(token: str, numeric_type: Callable[[str], Any] = float) -> Any:
    try:
        value = numeric_type(token)
    except (ValueError, TypeError, ArithmeticError) as exc:
        raise ObservationParseError(token, f"not a valid {_type_name(numeric_type)}") from exc
    if _is_nan(value):
        raise ObservationParseError(token, "NaN is not a usable observation")
    return value


def _is_nan(value: Any) -> bool:
    # Comparing a Decimal sNaN raises InvalidOperation.
    is_nan = getattr(value, "is_nan", None)
    if is_nan is not None:
        return bool(is_nan())
    return value != value


def _type_name(numeric_type: Callable[..., Any]) -> str:
    return getattr(numeric_type, "__name__", repr(numeric_type))


__all__ = [
    "FIELD_SEP",
    "LINE_SEP",
    "STDIN_SOURCE",
    "NUMERIC_TYPES",
    "ObservationParseError",
    "resolve_numeric_type",
    "lowest_value",
    "parse_token",
]
