"""Streaming descriptive statistics for measurement and instrumentation tools."""

from .descriptive import Descriptive
from .rendering import MEDIAN_FIELD, SUMMARY_FIELDS, format_summary, get_header
from .utils import (
    NUMERIC_TYPES,
    ObservationParseError,
    lowest_value,
    parse_token,
    resolve_numeric_type,
)
from .observation_reader import ObservationReader
from .ancillary import IncrementalTSVWriter, describe, describe_by_key

__all__ = [
    "Descriptive",
    "SUMMARY_FIELDS",
    "MEDIAN_FIELD",
    "format_summary",
    "get_header",
    "NUMERIC_TYPES",
    "ObservationParseError",
    "lowest_value",
    "parse_token",
    "resolve_numeric_type",
    "ObservationReader",
    "IncrementalTSVWriter",
    "describe",
    "describe_by_key",
]
