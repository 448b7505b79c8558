"""Tab-separated summary line for a Descriptive accumulator."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List, Sequence

from .utils import FIELD_SEP

if TYPE_CHECKING:  # pragma: no cover
    from .descriptive import Descriptive

SUMMARY_FIELDS = ("count", "min", "mean", "max", "sd")
MEDIAN_FIELD = "median"


def get_header(fields: Sequence[str] = SUMMARY_FIELDS, prefix: Iterable[str] = ()) -> str:
    return FIELD_SEP.join([*prefix, *fields])


def format_summary(stats: "Descriptive", *, median: bool = False) -> str:
    """Render ``count, min, mean, max, sd`` separated by tabs.

    An empty accumulator renders as ``0`` followed by empty fields so that
    no NaN or sentinel value reaches the output.
    """
    count = stats.get_count()
    if count == 0:
        columns: List[str] = ["0", "", "", "", ""]
        if median:
            columns.append("")
        return FIELD_SEP.join(columns)

    columns = [
        str(count),
        str(stats.get_min()),
        str(stats.get_mean()),
        str(stats.get_max()),
        str(stats.get_standard_deviation()),
    ]
    if median:
        columns.append(str(stats.get_median()))
    return FIELD_SEP.join(columns)


__all__ = ["SUMMARY_FIELDS", "MEDIAN_FIELD", "get_header", "format_summary"]
