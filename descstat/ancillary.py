"""Reporting helpers built on top of the Descriptive accumulator."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Dict, Hashable, Iterable, Optional, Sequence, Tuple, Union

from .descriptive import Descriptive
from .utils import FIELD_SEP, LINE_SEP

Row = Union[str, Sequence[str]]


def _new_accumulator(numeric_type: Optional[Callable[..., Any]]) -> Descriptive:
    if numeric_type is None:
        return Descriptive()
    return Descriptive.for_type(numeric_type)


def describe(
    values: Iterable[Any], numeric_type: Optional[Callable[..., Any]] = None
) -> Descriptive:
    stats = _new_accumulator(numeric_type)
    stats.extend(values)
    return stats


def describe_by_key(
    pairs: Iterable[Tuple[Hashable, Any]],
    numeric_type: Optional[Callable[..., Any]] = None,
) -> Dict[Hashable, Descriptive]:
    """Accumulate ``(key, value)`` pairs into one Descriptive per key.

    Keys keep the order in which they were first seen.
    """
    groups: Dict[Hashable, Descriptive] = {}
    for key, value in pairs:
        stats = groups.get(key)
        if stats is None:
            stats = groups[key] = _new_accumulator(numeric_type)
        stats.add(value)
    return groups


def _tsv_line(row: Row) -> str:
    """Join a row's fields with tabs; every row must stay on a single line.

    A pre-joined string is taken as is. Fields given as a sequence may not
    contain the separator themselves.
    """
    if isinstance(row, str):
        line = row
    else:
        fields = [str(field) for field in row]
        for field in fields:
            if FIELD_SEP in field:
                raise ValueError(f"TSV field contains a tab: {field!r}")
        line = FIELD_SEP.join(fields)
    if "\n" in line or "\r" in line:
        raise ValueError(f"TSV row spans more than one line: {line!r}")
    return line


class IncrementalTSVWriter:
    """Appends tab-separated rows to a report file, writing the header only once."""

    def __init__(self, file_path: Union[str, Path], header: Optional[Row] = None) -> None:
        self.file_path = Path(file_path)
        self.header = None if header is None else _tsv_line(header)
        self.file_path.parent.mkdir(parents=True, exist_ok=True)
        self._header_written = (
            self.file_path.exists() and self.file_path.stat().st_size > 0
        )

    def append_rows(self, rows: Iterable[Row]) -> int:
        lines = [_tsv_line(row) for row in rows if row]
        if not lines:
            return 0

        if not self._header_written and self.header is not None:
            lines.insert(0, self.header)
            self._header_written = True
            written = len(lines) - 1
        else:
            written = len(lines)

        with self.file_path.open("a", encoding="utf-8", newline="") as handle:
            handle.write(LINE_SEP.join(lines) + LINE_SEP)

        return written


__all__ = ["describe", "describe_by_key", "IncrementalTSVWriter"]
