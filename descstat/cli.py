"""Command-line entry point summarising numeric text files."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, List, Optional, TextIO, Tuple

from .ancillary import IncrementalTSVWriter
from .descriptive import Descriptive
from .observation_reader import ObservationReader
from .rendering import MEDIAN_FIELD, SUMMARY_FIELDS, format_summary, get_header
from .utils import FIELD_SEP, NUMERIC_TYPES, ObservationParseError, resolve_numeric_type

logger = logging.getLogger(__name__)

SOURCE_FIELD = "source"


@dataclass
class SourceStats:
    tokens_read: int = 0
    observations: int = 0
    skipped: int = 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="descstat",
        description="Print count, min, mean, max and standard deviation of numeric inputs.",
    )
    parser.add_argument(
        "inputs",
        nargs="+",
        help="Text files of numbers separated by whitespace or commas ('-' reads stdin).",
    )
    parser.add_argument(
        "--type",
        dest="numeric_type",
        choices=sorted(NUMERIC_TYPES),
        default="float",
        help="Numeric type used to parse observations (default: float).",
    )
    parser.add_argument(
        "--output",
        type=Path,
        metavar="PATH",
        help="Append summary rows to this TSV file instead of printing them.",
    )
    parser.add_argument(
        "--no-header",
        action="store_true",
        help="Do not emit the column header row.",
    )
    parser.add_argument(
        "--median",
        action="store_true",
        help="Append the median as an extra column.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail an input on the first token that is not a number.",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Log level for diagnostic output.",
    )
    return parser


def summarize_source(
    source: str,
    numeric_type: Callable[[str], Any],
    *,
    strict: bool,
) -> Tuple[Descriptive, SourceStats]:
    stats = Descriptive.for_type(numeric_type)
    with ObservationReader(source, numeric_type, strict=strict) as reader:
        stats.extend(reader)
    source_stats = SourceStats(
        tokens_read=reader.tokens_read,
        observations=reader.observations,
        skipped=reader.skipped,
    )
    return stats, source_stats


def main(argv: Optional[List[str]] = None, stdout: Optional[TextIO] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level))

    out = stdout if stdout is not None else sys.stdout
    numeric_type = resolve_numeric_type(args.numeric_type)

    fields = SUMMARY_FIELDS + ((MEDIAN_FIELD,) if args.median else ())
    header_fields = None if args.no_header else (SOURCE_FIELD, *fields)

    writer: Optional[IncrementalTSVWriter] = None
    if args.output is not None:
        writer = IncrementalTSVWriter(args.output, header_fields)
    elif header_fields is not None:
        print(get_header(header_fields), file=out)

    exit_code = 0
    for index, source in enumerate(args.inputs, 1):
        logger.info("Processing %s (%d/%d)", source, index, len(args.inputs))
        try:
            stats, source_stats = summarize_source(source, numeric_type, strict=args.strict)
        except FileNotFoundError as exc:
            logger.error(str(exc))
            exit_code = 1
            continue
        except ObservationParseError as exc:
            logger.error("Rejected %s: %s", source, exc)
            exit_code = 1
            continue
        except RuntimeError:
            logger.exception("Failed reading %s", source)
            exit_code = 1
            continue

        row = FIELD_SEP.join([source, format_summary(stats, median=args.median)])
        if writer is not None:
            writer.append_rows([row])
        else:
            print(row, file=out)

        logger.info(
            "Finished %s: observations=%d, skipped=%d",
            source,
            source_stats.observations,
            source_stats.skipped,
        )

    if writer is not None:
        logger.info("Wrote summary rows to %s", writer.file_path)

    return exit_code


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
