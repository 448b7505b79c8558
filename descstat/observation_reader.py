"""Text ingestion layer turning numeric tokens into typed observations."""

from __future__ import annotations

import logging
import re
import sys
from pathlib import Path
from typing import IO, Any, Callable, Iterator, Optional, Union

from .utils import STDIN_SOURCE, ObservationParseError, parse_token

logger = logging.getLogger(__name__)

_TOKEN_SPLIT = re.compile(r"[\s,]+")
COMMENT_PREFIX = "#"


class ObservationReader:
    """Iterates over observations parsed from a file, stdin or a text stream.

    Tokens are separated by whitespace and/or commas. Blank lines and lines
    starting with ``#`` are ignored. Unparsable tokens are skipped unless
    ``strict`` is set, in which case :class:`ObservationParseError` is raised.
    """

    def __init__(
        self,
        source: Union[str, Path, IO[str]],
        numeric_type: Callable[[str], Any] = float,
        *,
        strict: bool = False,
    ) -> None:
        self._stream: Optional[IO[str]] = None
        self._owns_stream = False
        self.path: Optional[Path] = None

        if isinstance(source, (str, Path)):
            if str(source) == STDIN_SOURCE:
                self.name = "<stdin>"
                self._stream = sys.stdin
            else:
                path = Path(source)
                if not path.is_file():
                    raise FileNotFoundError(f"Input file does not exist: {path}")
                self.path = path
                self.name = str(path)
        else:
            self.name = getattr(source, "name", "<stream>")
            self._stream = source

        self.numeric_type = numeric_type
        self.strict = strict

        self.tokens_read = 0
        self.observations = 0
        self.skipped = 0

    # ------------------------------------------------------------------
    def __enter__(self) -> "ObservationReader":
        self._open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # type: ignore[override]
        self.close()

    def close(self) -> None:
        if self._owns_stream and self._stream is not None:
            try:
                self._stream.close()
            except OSError:
                logger.debug("Failed to close %s", self.name, exc_info=True)
            finally:
                self._stream = None
                self._owns_stream = False

    # ------------------------------------------------------------------
    def __iter__(self) -> Iterator[Any]:
        self._open()
        assert self._stream is not None

        try:
            yield from self._parse_lines(self._stream)
        except UnicodeDecodeError as exc:
            raise RuntimeError(f"Failed to decode input: {self.name}") from exc
        finally:
            if self._owns_stream:
                self.close()

        if self.skipped:
            logger.info(
                "Skipped %d of %d tokens in %s", self.skipped, self.tokens_read, self.name
            )

    def _parse_lines(self, stream: IO[str]) -> Iterator[Any]:
        for line_number, line in enumerate(stream, 1):
            text = line.strip()
            if not text or text.startswith(COMMENT_PREFIX):
                continue
            for token in _TOKEN_SPLIT.split(text):
                if not token:
                    continue
                self.tokens_read += 1
                try:
                    value = parse_token(token, self.numeric_type)
                except ObservationParseError as exc:
                    if self.strict:
                        raise ObservationParseError(
                            token,
                            exc.reason,
                            source=self.name,
                            line_number=line_number,
                        ) from exc
                    self.skipped += 1
                    logger.debug("Skipping token %r at %s:%d", token, self.name, line_number)
                    continue
                self.observations += 1
                yield value

    # ------------------------------------------------------------------
    def _open(self) -> None:
        if self._stream is not None:
            return
        assert self.path is not None
        try:
            self._stream = self.path.open("r", encoding="utf-8")
        except OSError as exc:
            raise RuntimeError(f"Failed to open input file: {self.path}") from exc
        self._owns_stream = True


__all__ = ["ObservationReader", "COMMENT_PREFIX"]
