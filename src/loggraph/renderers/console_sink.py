"""
Diagnostic output sinks.

A sink receives one styled console write: a format string such as
"%c " plus the style string that applies to it. loggraph writes to a
sink exactly once per rendered graph.
"""

from __future__ import annotations

import logging
import sys
from typing import Protocol, TextIO, runtime_checkable

CONSOLE_LOGGER_NAME = "loggraph.console"


@runtime_checkable
class DiagnosticSink(Protocol):
    """Anything that accepts a styled console write."""

    def write(self, format_string: str, style: str) -> None:
        ...


class LoggingSink:
    """
    Forward styled writes to a standard library logger.

    The format string and style travel as log record arguments, so a
    handler that understands styled output can pick them apart again via
    `record.args`.

    When the logger would drop the record (level filtered out, or no
    handler anywhere in its hierarchy) the write goes straight to
    `stream` instead, so the graph is never silently lost.

    Parameters
    ----------
    logger : logging.Logger, optional
        Target logger. Defaults to the `loggraph.console` logger.
    level : int, default=logging.INFO
    stream : TextIO, optional
        Fallback stream. Defaults to `sys.stderr` at write time.
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        level: int = logging.INFO,
        stream: TextIO | None = None,
    ) -> None:
        self._logger = logger or logging.getLogger(CONSOLE_LOGGER_NAME)
        self._level = level
        self._stream = stream

    def write(self, format_string: str, style: str) -> None:
        if self._logger.isEnabledFor(self._level) and self._logger.hasHandlers():
            self._logger.log(self._level, "%s%s", format_string, style)
            return

        stream = self._stream if self._stream is not None else sys.stderr
        stream.write(f"{format_string}{style}\n")
        stream.flush()

    def __repr__(self) -> str:
        return f"<LoggingSink logger={self._logger.name} level={logging.getLevelName(self._level)}>"
