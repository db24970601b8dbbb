"""Diagnostic sinks for violations and logging setup for the CLI."""

from __future__ import annotations

import logging
import sys
from typing import List, Protocol, TextIO

from .models import Violation

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_ROOT_LOGGER = "schema_checker"


class DiagnosticSink(Protocol):
    """Receiver for violations produced by a check run."""

    def emit(self, violation: Violation) -> None:
        ...


class LoggingDiagnosticSink:
    """Write each violation's diagnostic line to a logger at error level."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or logging.getLogger(f"{_ROOT_LOGGER}.diagnostics")

    def emit(self, violation: Violation) -> None:
        self.logger.error(violation.diagnostic)


class CollectingDiagnosticSink:
    """Keep violations in memory, in the order they were emitted."""

    def __init__(self) -> None:
        self.violations: List[Violation] = []

    def emit(self, violation: Violation) -> None:
        self.violations.append(violation)


def configure_logging(level: int | str = logging.INFO, stream: TextIO | None = None) -> logging.Logger:
    """Attach a single timestamped stream handler to the package logger."""

    logger = logging.getLogger(_ROOT_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger


__all__ = [
    "CollectingDiagnosticSink",
    "DiagnosticSink",
    "LoggingDiagnosticSink",
    "configure_logging",
]
