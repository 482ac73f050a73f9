"""Structured console logging for the ``easer`` logger hierarchy.

Library modules only emit through ``logging.getLogger(__name__)``;
handlers are installed by applications (the ``easer`` CLI calls
:func:`setup_logging`).
"""

from __future__ import annotations

import logging
from typing import Literal

LogLevel = Literal["debug", "info", "warning", "error"]

DEFAULT_LEVEL = logging.WARNING

_LEVEL_ABBREV = {
    logging.DEBUG: "D",
    logging.INFO: "I",
    logging.WARNING: "W",
    logging.ERROR: "E",
    logging.CRITICAL: "C",
}


class _EaserFormatter(logging.Formatter):
    """Compact formatter: abbreviated level + millisecond timestamp.

    Example output::

        I 2026-02-15 14:30:22.123 [easer.cli] quad_in: 10 values
    """

    def format(self, record: logging.LogRecord) -> str:
        lvl = _LEVEL_ABBREV.get(record.levelno, "?")
        ts = self.formatTime(record, "%Y-%m-%d %H:%M:%S")
        ms = int(record.msecs)
        msg = record.getMessage()
        return f"{lvl} {ts}.{ms:03d} [{record.name}] {msg}"


def resolve_level(level: int | str | None = None, verbose: bool = False) -> int:
    """Numeric level from a name (``"debug"``), a number, or nothing.

    *verbose* wins over *level* and selects DEBUG, which is where the
    per-walk creation and exhaustion messages are emitted.  With neither,
    the level is WARNING: a plain walk logs nothing.
    """
    if verbose:
        return logging.DEBUG
    if level is None:
        return DEFAULT_LEVEL
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level {level!r}")
    return resolved


def setup_logging(level: int | str | None = None, verbose: bool = False) -> None:
    """Configure the ``easer`` logger with compact formatting.

    Installs a :class:`~logging.StreamHandler` on the ``"easer"`` logger
    with abbreviated level names (D/I/W/E/C) and millisecond timestamps.
    Safe to call multiple times; existing handlers are replaced.  See
    :func:`resolve_level` for how *level* and *verbose* combine.
    """
    logger = logging.getLogger("easer")
    logger.setLevel(resolve_level(level, verbose))

    # Remove previous handlers to avoid duplicates on repeated calls.
    for h in logger.handlers[:]:
        logger.removeHandler(h)

    handler = logging.StreamHandler()
    handler.setFormatter(_EaserFormatter())
    logger.addHandler(handler)
    logger.propagate = False
