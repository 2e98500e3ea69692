"""Logging helpers for errorset."""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator


@dataclass
class Timing:
    """Elapsed time of a timed block, filled in when the block exits."""

    name: str
    entries: int | None = None
    elapsed_ms: float = 0.0


def configure_logging(level: int = logging.INFO) -> None:
    logger = logging.getLogger("errorset")
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    configure_logging()
    return logging.getLogger(f"errorset.{name}")


@contextmanager
def time_call(
    name: str,
    logger: logging.Logger,
    *,
    entries: int | None = None,
    threshold_ms: int = 100,
) -> Iterator[Timing]:
    """
    Log how long the block took and how many error entries it handled.

    The record goes out at WARNING once ``threshold_ms`` is reached, DEBUG
    otherwise, and is emitted even when the block raises.
    """
    timing = Timing(name=name, entries=entries)
    start = time.monotonic()
    try:
        yield timing
    finally:
        timing.elapsed_ms = (time.monotonic() - start) * 1000
        level = logging.WARNING if timing.elapsed_ms >= threshold_ms else logging.DEBUG
        logger.log(
            level,
            "%s took %.2fms for %s entries",
            name,
            timing.elapsed_ms,
            "?" if entries is None else entries,
            extra={"entries": entries, "elapsed_ms": timing.elapsed_ms},
        )
