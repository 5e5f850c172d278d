"""Logging setup for the ethiscan command line."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"

# httpx logs every request at INFO.
NOISY_LOGGERS = ("httpx", "httpcore", "hishel")


def configure_logging(
    *,
    level: int | str = logging.INFO,
    force: bool = False,
    quiet: Iterable[str] = NOISY_LOGGERS,
) -> None:
    """Send log records to stderr so stdout carries only reports.

    ``level`` accepts a number or a level name in any case. Loggers named in
    ``quiet`` are held at WARNING unless ``level`` is DEBUG. Pass
    ``force=True`` to replace handlers installed earlier.
    """

    numeric = level
    if isinstance(level, str):
        numeric = logging.getLevelNamesMapping().get(level.upper(), logging.INFO)
    logging.basicConfig(
        level=numeric,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stderr,
        force=force,
    )
    library_level = logging.DEBUG if numeric <= logging.DEBUG else logging.WARNING
    for name in quiet:
        logging.getLogger(name).setLevel(library_level)
