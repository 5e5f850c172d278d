from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import pytest

from ethiscan.config import configure_logging

if TYPE_CHECKING:
    from collections.abc import Iterator

NOISY = "example.noisy"


@pytest.fixture(autouse=True)
def _bare_root_logger() -> Iterator[logging.Logger]:
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    root.handlers[:] = []
    try:
        yield root
    finally:
        root.handlers[:] = handlers
        root.setLevel(level)
        logging.getLogger(NOISY).setLevel(logging.NOTSET)


def test_level_names_are_case_insensitive(_bare_root_logger: logging.Logger) -> None:
    configure_logging(level="debug", quiet=())

    assert _bare_root_logger.level == logging.DEBUG


def test_records_go_to_stderr(_bare_root_logger: logging.Logger) -> None:
    configure_logging(quiet=())

    (handler,) = _bare_root_logger.handlers
    assert isinstance(handler, logging.StreamHandler)
    assert handler.stream is sys.stderr


def test_library_loggers_are_quieted_below_debug() -> None:
    configure_logging(level="INFO", quiet=(NOISY,))

    assert logging.getLogger(NOISY).level == logging.WARNING


def test_library_loggers_follow_debug() -> None:
    configure_logging(level=logging.DEBUG, quiet=(NOISY,))

    assert logging.getLogger(NOISY).level == logging.DEBUG
