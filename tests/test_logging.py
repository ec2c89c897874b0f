from __future__ import annotations

import logging
import sys

from santapairing.utils import setup_logger


def console_handlers(lgr: logging.Logger) -> list:
    return [h for h in lgr.handlers if type(h) is logging.StreamHandler]


def test_logger_is_named_and_at_info() -> None:
    lgr = setup_logger("santapairing.tests.named")
    assert lgr.name == "santapairing.tests.named"
    assert lgr.level == logging.INFO


def test_console_handler_writes_to_stderr() -> None:
    lgr = setup_logger("santapairing.tests.stderr")
    handlers = console_handlers(lgr)
    assert len(handlers) == 1
    assert handlers[0].stream is sys.stderr


def test_setting_up_twice_does_not_duplicate_handlers() -> None:
    setup_logger("santapairing.tests.twice")
    lgr = setup_logger("santapairing.tests.twice")
    assert len(console_handlers(lgr)) == 1
    assert len(lgr.handlers) <= 2
