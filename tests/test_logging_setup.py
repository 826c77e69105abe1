from __future__ import annotations

import io
import logging

import pytest

from logging_setup import resolve_level, setup_logging


@pytest.mark.parametrize(
    ("name", "level"),
    [
        ("debug", logging.DEBUG),
        ("INFO", logging.INFO),
        ("Warning", logging.WARNING),
        ("error", logging.ERROR),
        ("critical", logging.CRITICAL),
    ],
)
def test_resolve_level_names(name: str, level: int) -> None:
    assert resolve_level(name) == level


def test_resolve_level_passes_numeric_levels_through() -> None:
    assert resolve_level(15) == 15


def test_resolve_level_rejects_unknown_name() -> None:
    with pytest.raises(ValueError, match="Unknown log level 'loud'"):
        resolve_level("loud")


def test_setup_logging_sets_root_level_and_format() -> None:
    stream = io.StringIO()

    setup_logging("info", stream=stream)
    logging.getLogger("mathgreet.test").info("configured")
    logging.getLogger("mathgreet.test").debug("hidden")

    root = logging.getLogger()
    assert root.level == logging.INFO
    output = stream.getvalue()
    assert "INFO     [mathgreet.test] configured" in output
    assert "hidden" not in output


def test_setup_logging_twice_does_not_duplicate_handlers() -> None:
    stream = io.StringIO()

    setup_logging("debug", stream=stream)
    setup_logging("debug", stream=stream)
    logging.getLogger("mathgreet.test").debug("once")

    assert stream.getvalue().count("once") == 1
