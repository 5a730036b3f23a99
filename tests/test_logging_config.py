from __future__ import annotations

import logging

from logging_config import ContextualFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="services.simulator",
        level=logging.DEBUG,
        pathname=__file__,
        lineno=1,
        msg="Recorded reading",
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formatter_appends_known_extra_keys() -> None:
    formatter = ContextualFormatter(fmt="%(message)s")

    output = formatter.format(_record(reading_id="abc", temperature=71.25, history_size=3))

    assert output == "Recorded reading | reading_id=abc temperature=71.25 history_size=3"


def test_formatter_skips_missing_and_none_values() -> None:
    formatter = ContextualFormatter(fmt="%(message)s", extra_keys=["generation", "observer"])

    output = formatter.format(_record(generation=None, unrelated="x"))

    assert output == "Recorded reading"
