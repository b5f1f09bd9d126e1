from __future__ import annotations

import logging

from utils.logging_setup import SafeExtraFormatter


def _record(**extra):
    record = logging.LogRecord("services.organization", logging.WARNING, __file__, 1, "skipped", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formatter_fills_missing_extras():
    formatter = SafeExtraFormatter(fmt="%(message)s step=%(step)s status=%(status)s entity=%(entity)s")
    assert formatter.format(_record()) == "skipped step=- status=- entity=-"


def test_formatter_keeps_given_extras():
    formatter = SafeExtraFormatter(fmt="%(message)s entity=%(entity)s status=%(status)s")
    out = formatter.format(_record(entity="urn:li:fsd_company:42", status="invalid"))
    assert out == "skipped entity=urn:li:fsd_company:42 status=invalid"
