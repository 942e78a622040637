"""Tests for the logging context filter and the shipped log format."""

import logging
from pathlib import Path

from backend.utils.config import Config
from backend.utils.logging import ContextFilter


def make_record(message="Claim submitted"):
    return logging.LogRecord("backend.workflow", logging.INFO, __file__, 1, message, None, None)


def test_filter_supplies_placeholders():
    record = make_record()
    assert ContextFilter().filter(record) is True
    assert record.session_id == "-"
    assert record.component == "-"


def test_filter_applies_and_clears_context():
    context_filter = ContextFilter()
    context_filter.set_context(session_id="3f2a9c")
    record = make_record()
    context_filter.filter(record)
    assert record.session_id == "3f2a9c"

    context_filter.clear_context()
    record = make_record()
    context_filter.filter(record)
    assert record.session_id == "-"


def test_shipped_format_includes_session():
    config = Config.load(str(Path(__file__).parent / "config.yaml"))
    formatter = logging.Formatter(config.logging.format)
    context_filter = ContextFilter()
    context_filter.set_context(session_id="3f2a9c")
    record = make_record()
    context_filter.filter(record)
    assert "[session=3f2a9c] Claim submitted" in formatter.format(record)
