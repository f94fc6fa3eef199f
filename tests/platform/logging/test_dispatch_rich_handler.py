"""Tests for the ``DispatchRichHandler`` dispatch event rendering."""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.text import Text

from discogs_api.platform.logging import DispatchRichHandler, setup_logger


def _make_handler() -> DispatchRichHandler:
    """Create a handler instance with an in-memory console."""

    console = Console(file=StringIO(), force_terminal=True, soft_wrap=True)
    return DispatchRichHandler(console=console)


def _build_record(**extras: Any) -> logging.LogRecord:
    """Create a ``LogRecord`` populated with dispatch extras for testing."""

    record = logging.LogRecord(
        name="discogs_api",
        level=logging.DEBUG,
        pathname="test",
        lineno=0,
        msg="",
        args=(),
        exc_info=None,
    )
    for key, value in extras.items():
        setattr(record, key, value)
    return record


def test_complete_event_shows_status_and_duration() -> None:
    handler = _make_handler()
    record = _build_record(
        dispatch_event="dispatch.request.complete",
        operation="getArtist",
        http_method="GET",
        uri="artists/139250",
        status=200,
        duration_ms=41.237,
    )

    rendered = handler.render_message(record, "")
    assert isinstance(rendered, Text)

    assert rendered.plain == "✅ getArtist GET artists/139250 (status=200, 41.24 ms)"


def test_long_query_strings_are_truncated() -> None:
    handler = _make_handler()
    query = "q=" + "a" * 100
    record = _build_record(
        dispatch_event="dispatch.request.start",
        operation="search",
        http_method="GET",
        uri=f"database/search?{query}",
    )

    rendered = handler.render_message(record, "")
    assert isinstance(rendered, Text)

    plain = rendered.plain
    assert plain.startswith("🎧 search GET database/search?q=aaa")
    assert plain.endswith("…")
    assert len(plain.split("?", 1)[1]) == 61


def test_error_event_lists_kind_and_message() -> None:
    handler = _make_handler()
    record = _build_record(
        dispatch_event="dispatch.request.error",
        operation="getRelease",
        error_kind="TransportFailureError",
        error_message="HTTP request failed: timed out",
    )

    rendered = handler.render_message(record, "")
    assert isinstance(rendered, Text)

    assert rendered.plain == (
        "❌ getRelease (TransportFailureError, HTTP request failed: timed out)"
    )


def test_plain_records_fall_back_to_default_rendering() -> None:
    handler = _make_handler()
    record = _build_record()

    rendered = handler.render_message(record, "Loaded 60 operations")

    assert isinstance(rendered, Text)
    assert rendered.plain == "Loaded 60 operations"


def test_setup_logger_adds_file_handler(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "discogs_api.log"

    logger = setup_logger(log_file=log_file)
    try:
        kinds = [type(handler).__name__ for handler in logger.handlers]
        assert kinds == ["DispatchRichHandler", "RotatingFileHandler"]
        assert log_file.parent.is_dir()
    finally:
        _ = setup_logger()

    assert [type(handler).__name__ for handler in logger.handlers] == ["DispatchRichHandler"]
