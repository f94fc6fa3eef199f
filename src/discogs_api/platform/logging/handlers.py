"""Rich console handler for dispatch events.

Where: platform/logging/handlers.py
What: Render structured request lifecycle records with icons and compact URIs.
Why: Keep formatting concerns out of the dispatcher and client facade.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar

from typing_extensions import override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class DispatchRichHandler(RichHandler):
    """Custom Rich handler that renders dispatch events on one line."""

    _DISPATCH_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "dispatch.request.start": ("🎧", "blue"),
        "dispatch.request.complete": ("✅", "green"),
        "dispatch.request.error": ("❌", "red"),
    }
    _QUERY_PREVIEW_LIMIT: ClassVar[int] = 60

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_uri(self, uri: str) -> Text:
        """Color path separators and shorten long query strings."""

        path, _, query = uri.partition("?")
        text = Text()
        for char in path:
            if char == "/":
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))

        if query:
            if len(query) > self._QUERY_PREVIEW_LIMIT:
                query = query[: self._QUERY_PREVIEW_LIMIT] + "…"
            _ = text.append("?" + query, style=Style(color="bright_black"))
        return text

    def _render_dispatch_message(self, record: logging.LogRecord) -> Text | None:
        """Render dispatch lifecycle records; return None for plain messages."""

        event = getattr(record, "dispatch_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._DISPATCH_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        operation = getattr(record, "operation", None)
        method = getattr(record, "http_method", None)
        uri = getattr(record, "uri", None)

        segments: list[Text] = []
        if isinstance(operation, str):
            segments.append(Text(operation))
        if isinstance(method, str):
            segments.append(Text(method))
        if isinstance(uri, str):
            segments.append(self._format_uri(uri))
        _ = body.append_text(Text(" ").join(segments))

        details: list[str] = []
        if event == "dispatch.request.complete":
            status = getattr(record, "status", None)
            duration_ms = getattr(record, "duration_ms", None)
            if isinstance(status, int):
                details.append(f"status={status}")
            if isinstance(duration_ms, (int, float)):
                details.append(f"{duration_ms:.2f} ms")
        elif event == "dispatch.request.error":
            error_kind = getattr(record, "error_kind", None)
            error_message = getattr(record, "error_message", None)
            if error_kind:
                details.append(str(error_kind))
            if error_message:
                details.append(str(error_message))
        if details:
            _ = body.append(" (" + ", ".join(details) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for dispatch events."""

        dispatch_text = self._render_dispatch_message(record)
        if dispatch_text is not None:
            return dispatch_text

        return super().render_message(record, message)


__all__ = ["DispatchRichHandler"]
