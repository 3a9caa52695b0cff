"""Where: platform/logging/handlers.py
What: Rich console handler that renders Last.fm request events compactly.
Why: Keep structured request extras readable without leaking credentials.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class RequestRichHandler(RichHandler):
    """Custom Rich handler for ``request_event`` log records."""

    _REQUEST_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "lastfm.request.start": ("📡", "blue"),
        "lastfm.request.success": ("✅", "green"),
        "lastfm.request.failed": ("❌", "red"),
        "lastfm.auth.token": ("🎟️", "yellow"),
        "lastfm.auth.success": ("🔑", "green"),
    }
    _PREFIXES: ClassVar[dict[str, str]] = {
        "lastfm.request.start": "Calling ",
        "lastfm.request.success": "Completed ",
        "lastfm.request.failed": "Failed ",
        "lastfm.auth.token": "Auth token issued via ",
        "lastfm.auth.success": "Session established via ",
    }

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

    def _render_request_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured request events with dedicated styling."""

        event = getattr(record, "request_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._REQUEST_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        prefix = self._PREFIXES.get(event)
        if prefix:
            _ = body.append(prefix)

        method = getattr(record, "lastfm_method", None)
        if method:
            _ = body.append(str(method), style=Style(color="white", bold=True))

        details: list[str] = []
        if getattr(record, "signed", False):
            details.append("signed")
        param_names = getattr(record, "param_names", None)
        if isinstance(param_names, (list, tuple)) and param_names:
            details.append("params=" + ",".join(str(name) for name in param_names))
        duration_ms = getattr(record, "duration_ms", None)
        if isinstance(duration_ms, (int, float)):
            details.append(f"{duration_ms:.2f} ms")
        error_code = getattr(record, "error_code", None)
        if error_code is not None:
            details.append(f"code={error_code}")
        error_message = getattr(record, "error_message", None)
        if error_message:
            details.append(str(error_message))
        if details:
            _ = body.append(" (" + ", ".join(details) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for request events."""

        request_text = self._render_request_message(record)
        if request_text is not None:
            return request_text

        return super().render_message(record, message)


__all__ = ["RequestRichHandler"]
