"""Rich console handler with structured component event rendering."""

import logging
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class ComponentRichHandler(RichHandler):
    """Rich handler that renders component lifecycle events compactly."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "component.json.type_fallback": ("↪️", "yellow"),
        "component.archive.encoded": ("📦", "green"),
        "component.archive.decode_failed": ("⛔", "red"),
    }
    _EVENT_PREFIXES: ClassVar[dict[str, str]] = {
        "component.json.type_fallback": "Unrecognized component type ",
        "component.archive.encoded": "Archived component ",
        "component.archive.decode_failed": "Component decode failed ",
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
        kwargs["markup"] = True
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _render_component_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured component events with dedicated styling."""

        event = getattr(record, "component_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        _ = body.append(self._EVENT_PREFIXES.get(event, f"{event} "))

        details: list[str] = []
        if event == "component.json.type_fallback":
            raw_type = getattr(record, "raw_type", None)
            _ = body.append(repr(raw_type))
            details.append("using text")
        else:
            component_text = getattr(record, "component_text", None)
            if component_text:
                _ = body.append(repr(component_text))
            archive_key = getattr(record, "archive_key", None)
            if archive_key:
                details.append(f"key={archive_key}")
            reason = getattr(record, "reason", None)
            if reason:
                details.append(str(reason))
            size = getattr(record, "archive_bytes", None)
            if isinstance(size, int):
                details.append(f"{size} bytes")

        if details:
            _ = body.append(" (" + ", ".join(details) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for component events."""

        component_text = self._render_component_message(record)
        if component_text is not None:
            return component_text

        return super().render_message(record, message)


__all__ = ["ComponentRichHandler"]
