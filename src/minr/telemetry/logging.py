"""Console logging for the engine's event-style log records."""

from __future__ import annotations

import logging

from rich.logging import RichHandler

_RESERVED = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class ExtraFieldsFormatter(logging.Formatter):
    """Appends the structured ``extra=`` payload of a record as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        fields = {key: value for key, value in vars(record).items() if key not in _RESERVED}
        if not fields:
            return message
        rendered = " ".join(f"{key}={value}" for key, value in sorted(fields.items()))
        return f"{message} {rendered}"


def configure_logging(level: str | int = "INFO") -> None:
    """Install a rich console handler on the ``minr`` logger once."""
    logger = logging.getLogger("minr")
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    if any(isinstance(handler, RichHandler) for handler in logger.handlers):
        return

    handler = RichHandler(show_path=False, rich_tracebacks=True)
    handler.setFormatter(ExtraFieldsFormatter("%(message)s"))
    logger.addHandler(handler)
