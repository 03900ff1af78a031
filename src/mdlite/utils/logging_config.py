"""Logging setup shared by the mdlite service.

Library modules only create loggers; handlers are installed by the process
that embeds mdlite, such as the HTTP server.
"""

from __future__ import annotations

import logging

_STANDARD_ATTRS = frozenset(logging.LogRecord("", 0, "", 0, "", None, None).__dict__) | {"message", "asctime"}


class ExtraFormatter(logging.Formatter):
    """Formatter that appends ``extra={...}`` fields as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        extras = {key: value for key, value in record.__dict__.items() if key not in _STANDARD_ATTRS}
        if not extras:
            return message
        rendered = " ".join(f"{key}={value!r}" for key, value in sorted(extras.items()))
        return f"{message} | {rendered}"


def configure_logging(level: str | int = "INFO") -> None:
    """Install a stream handler on the root logger.

    Calling it again replaces the handler rather than adding another one.
    """
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, "_mdlite_handler", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(ExtraFormatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    handler._mdlite_handler = True  # type: ignore[attr-defined]
    root.addHandler(handler)
    root.setLevel(level.upper() if isinstance(level, str) else level)


def get_logger(name: str) -> logging.Logger:
    """Return a logger for ``name``."""
    return logging.getLogger(name)
