"""
Observability Module

Structured logging for provider calls.

Log lines carry the provider and capability as a leading tag, followed by
``key=value`` fields:

    [FakeProvider.text] No queued response, returning default | call=2
"""

import logging
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from promptkit.config.settings import Settings

logger = logging.getLogger(__name__)

DEFAULT_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


class StructuredLogger:
    """
    Thin wrapper over a stdlib logger that renders keyword fields.

    The ``provider`` and ``action`` fields are pulled out of the keyword
    fields and rendered as ``[provider.action]`` (or ``[provider]``) in
    front of the message. Fields whose value is None are left out.

    Usage:
        log = get_logger(__name__)
        log.debug("Provider created", provider="fake", options=["seed"])
    """

    def __init__(self, name: str):
        self._logger = logging.getLogger(name)

    @property
    def name(self) -> str:
        return self._logger.name

    def format(self, message: str, **fields: Any) -> str:
        provider = fields.pop("provider", None)
        action = fields.pop("action", None)

        tag = ""
        if provider and action:
            tag = f"[{provider}.{action}] "
        elif provider:
            tag = f"[{provider}] "

        rendered = " | ".join(f"{k}={v}" for k, v in fields.items() if v is not None)
        if rendered:
            return f"{tag}{message} | {rendered}"
        return f"{tag}{message}"

    def log(self, level: int, message: str, **fields: Any) -> None:
        # Skip formatting for disabled levels; the fake logs on every default.
        if self._logger.isEnabledFor(level):
            self._logger.log(level, self.format(message, **fields))

    def debug(self, message: str, **fields: Any) -> None:
        self.log(logging.DEBUG, message, **fields)

    def info(self, message: str, **fields: Any) -> None:
        self.log(logging.INFO, message, **fields)

    def warning(self, message: str, **fields: Any) -> None:
        self.log(logging.WARNING, message, **fields)


def get_logger(name: str) -> StructuredLogger:
    """Get a structured logger for a promptkit module."""
    return StructuredLogger(name)


def setup_logging(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
) -> None:
    """
    Configure root handlers and the ``promptkit`` logger level.

    Call this at application startup.
    """
    logging.basicConfig(
        level=level,
        format=format_string or DEFAULT_LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("promptkit").setLevel(level)


def setup_logging_from_settings(settings: "Settings") -> None:
    """Apply the logging section of Settings."""
    level = logging.getLevelName(settings.logging.level.upper())
    if not isinstance(level, int):
        logger.warning("Unknown log level %r, falling back to INFO", settings.logging.level)
        level = logging.INFO
    setup_logging(level=level, format_string=settings.logging.format)
