"""Logging for playsync.

Console output goes through a rich handler. ContextualLogger carries
key/value context (library, mode, ...) that is prefixed to every message.
"""

import logging
from typing import Any, MutableMapping, Optional, Tuple

from rich.console import Console
from rich.logging import RichHandler

from playsync.core.config import settings

LOGGER_NAME = "playsync"


class ContextualLogger(logging.LoggerAdapter):
    """Logger adapter that prefixes messages with its context dimensions."""

    def __init__(self, logger: logging.Logger, context: Optional[dict] = None):
        """Initialize the contextual logger.

        Args:
            logger: Underlying stdlib logger
            context: Key/value pairs rendered as ``[key=value ...]``
        """
        super().__init__(logger, dict(context or {}))

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> Tuple[Any, MutableMapping[str, Any]]:
        """Prefix the message with the context, if any."""
        if not self.extra:
            return msg, kwargs
        prefix = " ".join(f"{key}={value}" for key, value in self.extra.items())
        return f"[{prefix}] {msg}", kwargs

    def with_context(self, **context: Any) -> "ContextualLogger":
        """Return a child logger with additional context dimensions."""
        return ContextualLogger(self.logger, {**self.extra, **context})


def _configure_base_logger(level: str) -> logging.Logger:
    base = logging.getLogger(LOGGER_NAME)

    # Avoid adding handlers multiple times
    if base.handlers:
        return base

    base.setLevel(getattr(logging, level.upper(), logging.INFO))
    handler = RichHandler(
        console=Console(stderr=True), show_time=True, show_path=False, rich_tracebacks=True
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    base.addHandler(handler)
    base.propagate = True
    return base


logger = ContextualLogger(_configure_base_logger(settings.LOG_LEVEL))
