"""Logging setup for the CLI: rich handler on stderr with secret redaction."""

from __future__ import annotations

import logging
from typing import Iterable

from rich.console import Console
from rich.logging import RichHandler

REDACTED = "***"


class RedactFilter(logging.Filter):
    """Replace known secret values in rendered log messages."""

    def __init__(self, secrets: Iterable[str]):
        super().__init__()
        self._secrets = {s for s in secrets if s}

    def filter(self, record: logging.LogRecord) -> bool:
        if not self._secrets:
            return True
        message = record.getMessage()
        for secret in self._secrets:
            message = message.replace(secret, REDACTED)
        record.msg, record.args = message, None
        return True


def setup_logging(level: str = "WARNING", secrets: Iterable[str] = ()) -> logging.Handler:
    handler = RichHandler(console=Console(stderr=True), show_path=False, markup=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    handler.addFilter(RedactFilter(secrets))

    root = logging.getLogger()
    for h in [h for h in root.handlers if isinstance(h, RichHandler)]:
        root.removeHandler(h)
    root.addHandler(handler)
    root.setLevel(level.upper())
    # httpx logs every request at INFO, headers excluded
    logging.getLogger("httpx").setLevel(max(root.level, logging.WARNING))
    return handler
