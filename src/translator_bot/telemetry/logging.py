"""Logging setup shared by the CLI and the bot runtime."""

from __future__ import annotations

import logging

from rich.logging import RichHandler

_NOISY_LOGGERS = ("httpx", "httpcore", "telegram.ext.Updater")


def configure_logging(level: str = "INFO") -> None:
    """Install a rich console handler on the root logger."""
    logging.basicConfig(
        level=level.upper(),
        format="%(name)s: %(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )
    # Polling logs every getUpdates request at INFO.
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
