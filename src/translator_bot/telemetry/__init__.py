"""Logging and operational diagnostics."""

from .logging import configure_logging

__all__ = ["configure_logging"]
