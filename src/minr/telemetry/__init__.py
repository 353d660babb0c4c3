"""Logging setup for the Minr command line."""

from .logging import configure_logging

__all__ = ["configure_logging"]
