"""Shared utilities for the web tier."""
from utils.flash import consume_flashes, flash
from utils.logs import configure_logging

__all__ = [
    "configure_logging",
    "consume_flashes",
    "flash",
]
