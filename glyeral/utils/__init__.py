"""Utility functions and helpers."""

from glyeral.utils.logging import get_logger, setup_logging
from glyeral.utils.parsing import parse_lab_value

__all__ = [
    "get_logger",
    "setup_logging",
    "parse_lab_value",
]
