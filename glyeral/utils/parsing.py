"""
Shared parsing utilities for intake values.

Form fields arrive as strings, numbers, or nothing at all. These helpers turn
them into clean Python values without ever raising.
"""

import math
import re
from typing import Any, Optional


_NUMBER_PREFIX = re.compile(r"^\s*([-+]?\d*\.?\d+(?:[eE][-+]?\d+)?)")


def parse_number(value: Any) -> Optional[float]:
    """
    Parse a loosely formatted number.

    Accepts ints, floats and strings with a leading number ("8.2", "8.2%",
    " 45 mL/min"). Booleans are not numbers here.

    Args:
        value: Raw value from a form or JSON body

    Returns:
        The parsed float, or None if nothing finite could be read
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        match = _NUMBER_PREFIX.match(value)
        if not match:
            return None
        number = float(match.group(1))
    else:
        return None

    if math.isnan(number) or math.isinf(number):
        return None
    return number


def parse_lab_value(value: Any) -> Optional[float]:
    """
    Parse a lab result, treating zero and negative readings as missing.

    Args:
        value: Raw lab value

    Returns:
        A positive float, or None
    """
    number = parse_number(value)
    if number is None or number <= 0:
        return None
    return number


def parse_flag(value: Any) -> bool:
    """Parse a checkbox-style value ("true", "yes", "1", True) into a bool."""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return value.strip().lower() in {"true", "yes", "y", "1", "on"}
    return False
