"""CSS time value parsing."""
from __future__ import annotations

import re
from typing import Optional

TIME_RE = re.compile(r"^\s*(-?\d*\.?\d+)\s*(ms|s)\s*$", re.IGNORECASE)


def time_str_to_millis(value: str) -> Optional[int]:
    """Convert "2s" / "250ms" into integer milliseconds.

    Returns None when the string is not a CSS time value.
    """
    if not value:
        return None
    match = TIME_RE.match(value)
    if not match:
        return None
    amount = float(match.group(1))
    if match.group(2).lower() == "s":
        amount *= 1000
    return int(round(amount))
