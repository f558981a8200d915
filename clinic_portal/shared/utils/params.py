"""Lenient parsing of low-risk request parameters.

Limits, day counts and identifiers are never rejected: malformed values
fall back to a default and out-of-range values are clamped.
"""

import math


def clamp_int(raw: object, minimum: int, maximum: int, default: int) -> int:
    """Parse raw as a number, floor it and clamp into [minimum, maximum].

    Non-numeric, missing, NaN or infinite values yield default.

    >>> clamp_int("50", 1, 20, 6)
    20
    >>> clamp_int("abc", 1, 20, 6)
    6
    """
    if raw is None or isinstance(raw, bool):
        return default
    try:
        value = float(str(raw).strip())
    except ValueError:
        return default
    if not math.isfinite(value):
        return default
    return min(max(math.floor(value), minimum), maximum)


def parse_identifier(raw: object) -> int | None:
    """Return a positive integer record id, or None when raw is not one."""
    if raw is None or isinstance(raw, bool):
        return None
    text = str(raw).strip()
    if not (text.isascii() and text.isdigit()):
        return None
    value = int(text)
    return value if value > 0 else None
