"""Lenient numeric coercion for loosely-typed client input."""

import math
from numbers import Real


def to_number(value, default):
    """Parse ``value`` as a float, or return ``default``.

    - ``None``, booleans and non-scalar values (lists, dicts) yield ``default``.
    - ints and floats are returned as floats. NaN and infinities pass through
      untouched so callers can reject them with :func:`is_finite`.
    - strings are stripped; an empty string or unparseable text yields
      ``default``.
    """
    if value is None or isinstance(value, bool):
        return default

    if isinstance(value, Real):
        return float(value)

    if isinstance(value, str):
        text = value.strip()
        if not text:
            return default
        try:
            return float(text)
        except ValueError:
            return default

    return default


def is_finite(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


def round_half_up(value: float) -> int:
    # Python's round() is banker's rounding; totals round .5 upward
    return math.floor(value + 0.5)
