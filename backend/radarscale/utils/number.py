"""Number helpers: percent parsing, rounding, nice numbers. No engine imports."""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

# Decimal places kept by round_number() when no precision is given.
DEFAULT_PRECISION = 10

_PERCENT_KEYWORDS = {
    "center": "50%",
    "middle": "50%",
    "left": "0%",
    "top": "0%",
    "right": "100%",
    "bottom": "100%",
}


def parse_percent(percent: float | str | None, all_: float) -> float:
    """Resolve an absolute value or a percentage string against ``all_``.

    ``"50%"`` of 400 → 200.0, ``"12"`` → 12.0, ``30`` → 30.0, ``None`` → nan.
    Position keywords (``"center"``, ``"left"``, ...) are accepted too.
    """
    if isinstance(percent, str):
        percent = _PERCENT_KEYWORDS.get(percent, percent)
        text = percent.strip()
        if text.endswith("%"):
            return _parse_float(text[:-1]) / 100 * all_
        return _parse_float(text)
    if percent is None:
        return math.nan
    return float(percent)


def _parse_float(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        return math.nan


def round_number(x: float, precision: int = DEFAULT_PRECISION) -> float:
    """Round to ``precision`` decimals. nan and inf pass through."""
    return round(float(x), max(0, min(20, precision)))


def get_precision(val: float) -> int:
    """Number of decimal places needed to represent ``val`` exactly."""
    val = float(val)
    if not math.isfinite(val):
        return 0
    if val > 1e-14:
        e = 1
        for i in range(15):
            if round(val * e) / e == val:
                return i
            e *= 10
    return _get_precision_safe(val)


def _get_precision_safe(val: float) -> int:
    text = repr(abs(val)).lower()
    exp_pos = text.find("e")
    exp = -int(text[exp_pos + 1:]) if exp_pos > 0 else 0
    significand_end = exp_pos if exp_pos > 0 else len(text)
    dot_pos = text.find(".")
    decimals = 0 if dot_pos < 0 else significand_end - 1 - dot_pos
    if decimals == 1 and text[dot_pos + 1:significand_end] == "0":
        decimals = 0
    return max(0, decimals + exp)


def quantity_exponent(val: float) -> int:
    """Exponent of the order of magnitude: 1234 → 3, 0.05 → -2."""
    if val == 0:
        return 0
    exp = math.floor(math.log10(val))
    if val / 10**exp >= 10:
        exp += 1
    return exp


def nice(val: float, round_: bool = False) -> float:
    """Find a human-friendly number near ``val`` with leading digit 1, 2, 3 or 5.

    With ``round_`` the nearest nice number is chosen, otherwise the next
    nice number at or above ``val``.
    """
    if not math.isfinite(val) or val < 0:
        return val
    exponent = quantity_exponent(val)
    exp10 = 10.0**exponent
    f = val / exp10
    if round_:
        if f < 1.5:
            nf = 1
        elif f < 2.5:
            nf = 2
        elif f < 4:
            nf = 3
        elif f < 7:
            nf = 5
        else:
            nf = 10
    else:
        if f <= 1:
            nf = 1
        elif f <= 2:
            nf = 2
        elif f <= 3:
            nf = 3
        elif f <= 5:
            nf = 5
        else:
            nf = 10
    result = nf * exp10
    return round_number(result, -exponent) if exponent < 0 else result


def linear_map(
    val: float,
    domain: Sequence[float],
    range_: Sequence[float],
    clamp: bool = False,
) -> float:
    """Map ``val`` linearly from ``domain`` onto ``range_``.

    A zero-width domain maps everything onto the middle of the range.
    """
    d0, d1 = domain[0], domain[1]
    r0, r1 = range_[0], range_[1]
    sub_domain = d1 - d0
    sub_range = r1 - r0

    if sub_domain == 0:
        return r0 if sub_range == 0 else (r0 + r1) / 2

    if clamp:
        if sub_domain > 0:
            if val <= d0:
                return r0
            if val >= d1:
                return r1
        else:
            if val >= d0:
                return r0
            if val <= d1:
                return r1
    else:
        if val == d0:
            return r0
        if val == d1:
            return r1

    return (val - d0) / sub_domain * sub_range + r0


def is_finite(*values: float) -> bool:
    """True when every value is a finite number (NaN and ±inf are not)."""
    return bool(np.all(np.isfinite(np.asarray(values, dtype=np.float64))))
