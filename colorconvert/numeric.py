"""
Numeric helpers and alpha conversions.

Alpha is carried as a float in [0, 1]. Text encodes it five ways: the last
byte (or nibble) of a hex token, a ``/ P%`` suffix, a ``/ A`` suffix, a
fourth space/comma separated component, and a percentage that has been
normalized to a decimal.
"""

import math
from typing import Optional

from .patterns import HEX_RE, PERCENT_ALPHA_RE, SLASH_PERCENT_RE, numeric_components

# Alpha at or below this is treated as unspecified, not as fully transparent
ALPHA_EPSILON = 0.001
# Alpha above this is treated as opaque
OPAQUE_THRESHOLD = 0.999


def clamp(v: float, lo: float, hi: float) -> float:
    """Clamp value between lo and hi."""
    return max(lo, min(hi, v))


def round_half_up(x: float) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    return int(math.floor(x + 0.5))


def has_visible_alpha(alpha: Optional[float]) -> bool:
    """True when alpha is distinguishable from both opaque and unspecified."""
    return alpha is not None and ALPHA_EPSILON < alpha <= OPAQUE_THRESHOLD


def alpha_to_hex(alpha: float) -> str:
    """Convert alpha (0-1) to a two digit hex byte."""
    return format(round_half_up(clamp(alpha, 0, 1) * 255), "02x")


def hex_to_alpha(digits: str) -> float:
    """Convert one or two hex digits to alpha; a single nibble is doubled."""
    if len(digits) == 1:
        digits = digits * 2
    return int(digits, 16) / 255


def percent_to_alpha(percent: str) -> float:
    """Convert a percentage (without the % sign) to alpha."""
    return clamp(float(percent) / 100, 0, 1)


def alpha_to_percent(alpha: float) -> int:
    return round_half_up(alpha * 100)


def extract_alpha_from_hex(value: str) -> Optional[float]:
    """Return the alpha of a 4 or 8 digit hex token, if it has one."""
    m = HEX_RE.match(value.strip())
    if not m:
        return None
    digits = m.group(1)
    if len(digits) == 8:
        return hex_to_alpha(digits[6:8])
    if len(digits) == 4:
        return hex_to_alpha(digits[3])
    return None


def extract_alpha(value: str) -> Optional[float]:
    """
    Read an alpha value straight from color text.

    Checked in order: hex alpha, slash percentage alpha, then a trailing
    decimal no greater than 1 that is the fourth numeric component.
    """
    value = value.strip()
    if HEX_RE.match(value):
        return extract_alpha_from_hex(value)

    m = SLASH_PERCENT_RE.search(value)
    if m:
        return percent_to_alpha(m.group(1))

    parts = numeric_components(value)
    if len(parts) == 4 and not parts[3].endswith("%"):
        try:
            candidate = float(parts[3])
        except ValueError:
            return None
        if 0 <= candidate <= 1:
            return candidate
    return None


def normalize_percent_alpha(value: str) -> str:
    """Rewrite ``fmt(values / P%)`` as ``fmt(values P/100)``."""
    m = PERCENT_ALPHA_RE.match(value)
    if not m:
        return value
    fmt, values, percent = m.groups()
    return f"{fmt}({values} {float(percent) / 100:g})"
