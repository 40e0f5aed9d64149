"""
Render parsed colors back to CSS text.

HSL and RGB components round to integers, OKLAB/OKLCH lightness and axes keep
two decimals, hues are integers and alpha is an integer percentage.
"""

import math
from typing import List, Optional, Tuple

from .errors import MalformedColorError
from .models import Hsl, Oklab, Oklch, ParsedColor, Rgb
from .numeric import alpha_to_hex, alpha_to_percent, has_visible_alpha, round_half_up


def _fixed(x: float) -> str:
    if not math.isfinite(x):
        raise MalformedColorError(f"component is not finite: {x}")
    s = f"{x:.2f}"
    return "0.00" if s == "-0.00" else s


def _components(color: ParsedColor) -> Tuple[str, List[str]]:
    if isinstance(color, Hsl):
        return "hsl", [
            str(round_half_up(color.h)),
            f"{round_half_up(color.s)}%",
            f"{round_half_up(color.l)}%",
        ]
    if isinstance(color, Rgb):
        return "rgb", [str(round_half_up(c)) for c in (color.r, color.g, color.b)]
    if isinstance(color, Oklab):
        return "oklab", [_fixed(color.l), _fixed(color.a), _fixed(color.b)]
    if isinstance(color, Oklch):
        return "oklch", [_fixed(color.l), _fixed(color.c), str(round_half_up(color.h))]
    raise TypeError(f"cannot format {type(color).__name__}")


def alpha_suffix(alpha: Optional[float]) -> str:
    if not has_visible_alpha(alpha):
        return ""
    return f" / {alpha_to_percent(alpha)}%"


def format_color(color: ParsedColor, simplified: bool = False, use_commas: bool = False) -> str:
    """Format color as ``fmt(c1 c2 c3 / A%)``, or bare components when simplified."""
    separator = ", " if use_commas else " "
    name, parts = _components(color)
    body = separator.join(parts) + alpha_suffix(color.alpha)
    if simplified:
        return body
    return f"{name}({body})"


def format_hex(base: str, alpha: Optional[float]) -> str:
    """Fold alpha into a 6 digit hex string when it is visible."""
    base = base.lower()
    if has_visible_alpha(alpha):
        return base + alpha_to_hex(alpha)
    return base
