"""
Color format detection.

Prefixes and units decide the format when present. Bare numeric triples are
ambiguous and go through ``BARE_TRIPLE_RULES``, a first-match table keyed on
component magnitudes.

Known ambiguity: a low-chroma OKLCH triple and an OKLAB triple with a small
positive ``a`` look the same (``0.5 0.1 0.1``); the table calls both OKLCH.
"""

import logging
import re
from typing import Callable, Optional, Tuple

from .colormath import ColorMath, CssColorMath
from .cssvar import unwrap_css_variable
from .models import ColorFormat
from .numeric import normalize_percent_alpha
from .patterns import (
    BARE_TRIPLE_RE,
    HEX_RE,
    LEGACY_ALPHA_RE,
    PERCENT_ALPHA_RE,
    RAW_HSL_ALPHA_RE,
    RAW_HSL_RE,
)

logger = logging.getLogger(__name__)

# Largest OKLCH chroma the table expects; a second value above it reads as OKLAB
OKLAB_CHROMA_CEILING = 0.4

Triple = Tuple[float, float, float]

BARE_TRIPLE_RULES: Tuple[Tuple[str, Callable[[float, float, float], bool], ColorFormat], ...] = (
    (
        "lightness in [0, 1], second value negative or above 0.4",
        lambda first, second, third: 0 <= first <= 1 and (second < 0 or second > OKLAB_CHROMA_CEILING),
        ColorFormat.OKLAB,
    ),
    (
        "lightness in [0, 1], chroma in [0, 0.4]",
        lambda first, second, third: 0 <= first <= 1,
        ColorFormat.OKLCH,
    ),
    (
        "all channels in [0, 255]",
        lambda first, second, third: all(0 <= v <= 255 for v in (first, second, third)),
        ColorFormat.RGB,
    ),
)


def infer_bare_triple_format(first: float, second: float, third: float) -> Optional[ColorFormat]:
    """Classify a unit-less triple by magnitude; None when no rule matches."""
    for _, predicate, fmt in BARE_TRIPLE_RULES:
        if predicate(first, second, third):
            return fmt
    return None


def parse_bare_triple(value: str) -> Optional[Triple]:
    m = BARE_TRIPLE_RE.match(value.strip())
    if not m:
        return None
    return float(m.group(1)), float(m.group(2)), float(m.group(3))


def rewrite_raw_hsl(value: str) -> Optional[str]:
    """Wrap a prefix-less ``N N% N%`` (optionally ``/ P%``) triple in hsl()."""
    if value.startswith("hsl"):
        return None
    m = RAW_HSL_RE.match(value)
    if m:
        return f"hsl({m.group(1)} {m.group(2)}% {m.group(3)}%)"
    m = RAW_HSL_ALPHA_RE.match(value)
    if m:
        h, s, l, a = m.groups()
        return f"hsl({h} {s}% {l}% / {a}%)"
    return None


def _function_prefix(value: str) -> str:
    m = re.match(r"^([a-z]+)\s*\(", value, re.IGNORECASE)
    return m.group(1).lower() if m else ""


def _detect_rewritten(value: str, color_math: ColorMath) -> Optional[ColorFormat]:
    """Retry validation after rewriting alpha notations the parser may not accept."""
    m = PERCENT_ALPHA_RE.match(value)
    if m and color_math.is_valid_color(normalize_percent_alpha(value)):
        return _base_format(m.group(1))

    m = LEGACY_ALPHA_RE.match(value)
    if m:
        fmt, values, alpha = m.groups()
        base = "rgb" if fmt.lower().startswith("rgb") else "hsl"
        if color_math.is_valid_color(f"{base}({values.replace(',', ' ')}, {alpha})"):
            return ColorFormat(base)
    return None


def _base_format(name: str) -> ColorFormat:
    name = name.lower()
    if name in ("rgba", "hsla"):
        name = name[:-1]
    return ColorFormat(name)


def _detect(text: str, color_math: ColorMath) -> Optional[ColorFormat]:
    value, _ = unwrap_css_variable(text)
    value = rewrite_raw_hsl(value) or value

    bare = parse_bare_triple(value)
    if bare is None and not color_math.is_valid_color(value):
        return _detect_rewritten(value, color_math)

    if value.startswith("#") or HEX_RE.match(value):
        return ColorFormat.HEX

    prefix = _function_prefix(value)
    if prefix.startswith("hsl") or (not prefix and "%" in value and "rgb" not in value):
        return ColorFormat.HSL
    if prefix == "oklab":
        return ColorFormat.OKLAB
    if prefix == "oklch":
        return ColorFormat.OKLCH
    if prefix.startswith("rgb"):
        return ColorFormat.RGB

    if bare is not None:
        return infer_bare_triple_format(*bare)
    return None


def detect_color_format(text: str, color_math: Optional[ColorMath] = None) -> Optional[ColorFormat]:
    """Return the format of a color string, or None when it cannot be told."""
    try:
        return _detect(text.strip(), color_math or CssColorMath())
    except Exception:
        logger.debug("Error detecting color format of %r", text, exc_info=True)
        return None
