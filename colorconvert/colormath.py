"""
CSS color parsing and colorspace transforms with sRGB as the hub.
Supported: hex 3/4/6/8, rgb/rgba, hsl/hsla, oklab, oklch (modern and legacy
separators), plus bare component tuples when the caller names the format.
Excludes: named colors, hwb, lab, lch and color() spaces.
"""

import math
from typing import Optional, Protocol, Tuple

from .errors import MalformedColorError, UnsupportedConversionError
from .models import ColorFormat, Hsl, Oklab, Oklch, ParsedColor, Rgb
from .numeric import clamp, round_half_up
from .patterns import BARE_RE, FUNCTION_RE, HEX_RE, NUMERIC_TOKEN_RE


class ColorMath(Protocol):
    """Stateless colorspace capability the converter delegates to."""

    def is_valid_color(self, text: str) -> bool:
        ...

    def parse(self, text: str, hint: ColorFormat) -> ParsedColor:
        ...

    def transform(self, color: ParsedColor, target: ColorFormat) -> ParsedColor:
        ...

    def to_hex(self, color: ParsedColor) -> str:
        ...


# Component parsing ----------------------------------------------

def pct(x: str) -> float:
    """Convert percentage string to decimal."""
    return float(x.replace("%", "")) / 100


def angle_to_deg(s: str) -> float:
    """Convert angle string to degrees."""
    m = NUMERIC_TOKEN_RE.match(s)
    if not m:
        raise MalformedColorError(f"invalid angle: {s!r}")
    v = float(m.group(1))
    unit = s[len(m.group(1)):].lower() or "deg"
    if unit == "deg":
        deg = v
    elif unit == "grad":
        deg = (v * 9) / 10
    elif unit == "rad":
        deg = (v * 180) / math.pi
    elif unit == "turn":
        deg = v * 360
    else:
        raise MalformedColorError(f"invalid angle unit: {s!r}")
    if not math.isfinite(deg):
        raise MalformedColorError(f"angle out of range: {s!r}")
    return deg


def _plain(t: str, allow_percent: bool = False) -> None:
    """Reject angle units on a component that is not a hue."""
    rest = t[len(NUMERIC_TOKEN_RE.match(t).group(1)):]
    if rest and not (allow_percent and rest == "%"):
        raise MalformedColorError(f"unexpected unit in component: {t!r}")


def _alpha(t: Optional[str]) -> Optional[float]:
    if t is None or t.lower() == "none":
        return None
    _plain(t, allow_percent=True)
    return clamp(pct(t), 0, 1) if t.endswith("%") else clamp(float(t), 0, 1)


def _is_none(t: str) -> bool:
    return t.lower() == "none"


def _rgb_from_tokens(R: str, G: str, B: str, A: Optional[str]) -> Rgb:
    def cv(t: str) -> float:
        if _is_none(t):
            return 0
        _plain(t, allow_percent=True)
        if t.endswith("%"):
            return clamp(pct(t) * 255, 0, 255)
        return clamp(float(t), 0, 255)

    return Rgb(r=cv(R), g=cv(G), b=cv(B), alpha=_alpha(A))


def _hsl_from_tokens(H: str, S: str, L: str, A: Optional[str]) -> Hsl:
    def sl(t: str) -> float:
        if _is_none(t):
            return 0
        _plain(t, allow_percent=True)
        return clamp(float(t.replace("%", "")), 0, 100)

    h = 0 if _is_none(H) else angle_to_deg(H) % 360
    return Hsl(h=h, s=sl(S), l=sl(L), alpha=_alpha(A))


def _lightness(t: str) -> float:
    if _is_none(t):
        return 0
    _plain(t, allow_percent=True)
    return clamp(pct(t), 0, 1) if t.endswith("%") else clamp(float(t), 0, 1)


def _ok_axis(t: str) -> float:
    # 100% maps to 0.4 for oklab a/b and oklch chroma
    if _is_none(t):
        return 0
    _plain(t, allow_percent=True)
    v = pct(t) * 0.4 if t.endswith("%") else float(t)
    if not math.isfinite(v):
        raise MalformedColorError(f"component out of range: {t!r}")
    return v


def _oklab_from_tokens(L: str, A: str, B: str, alpha: Optional[str]) -> Oklab:
    return Oklab(l=_lightness(L), a=_ok_axis(A), b=_ok_axis(B), alpha=_alpha(alpha))


def _oklch_from_tokens(L: str, C: str, H: str, alpha: Optional[str]) -> Oklch:
    h = 0 if _is_none(H) else angle_to_deg(H) % 360
    return Oklch(l=_lightness(L), c=max(0.0, _ok_axis(C)), h=h, alpha=_alpha(alpha))


_TOKEN_PARSERS = {
    ColorFormat.RGB: _rgb_from_tokens,
    ColorFormat.HSL: _hsl_from_tokens,
    ColorFormat.OKLAB: _oklab_from_tokens,
    ColorFormat.OKLCH: _oklch_from_tokens,
}

_FUNCTIONS = {
    "rgb": ColorFormat.RGB,
    "rgba": ColorFormat.RGB,
    "hsl": ColorFormat.HSL,
    "hsla": ColorFormat.HSL,
    "oklab": ColorFormat.OKLAB,
    "oklch": ColorFormat.OKLCH,
}


def parse_hex(s: str) -> Optional[Rgb]:
    """Parse hex color string to Rgb."""
    m = HEX_RE.match(s)
    if not m:
        return None
    h = m.group(1)
    alpha = None
    if len(h) in [3, 4]:
        r = int(h[0] + h[0], 16)
        g = int(h[1] + h[1], 16)
        b = int(h[2] + h[2], 16)
        if len(h) == 4:
            alpha = int(h[3] + h[3], 16) / 255
    else:
        r = int(h[0:2], 16)
        g = int(h[2:4], 16)
        b = int(h[4:6], 16)
        if len(h) == 8:
            alpha = int(h[6:8], 16) / 255
    return Rgb(r=r, g=g, b=b, alpha=alpha)


def parse_native(s: str, hint: Optional[ColorFormat] = None) -> ParsedColor:
    """Parse s into the model of the notation it is written in."""
    s = s.strip()
    # bare hex digits only count as hex when no other format was asked for
    if s.startswith("#") or hint in (None, ColorFormat.HEX):
        rgb = parse_hex(s)
        if rgb is not None:
            return rgb

    m = FUNCTION_RE.match(s)
    if m:
        fmt = _FUNCTIONS[m.group(1).lower()]
        return _TOKEN_PARSERS[fmt](*m.groups()[1:])

    m = BARE_RE.match(s)
    if m and hint in _TOKEN_PARSERS:
        return _TOKEN_PARSERS[hint](*m.groups())

    raise MalformedColorError(f"invalid CSS string: {s!r}")


# sRGB / OKLab ---------------------------------------------------

def s_to_lin(c: float) -> float:
    """sRGB companding."""
    cs = c / 255
    return cs / 12.92 if cs <= 0.04045 else ((cs + 0.055) / 1.055) ** 2.4


def lin_to_s(l: float) -> float:
    """Linear to sRGB, clamped to 0-255."""
    l = clamp(l, 0, 1)
    v = 12.92 * l if l <= 0.0031308 else 1.055 * (l ** (1 / 2.4)) - 0.055
    return clamp(v * 255, 0, 255)


def _cbrt(x: float) -> float:
    return math.copysign(abs(x) ** (1 / 3), x)


def hsl_to_rgb(h: float, s: float, l: float) -> Tuple[float, float, float]:
    """Convert HSL to RGB. h in deg, s,l in [0,1]."""
    h = ((h % 360) + 360) % 360
    c = (1 - abs(2 * l - 1)) * s
    hp = h / 60
    x = c * (1 - abs((hp % 2) - 1))

    if 0 <= hp < 1:
        r1, g1, b1 = c, x, 0
    elif 1 <= hp < 2:
        r1, g1, b1 = x, c, 0
    elif 2 <= hp < 3:
        r1, g1, b1 = 0, c, x
    elif 3 <= hp < 4:
        r1, g1, b1 = 0, x, c
    elif 4 <= hp < 5:
        r1, g1, b1 = x, 0, c
    else:
        r1, g1, b1 = c, 0, x

    m = l - c / 2
    return (
        clamp((r1 + m) * 255, 0, 255),
        clamp((g1 + m) * 255, 0, 255),
        clamp((b1 + m) * 255, 0, 255),
    )


def rgb_to_hsl(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Convert RGB to HSL. Returns h in deg, s,l in [0,1]."""
    R, G, B = r / 255, g / 255, b / 255
    max_val = max(R, G, B)
    min_val = min(R, G, B)
    d = max_val - min_val
    l = (max_val + min_val) / 2
    s = 0 if d == 0 else d / (1 - abs(2 * l - 1))
    h = 0
    if d != 0:
        if max_val == R:
            h = 60 * (((G - B) / d) % 6)
        elif max_val == G:
            h = 60 * ((B - R) / d + 2)
        else:
            h = 60 * ((R - G) / d + 4)
    if h < 0:
        h += 360
    return h, clamp(s, 0, 1), clamp(l, 0, 1)


def rgb_to_oklab(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Convert RGB to OKLab."""
    # sRGB -> linear
    R, G, B = s_to_lin(r), s_to_lin(g), s_to_lin(b)

    l = _cbrt(0.4122214708 * R + 0.5363325363 * G + 0.0514459929 * B)
    m = _cbrt(0.2119034982 * R + 0.6806995451 * G + 0.1073969566 * B)
    s = _cbrt(0.0883024619 * R + 0.2817188376 * G + 0.6299787005 * B)

    L = 0.2104542553 * l + 0.793617785 * m - 0.0040720468 * s
    a = 1.9779984951 * l - 2.428592205 * m + 0.4505937099 * s
    b = 0.0259040371 * l + 0.7827717662 * m - 0.808675766 * s

    return L, a, b


def oklab_to_rgb(L: float, a: float, b: float) -> Tuple[float, float, float]:
    """Convert OKLab to RGB."""
    # OKLab -> OKLMS -> linear sRGB -> compand
    l_ = L + 0.3963377774 * a + 0.2158037573 * b
    m_ = L - 0.1055613458 * a - 0.0638541728 * b
    s_ = L - 0.0894841775 * a - 1.291485548 * b

    l = l_ * l_ * l_
    m = m_ * m_ * m_
    s = s_ * s_ * s_

    R = +4.0767416621 * l - 3.3077115913 * m + 0.2309699292 * s
    G = -1.2684380046 * l + 2.6097574011 * m - 0.3413193965 * s
    B = -0.0041960863 * l - 0.7034186147 * m + 1.707614701 * s

    return lin_to_s(R), lin_to_s(G), lin_to_s(B)


def oklab_to_oklch(L: float, a: float, b: float) -> Tuple[float, float, float]:
    C = math.sqrt(a * a + b * b)
    h = (math.atan2(b, a) * 180) / math.pi
    if h < 0:
        h += 360
    return L, C, h


def oklch_to_oklab(L: float, C: float, h: float) -> Tuple[float, float, float]:
    hr = (h * math.pi) / 180
    return L, C * math.cos(hr), C * math.sin(hr)


# Transforms -----------------------------------------------------

_MODELS = {
    ColorFormat.HEX: Rgb,
    ColorFormat.RGB: Rgb,
    ColorFormat.HSL: Hsl,
    ColorFormat.OKLAB: Oklab,
    ColorFormat.OKLCH: Oklch,
}


def to_rgb(color: ParsedColor) -> Rgb:
    if isinstance(color, Rgb):
        return color
    if isinstance(color, Hsl):
        r, g, b = hsl_to_rgb(color.h, color.s / 100, color.l / 100)
    elif isinstance(color, Oklab):
        r, g, b = oklab_to_rgb(color.l, color.a, color.b)
    elif isinstance(color, Oklch):
        r, g, b = oklab_to_rgb(*oklch_to_oklab(color.l, color.c, color.h))
    else:
        raise UnsupportedConversionError(f"cannot convert {type(color).__name__} to rgb")
    return Rgb(r=r, g=g, b=b, alpha=color.alpha)


def from_rgb(rgb: Rgb, target: ColorFormat) -> ParsedColor:
    if target in (ColorFormat.RGB, ColorFormat.HEX):
        return rgb
    if target is ColorFormat.HSL:
        h, s, l = rgb_to_hsl(rgb.r, rgb.g, rgb.b)
        return Hsl(h=h, s=s * 100, l=l * 100, alpha=rgb.alpha)
    L, a, b = rgb_to_oklab(rgb.r, rgb.g, rgb.b)
    if target is ColorFormat.OKLAB:
        return Oklab(l=L, a=a, b=b, alpha=rgb.alpha)
    if target is ColorFormat.OKLCH:
        L, C, h = oklab_to_oklch(L, a, b)
        return Oklch(l=L, c=C, h=h, alpha=rgb.alpha)
    raise UnsupportedConversionError(f"cannot convert rgb to {target.value}")


class CssColorMath:
    """Default ColorMath: CSS Color 4 syntax, sRGB hub, OKLab matrices."""

    def is_valid_color(self, text: str) -> bool:
        try:
            parse_native(text)
        except MalformedColorError:
            return False
        return True

    def parse(self, text: str, hint: ColorFormat) -> ParsedColor:
        if hint not in _MODELS:
            raise UnsupportedConversionError(f"cannot parse as {hint.value}")
        return self.transform(parse_native(text, hint), hint)

    def transform(self, color: ParsedColor, target: ColorFormat) -> ParsedColor:
        model = _MODELS.get(target)
        if model is None:
            raise UnsupportedConversionError(f"no transform to {target.value}")
        if isinstance(color, model):
            return color
        # oklab and oklch convert directly so out-of-gamut values survive
        if isinstance(color, Oklab) and model is Oklch:
            L, C, h = oklab_to_oklch(color.l, color.a, color.b)
            return Oklch(l=L, c=C, h=h, alpha=color.alpha)
        if isinstance(color, Oklch) and model is Oklab:
            L, a, b = oklch_to_oklab(color.l, color.c, color.h)
            return Oklab(l=L, a=a, b=b, alpha=color.alpha)
        return from_rgb(to_rgb(color), target)

    def to_hex(self, color: ParsedColor) -> str:
        """Convert to a 6 digit hex string; alpha is not encoded."""
        rgb = to_rgb(color)
        return "#" + "".join(
            format(round_half_up(clamp(c, 0, 255)), "02x") for c in (rgb.r, rgb.g, rgb.b)
        )
