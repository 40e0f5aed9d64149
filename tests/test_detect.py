"""
detect tests
============

Prefix/unit classification, raw HSL, alpha rewrites, CSS variables and the
bare-triple magnitude table (boundaries 0, 1, 0.4 and 255).
"""

import pytest

from colorconvert import ColorFormat, detect_color_format, infer_bare_triple_format
from colorconvert.detect import BARE_TRIPLE_RULES, rewrite_raw_hsl
from colorconvert.patterns import PREFIX_RE


# ──────────────────────────────────────────────────────────────────────────────
# Prefixed and unit-bearing values
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "text, expected",
    [
        ("#ff0000", ColorFormat.HEX),
        ("#F008", ColorFormat.HEX),
        ("ff0000", ColorFormat.HEX),
        ("#FF0000AA", ColorFormat.HEX),
        ("hsl(220 100% 50%)", ColorFormat.HSL),
        ("hsla(220, 100%, 50%, 0.75)", ColorFormat.HSL),
        ("234 71.43% 10.98%", ColorFormat.HSL),
        ("234 71.43% 10.98% / 50%", ColorFormat.HSL),
        ("oklab(0.7 0.0 0.2)", ColorFormat.OKLAB),
        ("oklab(0.7 0.0 0.2 / 50%)", ColorFormat.OKLAB),
        ("oklch(0.93 0.03 25/70%)", ColorFormat.OKLCH),
        ("oklch(50% 0.1 20)", ColorFormat.OKLCH),
        ("rgb(255 0 0 / 50%)", ColorFormat.RGB),
        ("rgba(255, 0, 0, 0.5)", ColorFormat.RGB),
        ("  rgb(0, 0, 255)  ", ColorFormat.RGB),
    ],
)
def test_detect_prefixed(text, expected):
    assert detect_color_format(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("--destructive-foreground: oklch(0.93 0.03 25/70%);", ColorFormat.OKLCH),
        ("--primary: rgb(0 0 255);", ColorFormat.RGB),
        ("--accent: #fff", ColorFormat.HEX),
        ("--sidebar: 234 71.43% 10.98%;", ColorFormat.HSL),
    ],
)
def test_detect_inside_css_variable(text, expected):
    assert detect_color_format(text) is expected


@pytest.mark.parametrize("text", ["", "hello", "red", "hsl(10 20%)", "#12345", "rgb(1 2)", "--x: nope;"])
def test_detect_rejects(text):
    assert detect_color_format(text) is None


def test_detect_never_raises_on_garbage():
    assert detect_color_format("((((/%%%,,,") is None


# ──────────────────────────────────────────────────────────────────────────────
# Raw HSL rewrite
# ──────────────────────────────────────────────────────────────────────────────
def test_rewrite_raw_hsl():
    assert rewrite_raw_hsl("234 71.43% 10.98%") == "hsl(234 71.43% 10.98%)"
    assert rewrite_raw_hsl("234 71.43% 10.98% / 50%") == "hsl(234 71.43% 10.98% / 50%)"
    assert rewrite_raw_hsl("hsl(234 71.43% 10.98%)") is None
    assert rewrite_raw_hsl("234 71.43 10.98") is None


# ──────────────────────────────────────────────────────────────────────────────
# Bare triple decision table
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "triple, expected",
    [
        ((0, 0, 0), ColorFormat.OKLCH),
        ((1, 0, 0), ColorFormat.OKLCH),
        ((1, 0.4, 120), ColorFormat.OKLCH),
        ((1, 0.41, 0), ColorFormat.OKLAB),
        ((0, -0.01, 0), ColorFormat.OKLAB),
        ((0.5, 0.1, 0.1), ColorFormat.OKLCH),
        ((1.01, 0.5, 0), ColorFormat.RGB),
        ((255, 255, 255), ColorFormat.RGB),
        ((256, 0, 0), None),
        ((2, 0, 256), None),
        ((-0.1, 0, 0), None),
    ],
)
def test_infer_bare_triple_boundaries(triple, expected):
    assert infer_bare_triple_format(*triple) is expected


def test_rules_are_ordered_oklab_first():
    assert [fmt for _, _, fmt in BARE_TRIPLE_RULES] == [
        ColorFormat.OKLAB,
        ColorFormat.OKLCH,
        ColorFormat.RGB,
    ]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("0.7 0.2 240", ColorFormat.OKLCH),
        ("0.5 -0.1 0.1", ColorFormat.OKLAB),
        ("120 80 40", ColorFormat.RGB),
        ("300 300 300", None),
    ],
)
def test_detect_bare_triples(text, expected):
    assert detect_color_format(text) is expected


# ──────────────────────────────────────────────────────────────────────────────
# Alpha rewrites for stricter ColorMath implementations
# ──────────────────────────────────────────────────────────────────────────────
class StrictColorMath:
    """Accepts function notation only without slash alpha or a fourth comma."""

    def is_valid_color(self, text):
        return (
            PREFIX_RE.match(text) is not None
            and "/" not in text
            and text.count(",") < 3
        )


@pytest.mark.parametrize(
    "text, expected",
    [
        ("oklch(0.7 0.2 240 / 50%)", ColorFormat.OKLCH),
        ("oklab(0.7 0.0 0.2 / 25%)", ColorFormat.OKLAB),
        ("rgba(255, 0, 0, 0.5)", ColorFormat.RGB),
        ("hsla(10, 20%, 30%, 0.5)", ColorFormat.HSL),
    ],
)
def test_alpha_rewrites_recover_format(text, expected):
    assert detect_color_format(text, StrictColorMath()) is expected


def test_strict_math_without_rewrite_match_is_undetected():
    assert detect_color_format("rgb(255 0 0 / 0.5)", StrictColorMath()) is None


class RaisingColorMath:
    def is_valid_color(self, text):
        raise RuntimeError("validator crashed")


def test_detect_swallows_color_math_errors():
    assert detect_color_format("rgb(1 2 3)", RaisingColorMath()) is None
