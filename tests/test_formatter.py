import pytest

from colorconvert import Hsl, Oklab, Oklch, Rgb, format_color, format_hex


@pytest.mark.parametrize(
    "color, expected",
    [
        (Hsl(h=219.6, s=99.5, l=50.4), "hsl(220 100% 50%)"),
        (Rgb(r=254.5, g=0.4, b=127.5), "rgb(255 0 128)"),
        (Oklab(l=0.7, a=-0.1234, b=0.006), "oklab(0.70 -0.12 0.01)"),
        (Oklab(l=1.0, a=-0.0001, b=0.0), "oklab(1.00 0.00 0.00)"),
        (Oklch(l=0.628, c=0.2577, h=29.23), "oklch(0.63 0.26 29)"),
    ],
)
def test_format_full(color, expected):
    assert format_color(color) == expected


def test_format_alpha_suffix_ignores_use_commas():
    color = Rgb(r=255, g=0, b=0, alpha=0.5)
    assert format_color(color) == "rgb(255 0 0 / 50%)"
    assert format_color(color, use_commas=True) == "rgb(255, 0, 0 / 50%)"


def test_format_simplified():
    assert format_color(Hsl(h=220, s=100, l=50, alpha=0.5), simplified=True) == "220 100% 50% / 50%"
    assert format_color(Rgb(r=255, g=0, b=0), simplified=True, use_commas=True) == "255, 0, 0"
    assert format_color(Oklch(l=0.7, c=0.2, h=240), simplified=True) == "0.70 0.20 240"


@pytest.mark.parametrize(
    "alpha, suffix",
    [
        (None, ""),
        (0.0005, ""),
        (0.001, ""),
        (0.02, " / 2%"),
        (170 / 255, " / 67%"),
        (0.99, " / 99%"),
        (0.999, " / 100%"),
        (0.9995, ""),
        (1.0, ""),
    ],
)
def test_alpha_epsilon_rule(alpha, suffix):
    assert format_color(Rgb(r=1, g=2, b=3, alpha=alpha)) == f"rgb(1 2 3{suffix})"


def test_format_hex():
    assert format_hex("#00A9FF", None) == "#00a9ff"
    assert format_hex("#00a9ff", 0.5) == "#00a9ff80"
    assert format_hex("#00a9ff", 1.0) == "#00a9ff"
    assert format_hex("#00a9ff", 0.0005) == "#00a9ff"
