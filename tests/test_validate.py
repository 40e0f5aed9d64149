import pytest

from colorconvert import ColorFormat, validate_component_count


@pytest.mark.parametrize(
    "value, fmt, expected",
    [
        ("#fff", ColorFormat.HEX, True),
        ("fff", ColorFormat.HEX, True),
        ("#ffff", ColorFormat.HEX, True),
        ("#ff00ff", ColorFormat.HEX, True),
        ("#ff00ff00", ColorFormat.HEX, True),
        ("#fffff", ColorFormat.HEX, False),
        ("rgb(1 2 3)", ColorFormat.HEX, False),
        ("hsl(10 20%)", ColorFormat.HSL, False),
        ("hsl(10 20% 30%)", ColorFormat.HSL, True),
        ("hsl(220deg 100% 50%)", ColorFormat.HSL, True),
        ("hsl(220 100% 50% 0.5)", ColorFormat.HSL, True),
        ("rgba(1, 2, 3, 0.5)", ColorFormat.RGB, True),
        ("rgb(1 2 3 4 5)", ColorFormat.RGB, False),
        ("oklch(0.5 0.1 20 / 0.5)", ColorFormat.OKLCH, True),
        ("oklab(0.5 0.1)", ColorFormat.OKLAB, False),
        ("0.5 0.1 0.2", ColorFormat.OKLAB, True),
        ("#fff", ColorFormat.RGB, False),
        ("#fff", ColorFormat.AUTO, True),
        ("1 2 3", ColorFormat.AUTO, True),
        ("1 2", ColorFormat.AUTO, False),
    ],
)
def test_validate_component_count(value, fmt, expected):
    assert validate_component_count(value, fmt) is expected
