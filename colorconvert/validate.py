"""
Component-count guard run before a value is handed to the parser.
"""

from typing import Dict, FrozenSet

from .models import ColorFormat
from .patterns import HEX_RE, numeric_components

EXPECTED_COMPONENT_COUNTS: Dict[ColorFormat, FrozenSet[int]] = {
    ColorFormat.HEX: frozenset({1}),
    ColorFormat.HSL: frozenset({3, 4}),
    ColorFormat.OKLAB: frozenset({3, 4}),
    ColorFormat.OKLCH: frozenset({3, 4}),
    ColorFormat.RGB: frozenset({3, 4}),
    ColorFormat.AUTO: frozenset({1, 3, 4}),
}


def validate_component_count(value: str, fmt: ColorFormat) -> bool:
    """Check value has the arity fmt expects: 3 components, 4 with alpha, or one hex token."""
    value = value.strip()
    is_hex = bool(HEX_RE.match(value))
    if fmt is ColorFormat.HEX:
        return is_hex
    count = 1 if is_hex else len(numeric_components(value))
    return count in EXPECTED_COMPONENT_COUNTS[fmt]
