"""
Color formats and the component models the converter passes around.
"""

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .numeric import clamp


class ColorFormat(str, Enum):
    HEX = "hex"
    HSL = "hsl"
    OKLAB = "oklab"
    OKLCH = "oklch"
    RGB = "rgb"
    # request-time only, never a detected format
    AUTO = "auto"


class _Color(BaseModel):
    model_config = ConfigDict(frozen=True)

    alpha: Optional[float] = Field(default=None, ge=0.0, le=1.0)


class Hsl(_Color):
    h: float
    s: float
    l: float


class Rgb(_Color):
    r: float = Field(ge=0, le=255)
    g: float = Field(ge=0, le=255)
    b: float = Field(ge=0, le=255)


class Oklab(_Color):
    l: float
    a: float
    b: float


class Oklch(_Color):
    l: float
    c: float
    h: float


ParsedColor = Union[Hsl, Rgb, Oklab, Oklch]


def with_alpha(color: ParsedColor, alpha: Optional[float]) -> ParsedColor:
    """Return a copy of color carrying alpha (None clears it)."""
    if alpha is not None:
        alpha = clamp(alpha, 0.0, 1.0)
    return color.model_copy(update={"alpha": alpha})


class LineResult(BaseModel):
    """Outcome of converting one input line."""

    model_config = ConfigDict(frozen=True)

    original: str
    converted: Optional[str] = None
    detected_format: Optional[ColorFormat] = None
