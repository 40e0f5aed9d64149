"""
Single-value conversion between hex, hsl, oklab, oklch and rgb.

Pipeline: unwrap a CSS variable, rewrite raw HSL, read alpha from the text,
normalize percentage alpha, resolve ``auto``, check arity, parse, transform,
attach alpha, format, re-wrap. Each failing step raises a ``ColorError``;
``Converter.run`` turns it into a ``ConversionResult`` so no exception
raised while converting reaches the caller.
"""

import logging
from typing import Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict

from .colormath import ColorMath, CssColorMath
from .cssvar import unwrap_css_variable
from .detect import detect_color_format, rewrite_raw_hsl
from .errors import (
    ColorError,
    ColorErrorKind,
    ComponentCountError,
    UndetectableFormatError,
    UnsupportedConversionError,
)
from .formatter import format_color, format_hex
from .models import ColorFormat, with_alpha
from .numeric import extract_alpha, normalize_percent_alpha
from .validate import validate_component_count

logger = logging.getLogger(__name__)

FormatLike = Union[ColorFormat, str]


class ConversionResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: Optional[str] = None
    source_format: Optional[ColorFormat] = None
    error: Optional[ColorErrorKind] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.value is not None


class Converter:
    """Convert color text using an injected ColorMath."""

    def __init__(self, color_math: Optional[ColorMath] = None):
        self.color_math = color_math or CssColorMath()

    def detect(self, text: str) -> Optional[ColorFormat]:
        return detect_color_format(text, self.color_math)

    def convert(
        self,
        text: str,
        source: FormatLike,
        target: FormatLike,
        simplified: bool = False,
        use_commas: bool = False,
    ) -> Optional[str]:
        """Convert text, or return None when it cannot be converted."""
        return self.run(text, source, target, simplified, use_commas).value

    def run(
        self,
        text: str,
        source: FormatLike,
        target: FormatLike,
        simplified: bool = False,
        use_commas: bool = False,
    ) -> ConversionResult:
        source = ColorFormat(source)
        target = ColorFormat(target)
        try:
            value, resolved = self._convert(text, source, target, simplified, use_commas)
        except ColorError as exc:
            logger.debug("Cannot convert %r (%s): %s", text, exc.kind.value, exc)
            return ConversionResult(error=exc.kind, message=str(exc))
        except Exception as exc:
            # injected ColorMath implementations may raise anything
            logger.debug("Error in color conversion of %r", text, exc_info=True)
            return ConversionResult(error=ColorErrorKind.MALFORMED, message=str(exc))
        return ConversionResult(value=value, source_format=resolved)

    def _resolve_source(self, value: str, source: ColorFormat) -> Tuple[ColorFormat, bool]:
        """Return the concrete source format and whether it is the hex fallback."""
        if source is not ColorFormat.AUTO:
            return source, False
        detected = self.detect(value)
        if detected is None:
            return ColorFormat.HEX, True
        return detected, False

    def _convert(
        self,
        text: str,
        source: ColorFormat,
        target: ColorFormat,
        simplified: bool,
        use_commas: bool,
    ) -> Tuple[str, ColorFormat]:
        if target is ColorFormat.AUTO:
            raise UnsupportedConversionError("target format must be concrete")

        value, wrapper = unwrap_css_variable(text)

        raw_hsl = rewrite_raw_hsl(value)
        if raw_hsl is not None:
            value = raw_hsl
            if source is ColorFormat.AUTO:
                source = ColorFormat.HSL

        string_alpha = extract_alpha(value)
        processed = normalize_percent_alpha(value)

        source, fallback = self._resolve_source(processed, source)
        if not validate_component_count(processed, source):
            if fallback:
                raise UndetectableFormatError(f"unrecognized color format: {value!r}")
            raise ComponentCountError(f"wrong number of components for {source.value}: {value!r}")

        parsed = self.color_math.parse(processed, source)
        alpha = parsed.alpha if parsed.alpha is not None else string_alpha

        result = with_alpha(self.color_math.transform(parsed, target), alpha)
        if target is ColorFormat.HEX:
            formatted = format_hex(self.color_math.to_hex(result), result.alpha)
        else:
            formatted = format_color(result, simplified, use_commas)

        if wrapper is not None:
            formatted = wrapper.wrap(formatted)
        return formatted, source


def convert_color(
    text: str,
    source: FormatLike,
    target: FormatLike,
    simplified: bool = False,
    use_commas: bool = False,
) -> Optional[str]:
    """Convert one color string; None when it is not a recognizable color."""
    return Converter().convert(text, source, target, simplified, use_commas)
