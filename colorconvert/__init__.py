from .colormath import ColorMath, CssColorMath
from .converter import ConversionResult, Converter, convert_color
from .cssvar import CssVariableWrapper, unwrap_css_variable
from .detect import detect_color_format, infer_bare_triple_format
from .errors import (
    ColorError,
    ColorErrorKind,
    ComponentCountError,
    MalformedColorError,
    UndetectableFormatError,
    UnsupportedConversionError,
)
from .formatter import format_color, format_hex
from .models import ColorFormat, Hsl, LineResult, Oklab, Oklch, ParsedColor, Rgb, with_alpha
from .multiline import process_multi_line_input, render_output
from .validate import validate_component_count

__all__ = [
    "ColorError",
    "ColorErrorKind",
    "ColorFormat",
    "ColorMath",
    "ComponentCountError",
    "ConversionResult",
    "Converter",
    "CssColorMath",
    "CssVariableWrapper",
    "Hsl",
    "LineResult",
    "MalformedColorError",
    "Oklab",
    "Oklch",
    "ParsedColor",
    "Rgb",
    "UndetectableFormatError",
    "UnsupportedConversionError",
    "convert_color",
    "detect_color_format",
    "format_color",
    "format_hex",
    "infer_bare_triple_format",
    "process_multi_line_input",
    "render_output",
    "unwrap_css_variable",
    "validate_component_count",
    "with_alpha",
]
