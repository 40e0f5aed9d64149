"""
Line-by-line conversion of pasted color lists.
"""

from typing import Iterable, List, Optional

from .converter import Converter, FormatLike
from .models import ColorFormat, LineResult


def _leading_whitespace(line: str) -> str:
    return line[: len(line) - len(line.lstrip())]


def process_multi_line_input(
    text: str,
    source: FormatLike,
    target: FormatLike,
    simplified: bool = False,
    use_commas: bool = False,
    converter: Optional[Converter] = None,
) -> List[LineResult]:
    """
    Convert every line of text.

    Returns one LineResult per ``\\n``-separated line, in input order. Blank
    lines and lines that fail to convert have ``converted=None``. Converted
    lines keep the leading whitespace of their input line.
    """
    converter = converter or Converter()
    source = ColorFormat(source)
    results = []
    for line in text.split("\n"):
        trimmed = line.strip()
        if not trimmed:
            results.append(LineResult(original=line))
            continue

        detected = converter.detect(trimmed) if source is ColorFormat.AUTO else None
        converted = converter.convert(trimmed, source, target, simplified, use_commas)
        if converted is not None:
            converted = _leading_whitespace(line) + converted
        results.append(LineResult(original=line, converted=converted, detected_format=detected))
    return results


def render_output(results: Iterable[LineResult]) -> str:
    """Join results back into text, keeping the original of any failed line."""
    return "\n".join(r.converted if r.converted is not None else r.original for r in results)
