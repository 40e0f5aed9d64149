"""
Regular expression patterns shared by the parser, detector and validator.
"""

import re
from typing import List

ws = r"\s*"
num = r"[+-]?(?:\d+(?:\.\d+)?|\.\d+)"
unit = r"(?:%|deg|grad|rad|turn)?"
token = f"(?:{num}{unit}|none)"
# components may be separated by whitespace, a comma or a slash
sep = r"(?:\s*[,/]\s*|\s+)"

HEX_RE = re.compile(r"^#?([0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$", re.IGNORECASE)

FUNCTION_RE = re.compile(
    f"^(rgba?|hsla?|oklab|oklch){ws}\\({ws}({token}){sep}({token}){sep}({token})(?:{sep}({token}))?{ws}\\)$",
    re.IGNORECASE
)

BARE_RE = re.compile(
    f"^({token}){sep}({token}){sep}({token})(?:{sep}({token}))?$",
    re.IGNORECASE
)

BARE_TRIPLE_RE = re.compile(f"^({num})\\s+({num})\\s+({num})$")

NUMERIC_TOKEN_RE = re.compile(f"^({num}){unit}$", re.IGNORECASE)

PREFIX_RE = re.compile(r"^(rgba?|hsla?|oklab|oklch)\s*\(", re.IGNORECASE)

RAW_HSL_RE = re.compile(r"^(\d+\.?\d*)\s+(\d+\.?\d*)%\s+(\d+\.?\d*)%$")
RAW_HSL_ALPHA_RE = re.compile(r"^(\d+\.?\d*)\s+(\d+\.?\d*)%\s+(\d+\.?\d*)%\s*/\s*(\d+(?:\.\d+)?)%$")

PERCENT_ALPHA_RE = re.compile(
    r"^(oklch|oklab|rgba?|hsla?)\((.+?)\s*/\s*(\d+(?:\.\d+)?)%\)$",
    re.IGNORECASE
)

LEGACY_ALPHA_RE = re.compile(r"^(rgba?|hsla?)\((.+?),\s*(\d*\.\d+|\d+)\)$", re.IGNORECASE)

SLASH_PERCENT_RE = re.compile(r"/\s*(\d+(?:\.\d+)?)%\s*\)?$")

CSS_VARIABLE_RE = re.compile(r"^(--[\w-]+):\s*(.+?)\s*(;?)$")


def split_components(value: str) -> List[str]:
    """Strip a function prefix and parentheses and split the remaining components."""
    cleaned = PREFIX_RE.sub("", value.strip())
    cleaned = re.sub(r"\)$", "", cleaned).strip()
    return [part for part in re.split(r"[\s,/]+", cleaned) if part]


def numeric_components(value: str) -> List[str]:
    """Return the components of value that read as numbers once units are removed."""
    return [part for part in split_components(value) if NUMERIC_TOKEN_RE.match(part)]
