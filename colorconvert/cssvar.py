"""
CSS custom property envelopes: ``--name: <color>;``.

The trailing ``;`` is put back only when the input line carried one, so an
unterminated declaration stays unterminated after conversion.
"""

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict

from .patterns import CSS_VARIABLE_RE


class CssVariableWrapper(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    terminated: bool = True

    def wrap(self, value: str) -> str:
        """Put value back inside the envelope."""
        return f"{self.name}: {value}{';' if self.terminated else ''}"


def unwrap_css_variable(text: str) -> Tuple[str, Optional[CssVariableWrapper]]:
    """Split ``--name: value;`` into the value and its envelope."""
    text = text.strip()
    m = CSS_VARIABLE_RE.match(text)
    if not m:
        return text, None
    name, value, semicolon = m.groups()
    return value.strip(), CssVariableWrapper(name=name, terminated=bool(semicolon))
