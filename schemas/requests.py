from pydantic import BaseModel, Field
from typing import Literal

from colorconvert import ColorFormat

TargetFormat = Literal["hex", "hsl", "oklab", "oklch", "rgb"]


class ColorConvertRequest(BaseModel):
    code: str = Field(..., description="The color code to convert, optionally wrapped as --name: <color>;")
    source: ColorFormat = Field(ColorFormat.AUTO, description="The format of the color code, or auto to detect it")
    target: TargetFormat = Field(..., description="The target color code format to convert to")
    simplified: bool = Field(False, description="Output bare components without the format name")
    use_commas: bool = Field(False, description="Separate components with commas instead of spaces")


class ColorDetectRequest(BaseModel):
    code: str = Field(..., description="The color code whose format should be detected")


class ColorLinesRequest(BaseModel):
    text: str = Field(..., description="Newline separated color codes")
    source: ColorFormat = Field(ColorFormat.AUTO, description="The format of every line, or auto to detect per line")
    target: TargetFormat = Field(..., description="The target color code format to convert to")
    simplified: bool = Field(False, description="Output bare components without the format name")
    use_commas: bool = Field(False, description="Separate components with commas instead of spaces")
