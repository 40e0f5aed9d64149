from pydantic import BaseModel, Field
from typing import List, Optional

from colorconvert import ColorFormat, LineResult


class SuccessResponse(BaseModel):
    success: bool = True
    message: Optional[str] = Field(None, description="The converted color code or detected format")
    source_format: Optional[ColorFormat] = Field(None, description="The format the input was read as")


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
    detail: Optional[str] = None


class LinesResponse(BaseModel):
    success: bool = True
    lines: List[LineResult] = Field(default_factory=list, description="One entry per input line, in order")
    output: str = Field("", description="Converted text; lines that failed are kept verbatim")
