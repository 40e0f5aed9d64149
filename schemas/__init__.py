from .requests import ColorConvertRequest, ColorDetectRequest, ColorLinesRequest
from .responses import SuccessResponse, ErrorResponse, LinesResponse

__all__ = [
    "ColorConvertRequest",
    "ColorDetectRequest",
    "ColorLinesRequest",
    "SuccessResponse",
    "ErrorResponse",
    "LinesResponse",
]
