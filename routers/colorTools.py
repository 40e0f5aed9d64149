"""
Color conversion endpoints.
Each route carries an operation_id so the MCP mount exposes it as a tool.
Supported formats: hex 3/4/6/8, rgb/rgba, hsl/hsla (incl. raw "H S% L%"),
oklab, oklch, bare component triples and --css-variable: <color>; lines.
"""

import logging

from fastapi import APIRouter, HTTPException

from colorconvert import Converter, process_multi_line_input, render_output
from schemas.requests import (
    ColorConvertRequest,
    ColorDetectRequest,
    ColorLinesRequest,
)
from schemas.responses import ErrorResponse, LinesResponse, SuccessResponse

logger = logging.getLogger(__name__)

router = APIRouter()
converter = Converter()


def _bad_request(error: str, detail: str) -> HTTPException:
    return HTTPException(
        status_code=400,
        detail=ErrorResponse(error=error, detail=detail).model_dump(),
    )


@router.post("/convert_color_code", response_model=SuccessResponse, operation_id="convert_color_code", description="Convert a color code to a target format, detecting the source format when source is auto")
async def convert_color_code(request: ColorConvertRequest):
    """Convert a single color code."""
    result = converter.run(
        request.code,
        request.source,
        request.target,
        simplified=request.simplified,
        use_commas=request.use_commas,
    )
    if not result.ok:
        raise _bad_request(result.error.value, result.message or "Invalid color code")
    return SuccessResponse(success=True, message=result.value, source_format=result.source_format)


@router.post("/detect_color_format", response_model=SuccessResponse, operation_id="detect_color_format", description="Detect whether a color code is hex, hsl, oklab, oklch or rgb")
async def detect_color_format(request: ColorDetectRequest):
    """Detect the format of a color code."""
    detected = converter.detect(request.code)
    if detected is None:
        raise _bad_request("undetected", "Unrecognized color format")
    return SuccessResponse(success=True, message=detected.value, source_format=detected)


@router.post("/convert_color_lines", response_model=LinesResponse, operation_id="convert_color_lines", description="Convert newline separated color codes, keeping indentation and leaving unrecognized lines unchanged")
async def convert_color_lines(request: ColorLinesRequest):
    """Convert a block of color codes line by line."""
    lines = process_multi_line_input(
        request.text,
        request.source,
        request.target,
        simplified=request.simplified,
        use_commas=request.use_commas,
        converter=converter,
    )
    failed = sum(1 for line in lines if line.original.strip() and line.converted is None)
    if failed:
        logger.debug("%d of %d lines left unconverted", failed, len(lines))
    return LinesResponse(success=True, lines=lines, output=render_output(lines))
