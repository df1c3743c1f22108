"""
Color tool endpoints: conversion, adjustment, mixing and contrast.
All parsing and color math lives in colorproc; this module only maps
requests onto it.
"""

import logging
from typing import Callable, Dict, Optional

from fastapi import HTTPException, APIRouter

from colorproc import Color, ParseError, parse
from schemas.requests import (
    ColorAdjustRequest,
    ColorConvertRequest,
    ColorMixRequest,
    ContrastRequest,
)
from schemas.responses import ErrorResponse, SuccessResponse

logger = logging.getLogger(__name__)

TARGET_FORMATTERS: Dict[str, Callable[[Color], Optional[str]]] = {
    "hex": Color.to_hex_string,
    "hexa": Color.to_hexa_string,
    "rgb": Color.to_rgb_string,
    "rgba": Color.to_rgba_string,
    "hsl": Color.to_hsl_string,
    "hsla": Color.to_hsla_string,
    "hsv": Color.to_hsv_string,
    "hsva": Color.to_hsva_string,
    "hwb": Color.to_hwb_string,
    "hwba": Color.to_hwba_string,
    "cmyk": Color.to_cmyk_string,
    "cmyka": Color.to_cmyka_string,
    "gray": Color.to_gray_string,
    "lab": Color.to_lab_string,
    "laba": Color.to_laba_string,
    "lch": Color.to_lch_string,
    "lcha": Color.to_lcha_string,
    "temperature": Color.to_temperature_string,
    "number": lambda color: str(color.to_numeric_code()),
    "named": Color.to_name,
}


def parse_or_400(code: str) -> Color:
    """Parse a color string, turning parse failures into a 400."""
    try:
        return parse(code)
    except ParseError as exc:
        logger.warning("Rejected color %r: %s", code, exc)
        raise HTTPException(
            status_code=400,
            detail=ErrorResponse(error=str(exc), kind=exc.kind.value).model_dump(),
        )


router = APIRouter()


@router.post("/convert_color_code", response_model=SuccessResponse, operation_id="convert_color_code", description="Convert a color string to a target format")
async def parse_and_convert(request: ColorConvertRequest):
    """Parse a color string and convert it to the target format."""
    color = parse_or_400(request.code)
    logger.info("Converting %r to %s", request.code, request.target)
    return SuccessResponse(
        success=True,
        message=TARGET_FORMATTERS[request.target](color),
        data={"rgba": list(color.to_rgba())},
    )


@router.post("/adjust_color", response_model=SuccessResponse, operation_id="adjust_color", description="Apply a grayscale, invert, darken/brighten or colorize adjustment")
async def adjust_color(request: ColorAdjustRequest):
    color = parse_or_400(request.code)
    logger.info("Adjusting %r with %s", request.code, request.operation)
    if request.operation in ("darken", "brighten"):
        adjusted = getattr(color, request.operation)(request.amount)
    elif request.operation == "colorize":
        if request.hue is None:
            raise HTTPException(status_code=400, detail="colorize requires a hue")
        adjusted = color.colorize(request.hue)
    else:
        adjusted = getattr(color, request.operation)()
    return SuccessResponse(success=True, message=adjusted.to_rgba_string(), data={"hex": adjusted.to_hexa_string()})


@router.post("/mix_colors", response_model=SuccessResponse, operation_id="mix_colors", description="Mix two colors additively/subtractively or interpolate between them")
async def mix_colors(request: ColorMixRequest):
    first = parse_or_400(request.first)
    second = parse_or_400(request.second)
    logger.info("Mixing %r and %r (%s)", request.first, request.second, request.mode)
    if request.mode == "additive":
        mixed = first.mix_additive(second)
    elif request.mode == "subtractive":
        mixed = first.mix_subtractive(second)
    else:
        mixed = first.interpolate(second, request.fraction, request.mode)
    return SuccessResponse(success=True, message=mixed.to_rgba_string(), data={"hex": mixed.to_hexa_string()})


@router.post("/contrast", response_model=SuccessResponse, operation_id="contrast", description="WCAG contrast ratio between two colors")
async def contrast(request: ContrastRequest):
    first = parse_or_400(request.first)
    second = parse_or_400(request.second)
    ratio = first.get_contrast(second)
    return SuccessResponse(
        success=True,
        message=f"{ratio:.2f}",
        data={
            "ratio": round(ratio, 2),
            "first_luminance": first.get_luminance(),
            "second_luminance": second.get_luminance(),
        },
    )
