from pydantic import BaseModel, Field
from typing import Literal, Optional

ConvertTarget = Literal[
    "hex", "hexa", "rgb", "rgba", "hsl", "hsla", "hsv", "hsva", "hwb", "hwba",
    "cmyk", "cmyka", "gray", "lab", "laba", "lch", "lcha", "temperature", "number", "named",
]

AdjustOperation = Literal[
    "grayscale", "grayscale_average", "grayscale_hdtv", "grayscale_hdr", "monochrome",
    "invert", "invert_luminescence", "darken", "brighten", "colorize",
]

MixMode = Literal["additive", "subtractive", "rgb", "hsl", "hsv", "hwb", "lch"]


class ColorConvertRequest(BaseModel):
    code: str = Field(..., description="The color string to convert (name, hex, rgb(), hsl(), cmyk(), ...)")
    target: ConvertTarget = Field(..., description="The target color code format to convert to")


class ColorAdjustRequest(BaseModel):
    code: str = Field(..., description="The color string to adjust")
    operation: AdjustOperation = Field(..., description="The adjustment to apply")
    amount: float = Field(0.1, ge=0.0, le=1.0, description="Strength for darken/brighten, 0-1")
    hue: Optional[float] = Field(None, description="Target hue in degrees, required for colorize")


class ColorMixRequest(BaseModel):
    first: str = Field(..., description="The first color string")
    second: str = Field(..., description="The second color string")
    mode: MixMode = Field(..., description="additive/subtractive mixing or the interpolation space")
    fraction: float = Field(0.5, ge=0.0, le=1.0, description="Interpolation position, 0 = first, 1 = second")


class ContrastRequest(BaseModel):
    first: str = Field(..., description="The first color string")
    second: str = Field(..., description="The second color string")
