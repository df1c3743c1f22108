from .requests import ColorAdjustRequest, ColorConvertRequest, ColorMixRequest, ContrastRequest
from .responses import SuccessResponse, ErrorResponse

__all__ = [
    "ColorConvertRequest",
    "ColorAdjustRequest",
    "ColorMixRequest",
    "ContrastRequest",
    "SuccessResponse",
    "ErrorResponse",
]
