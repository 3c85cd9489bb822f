from .requests import (
    ColorConvertRequest,
    ContrastRequest,
    ConvertAllRequest,
    HslRequest,
    OklabRequest,
    OklchRequest,
    ReplaceColorRequest,
    SrgbRequest,
    TextOffsetRequest,
    TextRequest,
)
from .responses import (
    OklchResponse,
    OklchToSrgbResponse,
    RewriteResponse,
    ScanAllResponse,
    ScanAtResponse,
    SrgbResponse,
    SuccessResponse,
)

__all__ = [
    "ColorConvertRequest",
    "ContrastRequest",
    "ConvertAllRequest",
    "HslRequest",
    "OklabRequest",
    "OklchRequest",
    "OklchResponse",
    "OklchToSrgbResponse",
    "ReplaceColorRequest",
    "RewriteResponse",
    "ScanAllResponse",
    "ScanAtResponse",
    "SrgbRequest",
    "SrgbResponse",
    "SuccessResponse",
    "TextOffsetRequest",
    "TextRequest",
]
