"""
Color conversion endpoints with OKLCH as the hub.
Accepted CSS input: oklch, oklab, rgb/rgba, hsl/hsla, hex 3/4/6/8, named.
Numeric endpoints return unclamped channels; clamping is left to the caller.
"""

import logging

from fastapi import APIRouter, Depends

from color_core import (
    format_oklch,
    hsl_to_srgb,
    is_in_srgb_gamut,
    oklab_to_oklch,
    oklch_to_hex,
    oklch_to_srgb,
    parse_color_literal,
    srgb_to_oklch,
)
from config import Settings, get_settings
from schemas import (
    ColorConvertRequest,
    HslRequest,
    OklabRequest,
    OklchRequest,
    OklchResponse,
    OklchToSrgbResponse,
    SrgbRequest,
    SrgbResponse,
    SuccessResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/convert_color_code", response_model=SuccessResponse, operation_id="convert_color_code", description="Convert a CSS color code to an oklch() literal or #rrggbb hex (#rrggbbaa when translucent)")
async def parse_and_convert(request: ColorConvertRequest, settings: Settings = Depends(get_settings)):
    """Parse CSS color and convert to target format."""
    # the request validator guarantees a single literal
    match = parse_color_literal(request.code)
    logger.debug("Converting %s color %r to %s", match.original_format, request.code, request.target)

    if request.target == "hex":
        return SuccessResponse(message=oklch_to_hex(match.L, match.C, match.H, match.alpha))
    options = request.format_options or settings.format_options()
    return SuccessResponse(message=format_oklch(match.L, match.C, match.H, match.alpha, options))


@router.post("/oklch_to_srgb", response_model=OklchToSrgbResponse, operation_id="oklch_to_srgb", description="Convert OKLCH to sRGB, with hex and a gamut check")
async def oklch_to_srgb_endpoint(request: OklchRequest):
    r, g, b = oklch_to_srgb(request.L, request.C, request.H)
    return OklchToSrgbResponse(
        r=r,
        g=g,
        b=b,
        hex=oklch_to_hex(request.L, request.C, request.H),
        in_gamut=is_in_srgb_gamut(request.L, request.C, request.H),
    )


@router.post("/srgb_to_oklch", response_model=OklchResponse, operation_id="srgb_to_oklch", description="Convert sRGB (0-1 channels) to OKLCH")
async def srgb_to_oklch_endpoint(request: SrgbRequest, settings: Settings = Depends(get_settings)):
    L, C, H = srgb_to_oklch(request.r, request.g, request.b)
    return OklchResponse(L=L, C=C, H=H, literal=format_oklch(L, C, H, options=settings.format_options()))


@router.post("/hsl_to_srgb", response_model=SrgbResponse, operation_id="hsl_to_srgb", description="Convert HSL (hue in degrees, s and l in 0-1) to sRGB")
async def hsl_to_srgb_endpoint(request: HslRequest):
    r, g, b = hsl_to_srgb(request.h, request.s, request.l)
    return SrgbResponse(r=r, g=g, b=b)


@router.post("/oklab_to_oklch", response_model=OklchResponse, operation_id="oklab_to_oklch", description="Convert OKLab to OKLCH")
async def oklab_to_oklch_endpoint(request: OklabRequest, settings: Settings = Depends(get_settings)):
    L, C, H = oklab_to_oklch(request.L, request.a, request.b)
    return OklchResponse(L=L, C=C, H=H, literal=format_oklch(L, C, H, options=settings.format_options()))
