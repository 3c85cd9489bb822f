"""
Text scanning endpoints: point queries, bulk scans and in-place rewrites
of CSS color literals.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from color_core import convert_all_colors, find_all_colors, find_color_at_offset, find_property_context, replace_color_at_offset
from config import Settings, get_settings
from schemas import (
    ConvertAllRequest,
    ReplaceColorRequest,
    RewriteResponse,
    ScanAllResponse,
    ScanAtResponse,
    TextOffsetRequest,
    TextRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/find_color_at_offset", response_model=ScanAtResponse, operation_id="find_color_at_offset", description="Find the CSS color literal under a character offset and the property it belongs to")
async def find_color_at_offset_endpoint(request: TextOffsetRequest):
    match = find_color_at_offset(request.text, request.offset)
    if match is None:
        return ScanAtResponse()
    return ScanAtResponse(match=match, property_name=find_property_context(request.text, match.start_offset))


@router.post("/find_all_colors", response_model=ScanAllResponse, operation_id="find_all_colors", description="Find every CSS color literal in a text, sorted by offset")
async def find_all_colors_endpoint(request: TextRequest):
    matches = find_all_colors(request.text)
    logger.debug("Found %d colors in %d characters", len(matches), len(request.text))
    return ScanAllResponse(matches=matches, count=len(matches))


@router.post("/replace_color_at_offset", response_model=RewriteResponse, operation_id="replace_color_at_offset", description="Replace the CSS color under a character offset with an oklch() literal")
async def replace_color_at_offset_endpoint(request: ReplaceColorRequest, settings: Settings = Depends(get_settings)):
    options = request.format_options or settings.format_options()
    text = replace_color_at_offset(request.text, request.offset, request.L, request.C, request.H, request.alpha, options)
    if text is None:
        logger.warning("No CSS color at offset %d", request.offset)
        raise HTTPException(status_code=400, detail="No CSS color value found at offset")
    return RewriteResponse(text=text, replacements=1)


@router.post("/convert_all_colors", response_model=RewriteResponse, operation_id="convert_all_colors", description="Rewrite every CSS color literal in a text as oklch()")
async def convert_all_colors_endpoint(request: ConvertAllRequest, settings: Settings = Depends(get_settings)):
    options = request.format_options or settings.format_options()
    text, count = convert_all_colors(request.text, options)
    return RewriteResponse(text=text, replacements=count)
