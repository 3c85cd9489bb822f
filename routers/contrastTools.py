import logging

from fastapi import APIRouter

from color_core import (
    ContrastReport,
    evaluate_contrast,
    find_accessible_text_lightness,
    oklch_to_srgb,
    parse_color_literal,
)
from schemas import ContrastRequest

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/compute_contrast", response_model=ContrastReport, operation_id="compute_contrast", description="APCA Lc and WCAG 2.x contrast of a text color on a background color, optionally with a suggested accessible text lightness")
async def compute_contrast(request: ContrastRequest):
    """Alpha is ignored: both colors are treated as opaque."""
    text = parse_color_literal(request.text_color)
    bg = parse_color_literal(request.background_color)
    report = evaluate_contrast(oklch_to_srgb(text.L, text.C, text.H), oklch_to_srgb(bg.L, bg.C, bg.H))
    logger.debug("Contrast %s on %s: Lc %.1f, ratio %.2f", request.text_color, request.background_color, report.apca_lc, report.wcag_ratio)
    if request.target_lc is not None:
        suggestion = find_accessible_text_lightness(bg.L, bg.C, bg.H, request.target_lc)
        report = report.model_copy(update={"text_suggestion": suggestion})
    return report
