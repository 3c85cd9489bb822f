from .contrast import (
    APCA_THRESHOLDS,
    apca_description,
    compute_apca,
    compute_wcag,
    evaluate_contrast,
    find_accessible_text_lightness,
    wcag_level,
)
from .conversion import (
    clamp_srgb,
    hsl_to_srgb,
    is_in_srgb_gamut,
    oklab_to_oklch,
    oklch_to_hex,
    oklch_to_oklab,
    oklch_to_srgb,
    srgb_to_oklch,
)
from .formatting import color_presentation, convert_all_colors, format_oklch, replace_color_at_offset
from .models import AccessibleTextSuggestion, ContrastReport, CssColorMatch, OklchFormatOptions, WcagLevel
from .scanner import (
    find_all_colors,
    find_color_at_offset,
    find_oklch_at_offset,
    find_oklch_colors,
    find_property_context,
    parse_color_literal,
)

# Short names used by editor integrations
scan_at = find_color_at_offset
scan_all = find_all_colors
property_name_before = find_property_context
apca = compute_apca
apca_label = apca_description
wcag = compute_wcag

__all__ = [
    "APCA_THRESHOLDS",
    "AccessibleTextSuggestion",
    "ContrastReport",
    "CssColorMatch",
    "OklchFormatOptions",
    "WcagLevel",
    "apca",
    "apca_description",
    "apca_label",
    "clamp_srgb",
    "color_presentation",
    "compute_apca",
    "compute_wcag",
    "convert_all_colors",
    "evaluate_contrast",
    "find_accessible_text_lightness",
    "find_all_colors",
    "find_color_at_offset",
    "find_oklch_at_offset",
    "find_oklch_colors",
    "find_property_context",
    "format_oklch",
    "hsl_to_srgb",
    "is_in_srgb_gamut",
    "oklab_to_oklch",
    "oklch_to_hex",
    "oklch_to_oklab",
    "oklch_to_srgb",
    "parse_color_literal",
    "property_name_before",
    "replace_color_at_offset",
    "scan_all",
    "scan_at",
    "srgb_to_oklch",
    "wcag",
    "wcag_level",
]
