"""
Write colors back out as oklch() literals and rewrite literals inside text.
Everything produced here is read back by the scanner to the same color,
within the printed precision.
"""

import logging
from typing import Optional, Tuple

from .conversion import srgb_to_oklch
from .models import OklchFormatOptions
from .scanner import find_all_colors, find_color_at_offset
from .tokens import CHROMA_PERCENT_SCALE

logger = logging.getLogger(__name__)


def _trim(value: float, decimals: int) -> str:
    """Fixed-point format without trailing zeros: 0.7000 -> 0.7, 180.00 -> 180."""
    s = f"{value:.{decimals}f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return "0" if s == "-0" else s


def format_oklch(
    L: float,
    C: float,
    H: float,
    alpha: float = 1.0,
    options: Optional[OklchFormatOptions] = None,
) -> str:
    """Format an OKLCH color as a CSS oklch() string; alpha is omitted when opaque."""
    opts = options or OklchFormatOptions()

    if opts.lightness_format == "percentage":
        l_str = f"{_trim(L * 100, 2)}%"
    else:
        l_str = _trim(L, 4)

    if opts.chroma_format == "percentage":
        c_str = f"{_trim(C / CHROMA_PERCENT_SCALE * 100, 2)}%"
    else:
        c_str = _trim(C, 4)

    h_str = _trim(H, 2)
    if opts.hue_format == "deg":
        h_str += "deg"

    if alpha < 1:
        if opts.alpha_format == "percentage":
            a_str = f"{_trim(alpha * 100, 0)}%"
        else:
            a_str = _trim(alpha, 2)
        return f"oklch({l_str} {c_str} {h_str} / {a_str})"
    return f"oklch({l_str} {c_str} {h_str})"


def color_presentation(r: float, g: float, b: float, alpha: float = 1.0) -> str:
    """oklch() literal for an sRGB color, in plain number format."""
    L, C, H = srgb_to_oklch(r, g, b)
    return format_oklch(L, C, H, alpha)


def replace_color_at_offset(
    text: str,
    offset: int,
    L: float,
    C: float,
    H: float,
    alpha: float = 1.0,
    options: Optional[OklchFormatOptions] = None,
) -> Optional[str]:
    """Replace the color literal under offset with an oklch() literal; None if there is none."""
    match = find_color_at_offset(text, offset)
    if match is None:
        return None
    literal = format_oklch(L, C, H, alpha, options)
    return text[:match.start_offset] + literal + text[match.end_offset:]


def convert_all_colors(text: str, options: Optional[OklchFormatOptions] = None) -> Tuple[str, int]:
    """
    Rewrite every color literal in text as oklch(), existing oklch() included.

    Returns the new text and the number of literals rewritten. A match that
    overlaps one already rewritten is left alone.
    """
    pieces = []
    cursor = 0
    count = 0
    for m in find_all_colors(text):
        if m.start_offset < cursor:
            logger.debug("Skipping %s color at %d overlapping a previous match", m.original_format, m.start_offset)
            continue
        pieces.append(text[cursor:m.start_offset])
        pieces.append(format_oklch(m.L, m.C, m.H, m.alpha, options))
        cursor = m.end_offset
        count += 1
    pieces.append(text[cursor:])
    return "".join(pieces), count
