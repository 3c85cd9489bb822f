"""
APCA and WCAG 2.x contrast between sRGB colors.

APCA (Accessible Perceptual Contrast Algorithm), APCA-W3 0.0.98G-4g constants:
https://github.com/Myndex/SAPC-APCA. Polarity aware: positive Lc is dark text
on a light background, negative Lc is light text on a dark background.

WCAG 2.x contrast ratio: https://www.w3.org/TR/WCAG21/#dfn-contrast-ratio
Symmetric, always within [1, 21].

find_accessible_text_lightness binary-searches the lightness of a muted text
color that reaches a target APCA Lc on a given background.
"""

import math
from typing import Tuple

from .conversion import Triple, clamp_srgb, oklch_to_srgb, srgb_to_linear
from .models import AccessibleTextSuggestion, ContrastReport, Srgb, WcagLevel

# APCA constants
APCA_MAIN_TRC = 2.4
APCA_COEFFS = (0.2126729, 0.7151522, 0.072175)
APCA_BLACK_THRESHOLD = 0.022
APCA_BLACK_CLAMP_EXP = 1.414
APCA_NORMAL_BG, APCA_NORMAL_TEXT = 0.56, 0.57
APCA_REVERSE_BG, APCA_REVERSE_TEXT = 0.65, 0.62
APCA_SCALE = 1.14
APCA_OFFSET = 0.027
APCA_LOW_CLIP = 0.1

APCA_THRESHOLDS: Tuple[Tuple[float, str], ...] = (
    (90, "Preferred body text"),
    (75, "Body text (18px+)"),
    (60, "Content text / 16px bold"),
    (45, "Headlines / large text"),
    (30, "Spot text / minimum"),
    (15, "Non-text only"),
)
APCA_UNREADABLE = "Not readable"

# WCAG constants
WCAG_COEFFS = (0.2126, 0.7152, 0.0722)
WCAG_LUMINANCE_OFFSET = 0.05
WCAG_AA_NORMAL = 4.5
WCAG_AAA_NORMAL = 7.0
WCAG_AA_LARGE = 3.0
WCAG_AAA_LARGE = 4.5

# Accessible text search
TEXT_SEARCH_STEPS = 32
TEXT_CHROMA_SCALE = 0.3
TEXT_MAX_CHROMA = 0.03
LIGHT_BACKGROUND_Y = 0.2


def _apca_linearize(c: float) -> float:
    # APCA uses a plain 2.4 power curve, not the piecewise sRGB transfer
    try:
        return max(c, 0.0) ** APCA_MAIN_TRC
    except OverflowError:
        return math.inf


def _apca_luminance(rgb: Triple) -> float:
    y = sum(k * _apca_linearize(c) for k, c in zip(APCA_COEFFS, rgb))
    if y < APCA_BLACK_THRESHOLD:
        y += (APCA_BLACK_THRESHOLD - y) ** APCA_BLACK_CLAMP_EXP
    return y


def compute_apca(text: Triple, bg: Triple) -> float:
    """
    Compute APCA contrast (Lc) of text on a background, both sRGB in [0, 1].

    Swapping the arguments does not simply negate the result. Contrast below
    the low clip (|Lc| < 10) reads as 0.
    """
    y_text = _apca_luminance(text)
    y_bg = _apca_luminance(bg)

    if y_bg > y_text:
        sapc = y_bg ** APCA_NORMAL_BG - y_text ** APCA_NORMAL_TEXT
        lc = sapc * APCA_SCALE - APCA_OFFSET
    else:
        sapc = y_bg ** APCA_REVERSE_BG - y_text ** APCA_REVERSE_TEXT
        lc = sapc * APCA_SCALE + APCA_OFFSET

    if abs(lc) < APCA_LOW_CLIP:
        return 0.0
    return lc * 100


def apca_description(lc: float) -> str:
    """Describe what an APCA Lc value is good for. Sign is ignored."""
    magnitude = abs(lc)
    for threshold, label in APCA_THRESHOLDS:
        if magnitude >= threshold:
            return label
    return APCA_UNREADABLE


def relative_luminance(rgb: Triple) -> float:
    """WCAG relative luminance of a gamma-encoded sRGB triple."""
    return sum(k * srgb_to_linear(c) for k, c in zip(WCAG_COEFFS, rgb))


def compute_wcag(c1: Triple, c2: Triple) -> float:
    """Compute the WCAG 2.x contrast ratio between two sRGB colors."""
    y1 = relative_luminance(c1)
    y2 = relative_luminance(c2)
    lighter, darker = (y1, y2) if y1 > y2 else (y2, y1)
    return (lighter + WCAG_LUMINANCE_OFFSET) / (darker + WCAG_LUMINANCE_OFFSET)


def wcag_level(ratio: float, is_large_text: bool) -> WcagLevel:
    """Determine which WCAG conformance levels a ratio passes."""
    if is_large_text:
        return WcagLevel(aa=ratio >= WCAG_AA_LARGE, aaa=ratio >= WCAG_AAA_LARGE)
    return WcagLevel(aa=ratio >= WCAG_AA_NORMAL, aaa=ratio >= WCAG_AAA_NORMAL)


def evaluate_contrast(text: Triple, bg: Triple) -> ContrastReport:
    """Full contrast report for text on a background, clamping both into gamut first."""
    text = clamp_srgb(*text)
    bg = clamp_srgb(*bg)
    lc = compute_apca(text, bg)
    ratio = compute_wcag(text, bg)
    return ContrastReport(
        text=Srgb(r=text[0], g=text[1], b=text[2]),
        background=Srgb(r=bg[0], g=bg[1], b=bg[2]),
        apca_lc=lc,
        apca_label=apca_description(lc),
        wcag_ratio=ratio,
        wcag_normal=wcag_level(ratio, False),
        wcag_large=wcag_level(ratio, True),
    )


def find_accessible_text_lightness(L: float, C: float, H: float, target_lc: float) -> AccessibleTextSuggestion:
    """
    Suggest a text lightness that reaches target_lc (unsigned) on an OKLCH background.

    Text keeps the background hue with chroma min(0.3 * C, 0.03). Light
    backgrounds (APCA luminance above 0.2) search darker, others lighter. The
    search keeps the candidate closest to the background that still reaches
    the target; when none does, the extreme (0 or 1) is suggested. The amount
    is the lightness distance from the background, rounded to 2 decimals.
    """
    bg = clamp_srgb(*oklch_to_srgb(L, C, H))
    text_c = min(C * TEXT_CHROMA_SCALE, TEXT_MAX_CHROMA)

    darker = _apca_luminance(bg) > LIGHT_BACKGROUND_Y
    if darker:
        lo, hi, best = 0.0, L, 0.0
    else:
        lo, hi, best = L, 1.0, 1.0

    for _ in range(TEXT_SEARCH_STEPS):
        mid = (lo + hi) / 2
        text = clamp_srgb(*oklch_to_srgb(mid, text_c, H))
        reaches = abs(compute_apca(text, bg)) >= target_lc
        if reaches:
            best = mid
        # move toward the background while the target holds, away from it otherwise
        if reaches == darker:
            lo = mid
        else:
            hi = mid

    return AccessibleTextSuggestion(
        direction="darker" if darker else "lighter",
        amount=round(abs(best - L), 2),
    )
