"""
Numeric color conversions with OKLCH as the hub.
Supported: sRGB, linear sRGB, OKLab, OKLCH, HSL, hex output, sRGB gamut test.
OKLab matrices from Bjorn Ottosson's reference: https://bottosson.github.io/posts/oklab/
None of these functions clamp; out-of-range channels signal out-of-gamut colors.
"""

import math
from typing import Tuple

Triple = Tuple[float, float, float]

GAMUT_EPSILON = 0.001


def clamp(v: float, lo: float, hi: float) -> float:
    """Clamp value between lo and hi."""
    return max(lo, min(hi, v))


def _cbrt(x: float) -> float:
    """Real cube root that keeps the sign of negative inputs."""
    return math.copysign(abs(x) ** (1 / 3), x)


# sRGB transfer ---------------------------------------------------

def srgb_to_linear(x: float) -> float:
    """sRGB companding (decode)."""
    if x <= 0.04045:
        return x / 12.92
    try:
        return ((x + 0.055) / 1.055) ** 2.4
    except OverflowError:
        return math.inf


def linear_to_srgb(x: float) -> float:
    """Linear to sRGB (encode)."""
    if x <= 0.0031308:
        return 12.92 * x
    return 1.055 * (x ** (1 / 2.4)) - 0.055


# OKLab <-> linear sRGB -------------------------------------------

def oklab_to_linear_srgb(L: float, a: float, b: float) -> Triple:
    """Convert OKLab to linear sRGB."""
    # OKLab -> cube-root LMS -> LMS -> linear sRGB
    l_ = L + 0.3963377774 * a + 0.2158037573 * b
    m_ = L - 0.1055613458 * a - 0.0638541728 * b
    s_ = L - 0.0894841775 * a - 1.291485548 * b

    l = l_ * l_ * l_
    m = m_ * m_ * m_
    s = s_ * s_ * s_

    R = +4.0767416621 * l - 3.3077115913 * m + 0.2309699292 * s
    G = -1.2684380046 * l + 2.6097574011 * m - 0.3413193965 * s
    B = -0.0041960863 * l - 0.7034186147 * m + 1.707614701 * s
    return R, G, B


def linear_srgb_to_oklab(r: float, g: float, b: float) -> Triple:
    """Convert linear sRGB to OKLab."""
    l = _cbrt(0.4122214708 * r + 0.5363325363 * g + 0.0514459929 * b)
    m = _cbrt(0.2119034982 * r + 0.6806995451 * g + 0.1073969566 * b)
    s = _cbrt(0.0883024619 * r + 0.2817188376 * g + 0.6299787005 * b)

    L = 0.2104542553 * l + 0.793617785 * m - 0.0040720468 * s
    A = 1.9779984951 * l - 2.428592205 * m + 0.4505937099 * s
    B = 0.0259040371 * l + 0.7827717662 * m - 0.808675766 * s
    return L, A, B


# OKLab <-> OKLCH -------------------------------------------------

def normalize_hue(h: float) -> float:
    """Wrap any hue angle into [0, 360)."""
    h = h % 360
    # tiny negative inputs round up to exactly 360
    return 0.0 if h >= 360 else h


def oklab_to_oklch(L: float, a: float, b: float) -> Triple:
    """Convert OKLab to OKLCH, hue normalized into [0, 360)."""
    C = math.sqrt(a * a + b * b)
    h = (math.atan2(b, a) * 180) / math.pi
    return L, C, normalize_hue(h)


def oklch_to_oklab(L: float, C: float, H: float) -> Triple:
    """Convert OKLCH to OKLab."""
    hr = (H * math.pi) / 180
    return L, C * math.cos(hr), C * math.sin(hr)


# sRGB <-> OKLCH --------------------------------------------------

def oklch_to_srgb(L: float, C: float, H: float) -> Triple:
    """Convert OKLCH to gamma-encoded sRGB in nominal [0, 1], unclamped."""
    _, a, b = oklch_to_oklab(L, C, H)
    R, G, B = oklab_to_linear_srgb(L, a, b)
    return linear_to_srgb(R), linear_to_srgb(G), linear_to_srgb(B)


def srgb_to_oklch(r: float, g: float, b: float) -> Triple:
    """Convert gamma-encoded sRGB to OKLCH."""
    L, A, B = linear_srgb_to_oklab(srgb_to_linear(r), srgb_to_linear(g), srgb_to_linear(b))
    return oklab_to_oklch(L, A, B)


# HSL -------------------------------------------------------------

def hsl_to_srgb(h: float, s: float, l: float) -> Triple:
    """Convert HSL to sRGB. h in deg (any range), s,l in [0,1]."""
    h = ((h % 360) + 360) % 360
    c = (1 - abs(2 * l - 1)) * s
    x = c * (1 - abs(((h / 60) % 2) - 1))
    m = l - c / 2

    if h < 60:
        r1, g1, b1 = c, x, 0.0
    elif h < 120:
        r1, g1, b1 = x, c, 0.0
    elif h < 180:
        r1, g1, b1 = 0.0, c, x
    elif h < 240:
        r1, g1, b1 = 0.0, x, c
    elif h < 300:
        r1, g1, b1 = x, 0.0, c
    else:
        r1, g1, b1 = c, 0.0, x

    return r1 + m, g1 + m, b1 + m


# Hex and gamut ---------------------------------------------------

def oklch_to_hex(L: float, C: float, H: float, alpha: float = 1.0) -> str:
    """
    Convert OKLCH to a #rrggbb string, clamping out-of-gamut channels.
    A translucent color (alpha < 1) gets a fourth byte: #rrggbbaa.
    """
    def h(x: float) -> str:
        return format(int(round(clamp(x * 255, 0, 255))), "02x")

    r, g, b = oklch_to_srgb(L, C, H)
    base = f"#{h(r)}{h(g)}{h(b)}"
    if alpha >= 1:
        return base
    return base + h(clamp(alpha, 0, 1))


def is_in_srgb_gamut(L: float, C: float, H: float) -> bool:
    """Check whether an OKLCH color maps inside the sRGB cube."""
    lo, hi = -GAMUT_EPSILON, 1 + GAMUT_EPSILON
    return all(lo <= ch <= hi for ch in oklch_to_srgb(L, C, H))


def clamp_srgb(r: float, g: float, b: float) -> Triple:
    """Hard-clamp an sRGB triple into [0, 1] for display."""
    return clamp(r, 0, 1), clamp(g, 0, 1), clamp(b, 0, 1)
