"""
Find CSS color literals in free-form text and decode them to OKLCH + alpha.
Supported: oklch, oklab, rgb/rgba (modern/legacy), hsl/hsla (modern/legacy),
hex 3/4/6/8, named colors.
Excludes: relative color syntax (`rgb(from ...)`), hwb, lab, lch, color().

Nothing here parses the surrounding language. Each syntax is found with its
own regex and a candidate that fails its grammar is skipped, never reported.
"""

import itertools
import math
import logging
import re
from typing import Callable, Dict, Iterator, List, Optional, Tuple

from .conversion import Triple, hsl_to_srgb, normalize_hue, oklab_to_oklch, srgb_to_oklch
from .models import ColorFormat, CssColorMatch
from .named_colors import lookup_named, named_color_pattern
from .tokens import (
    parse_alpha,
    parse_numeric_token,
    split_color_args,
    to_chroma,
    to_degrees,
    to_fraction,
)

logger = logging.getLogger(__name__)

Decoded = Tuple[Triple, float]

OKLCH_RE = re.compile(r"oklch\(\s*([^)]*)\s*\)", re.IGNORECASE)
FUNC_COLOR_RE = re.compile(r"(rgba?|hsla?|oklab)\(\s*([^)]*)\s*\)", re.IGNORECASE)
HEX_RE = re.compile(r"#([0-9a-fA-F]{3,8})\b", re.ASCII)
IDENT_CHAR_RE = re.compile(r"[A-Za-z0-9_-]")
PROPERTY_RE = re.compile(r"([\w-]+)\s*:\s*[^;{}]*\Z")

HEX_LENGTHS = (3, 4, 6, 8)
RELATIVE_COLOR_PREFIX = "from"
PROPERTY_LOOKBEHIND = 200


def _make_match(start: int, end: int, decoded: Decoded, fmt: ColorFormat) -> CssColorMatch:
    (L, C, H), alpha = decoded
    return CssColorMatch(
        start_offset=start,
        end_offset=end,
        L=L,
        C=C,
        H=normalize_hue(H),
        alpha=alpha,
        original_format=fmt,
    )


def _is_finite(decoded: Decoded) -> bool:
    """Overflowing components (e.g. rgb(1e200 0 0)) decode to inf or nan."""
    (L, C, H), alpha = decoded
    return all(math.isfinite(v) for v in (L, C, H, alpha))


def _alpha_or_default(token: Optional[str]) -> Optional[float]:
    """Missing alpha means opaque; an unparseable one rejects the literal."""
    if token is None:
        return 1.0
    return parse_alpha(token)


# Interior decoders ------------------------------------------------

def _decode_oklch(interior: str) -> Optional[Decoded]:
    tokens, alpha_token = split_color_args(interior, allow_commas=False)
    if len(tokens) != 3:
        return None
    parsed = [parse_numeric_token(t) for t in tokens]
    if any(p is None for p in parsed):
        return None
    alpha = _alpha_or_default(alpha_token)
    if alpha is None:
        return None
    l_tok, c_tok, h_tok = parsed
    return (to_fraction(l_tok), to_chroma(c_tok), to_degrees(h_tok)), alpha


def _decode_oklab(interior: str) -> Optional[Decoded]:
    tokens, alpha_token = split_color_args(interior)
    if len(tokens) != 3:
        return None
    parsed = [parse_numeric_token(t) for t in tokens]
    if any(p is None for p in parsed):
        return None
    alpha = _alpha_or_default(alpha_token)
    if alpha is None:
        return None
    l_tok, a_tok, b_tok = parsed
    return oklab_to_oklch(to_fraction(l_tok), to_chroma(a_tok), to_chroma(b_tok)), alpha


def _decode_rgb(interior: str) -> Optional[Decoded]:
    tokens, alpha_token = split_color_args(interior)
    if len(tokens) != 3:
        return None
    parsed = [parse_numeric_token(t) for t in tokens]
    if any(p is None for p in parsed):
        return None
    alpha = _alpha_or_default(alpha_token)
    if alpha is None:
        return None
    r, g, b = (to_fraction(p, 255) for p in parsed)
    return srgb_to_oklch(r, g, b), alpha


def _decode_hsl(interior: str) -> Optional[Decoded]:
    tokens, alpha_token = split_color_args(interior)
    if len(tokens) != 3:
        return None
    parsed = [parse_numeric_token(t) for t in tokens]
    if any(p is None for p in parsed):
        return None
    alpha = _alpha_or_default(alpha_token)
    if alpha is None:
        return None
    h_tok, s_tok, l_tok = parsed
    # saturation and lightness are percentages whether or not "%" is written
    r, g, b = hsl_to_srgb(to_degrees(h_tok), s_tok.value / 100, l_tok.value / 100)
    return srgb_to_oklch(r, g, b), alpha


FUNCTIONAL_DECODERS: Dict[str, Tuple[Callable[[str], Optional[Decoded]], ColorFormat]] = {
    "rgb": (_decode_rgb, "rgb"),
    "rgba": (_decode_rgb, "rgb"),
    "hsl": (_decode_hsl, "hsl"),
    "hsla": (_decode_hsl, "hsl"),
    "oklab": (_decode_oklab, "oklab"),
}


def _hex_channels(digits: str) -> Tuple[Triple, float]:
    if len(digits) <= 4:
        pairs = [d * 2 for d in digits]
    else:
        pairs = [digits[i:i + 2] for i in range(0, len(digits), 2)]
    values = [int(p, 16) / 255 for p in pairs]
    alpha = values[3] if len(values) == 4 else 1.0
    return (values[0], values[1], values[2]), alpha


# Per-syntax scans -------------------------------------------------

def _scan_oklch(text: str) -> Iterator[CssColorMatch]:
    for m in OKLCH_RE.finditer(text):
        interior = m.group(1).strip()
        if interior.startswith(RELATIVE_COLOR_PREFIX):
            logger.debug("Skipping relative oklch() at %d", m.start())
            continue
        decoded = _decode_oklch(interior)
        if decoded is None or not _is_finite(decoded):
            logger.debug("Rejecting malformed %r at %d", m.group(0), m.start())
            continue
        yield _make_match(m.start(), m.end(), decoded, "oklch")


def _scan_functional(text: str) -> Iterator[CssColorMatch]:
    for m in FUNC_COLOR_RE.finditer(text):
        interior = m.group(2).strip()
        if interior.startswith(RELATIVE_COLOR_PREFIX):
            logger.debug("Skipping relative %s() at %d", m.group(1), m.start())
            continue
        decode, fmt = FUNCTIONAL_DECODERS[m.group(1).lower()]
        decoded = decode(interior)
        if decoded is None or not _is_finite(decoded):
            logger.debug("Rejecting malformed %r at %d", m.group(0), m.start())
            continue
        yield _make_match(m.start(), m.end(), decoded, fmt)


def _scan_hex(text: str) -> Iterator[CssColorMatch]:
    for m in HEX_RE.finditer(text):
        digits = m.group(1)
        if len(digits) not in HEX_LENGTHS:
            continue
        start = m.start()
        if start > 0 and IDENT_CHAR_RE.match(text[start - 1]):
            logger.debug("Skipping hex %r glued to an identifier at %d", m.group(0), start)
            continue
        rgb, alpha = _hex_channels(digits)
        yield _make_match(start, m.end(), (srgb_to_oklch(*rgb), alpha), "hex")


def _scan_named(text: str) -> Iterator[CssColorMatch]:
    for m in named_color_pattern().finditer(text):
        start, end = m.span()
        # --red is a custom property, red( is a function call
        if start > 0 and text[start - 1] == "-":
            continue
        if end < len(text) and text[end] == "(":
            continue
        r, g, b = lookup_named(m.group(1))
        yield _make_match(start, end, (srgb_to_oklch(r / 255, g / 255, b / 255), 1.0), "named")


# Fixed priority: oklch wins on overlap, the rest are disjoint regex classes.
SCAN_PASSES: Tuple[Callable[[str], Iterator[CssColorMatch]], ...] = (
    _scan_oklch,
    _scan_functional,
    _scan_hex,
    _scan_named,
)


def _first_containing(matches: Iterator[CssColorMatch], offset: int) -> Optional[CssColorMatch]:
    for m in matches:
        if m.start_offset > offset:
            break
        if offset <= m.end_offset:
            return m
    return None


# Public API ------------------------------------------------------

def find_oklch_colors(text: str) -> List[CssColorMatch]:
    """Find every oklch() literal in text, in order."""
    return list(_scan_oklch(text))


def find_oklch_at_offset(text: str, offset: int) -> Optional[CssColorMatch]:
    """Return the oklch() literal whose span contains offset (inclusive)."""
    return _first_containing(_scan_oklch(text), offset)


def find_color_at_offset(text: str, offset: int) -> Optional[CssColorMatch]:
    """
    Return the color literal under offset, or None.

    Syntaxes are tried in priority order: oklch(), then rgb()/hsl()/oklab(),
    then hex, then named colors. Both span ends count as inside.
    """
    for scan in SCAN_PASSES:
        match = _first_containing(scan(text), offset)
        if match is not None:
            return match
    return None


def find_all_colors(text: str) -> List[CssColorMatch]:
    """Find every color literal in text, sorted by start offset."""
    matches = itertools.chain.from_iterable(scan(text) for scan in SCAN_PASSES)
    return sorted(matches, key=lambda m: m.start_offset)


def find_property_context(text: str, color_start_offset: int) -> Optional[str]:
    """
    Return the CSS property (or custom property) a color is declared under.

    Looks back at most 200 characters from the color start and never crosses
    a ';', '{' or '}' boundary. Returns None when no declaration is found.
    """
    end = max(0, color_start_offset)
    window = text[max(0, end - PROPERTY_LOOKBEHIND):end]
    m = PROPERTY_RE.search(window)
    return m.group(1) if m else None


def parse_color_literal(code: str) -> Optional[CssColorMatch]:
    """Decode a string that is exactly one color literal, ignoring outer whitespace."""
    s = code.strip()
    for m in find_all_colors(s):
        if m.start_offset == 0 and m.end_offset == len(s):
            return m
    return None
