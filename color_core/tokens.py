"""
Numeric token grammar shared by every functional color syntax.
A token is [sign] ASCII digits[.digits][e[sign]digits] followed by an optional
unit (deg, grad, rad, turn, %). The keyword `none` always evaluates to 0.
"""

import math
import re
from typing import List, NamedTuple, Optional, Tuple

# Regular expression patterns
num = r"[+-]?(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?"
unit = r"deg|grad|rad|turn|%"

NUM_RE = re.compile(f"({num})({unit})?", re.IGNORECASE | re.ASCII)
WS_RE = re.compile(r"\s+")

NONE_KEYWORD = "none"
CHROMA_PERCENT_SCALE = 0.4


class NumericToken(NamedTuple):
    value: float
    unit: Optional[str] = None


def parse_numeric_token(token: str) -> Optional[NumericToken]:
    """Parse a number with optional unit; None when the token is not numeric."""
    if token == NONE_KEYWORD:
        return NumericToken(0.0)
    m = NUM_RE.fullmatch(token)
    if not m:
        return None
    u = m.group(2)
    return NumericToken(float(m.group(1)), u.lower() if u else None)


def to_degrees(tok: NumericToken) -> float:
    """Convert an angle token to degrees. Bare numbers, deg and % are degrees."""
    if tok.unit == "grad":
        return tok.value * (360 / 400)
    if tok.unit == "rad":
        return tok.value * (180 / math.pi)
    if tok.unit == "turn":
        return tok.value * 360
    return tok.value


def to_fraction(tok: NumericToken, raw_scale: float = 1.0) -> float:
    """Percentages are fractions of 100; bare numbers are divided by raw_scale."""
    if tok.unit == "%":
        return tok.value / 100
    return tok.value / raw_scale


def to_chroma(tok: NumericToken) -> float:
    """Chroma (and OKLab a/b) percentages map 100% to 0.4."""
    if tok.unit == "%":
        return (tok.value / 100) * CHROMA_PERCENT_SCALE
    return tok.value


def parse_alpha(token: str) -> Optional[float]:
    """Parse an alpha token (number or percentage) clamped into [0, 1]."""
    tok = parse_numeric_token(token)
    if tok is None:
        return None
    return max(0.0, min(1.0, to_fraction(tok)))


def split_color_args(interior: str, allow_commas: bool = True) -> Tuple[List[str], Optional[str]]:
    """
    Split a function interior into color tokens and an optional alpha token.

    At most one "/" is allowed. With commas present (legacy syntax) and no
    slash, a fourth comma-separated value is the alpha. Returns an empty token
    list when the interior cannot be split.
    """
    slash_parts = interior.split("/")
    if len(slash_parts) > 2:
        return [], None

    color_part = slash_parts[0].strip()
    alpha_part = slash_parts[1].strip() if len(slash_parts) == 2 else None

    if allow_commas and "," in color_part:
        tokens = [t.strip() for t in color_part.split(",")]
        if len(tokens) == 4 and alpha_part is None:
            return tokens[:3], tokens[3]
        return tokens, alpha_part

    return [t for t in WS_RE.split(color_part) if t], alpha_part
