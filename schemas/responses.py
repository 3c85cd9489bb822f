from pydantic import BaseModel, Field
from typing import List, Literal, Optional

from color_core.models import CssColorMatch


class SuccessResponse(BaseModel):
    success: Literal[True] = True
    message: Optional[str] = Field(None, description="Converted color code")


class SrgbResponse(BaseModel):
    r: float = Field(..., description="Red channel, unclamped")
    g: float = Field(..., description="Green channel, unclamped")
    b: float = Field(..., description="Blue channel, unclamped")


class OklchToSrgbResponse(SrgbResponse):
    hex: str = Field(..., description="Clamped #rrggbb")
    in_gamut: bool = Field(..., description="Whether the color fits the sRGB cube")


class OklchResponse(BaseModel):
    L: float
    C: float
    H: float
    literal: str = Field(..., description="Formatted oklch() literal")


class ScanAtResponse(BaseModel):
    match: Optional[CssColorMatch] = Field(None, description="Color under the offset, if any")
    property_name: Optional[str] = Field(None, description="Property the color is declared under")


class ScanAllResponse(BaseModel):
    matches: List[CssColorMatch]
    count: int


class RewriteResponse(BaseModel):
    text: str
    replacements: int
