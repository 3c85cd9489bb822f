from pydantic import AfterValidator, BaseModel, Field
from typing import Annotated, Literal, Optional

from color_core.models import OklchFormatOptions
from color_core.scanner import parse_color_literal


def _validate_css_color(v: str) -> str:
    if parse_color_literal(v) is None:
        raise ValueError("Not a single CSS color literal (oklch, oklab, rgb, hsl, hex or named)")
    return v.strip()


CssColorString = Annotated[str, AfterValidator(_validate_css_color)]


class ColorConvertRequest(BaseModel):
    code: CssColorString = Field(..., description="The CSS color code to convert")
    target: Literal["oklch", "hex"] = Field(..., description="The target color code format to convert to")
    format_options: Optional[OklchFormatOptions] = Field(None, description="oklch() output format; server default when omitted")


class OklchRequest(BaseModel):
    L: float = Field(..., description="OKLCH lightness, nominally 0-1")
    C: float = Field(..., ge=0, description="OKLCH chroma, nominally 0-0.4")
    H: float = Field(..., description="OKLCH hue in degrees")


class SrgbRequest(BaseModel):
    r: float = Field(..., description="Red channel, 0-1")
    g: float = Field(..., description="Green channel, 0-1")
    b: float = Field(..., description="Blue channel, 0-1")


class HslRequest(BaseModel):
    h: float = Field(..., description="Hue in degrees, any range")
    s: float = Field(..., description="Saturation, 0-1")
    l: float = Field(..., description="Lightness, 0-1")


class OklabRequest(BaseModel):
    L: float = Field(..., description="OKLab lightness, nominally 0-1")
    a: float = Field(..., description="OKLab green-red axis")
    b: float = Field(..., description="OKLab blue-yellow axis")


class TextRequest(BaseModel):
    text: str = Field(..., description="Free-form text (CSS, SCSS, HTML, ...) to scan")


class TextOffsetRequest(TextRequest):
    offset: int = Field(..., ge=0, description="Character offset of the cursor in text")


class ReplaceColorRequest(TextOffsetRequest):
    L: float = Field(..., description="OKLCH lightness of the new color")
    C: float = Field(..., ge=0, description="OKLCH chroma of the new color")
    H: float = Field(..., description="OKLCH hue of the new color")
    alpha: float = Field(1.0, ge=0, le=1, description="Opacity of the new color")
    format_options: Optional[OklchFormatOptions] = Field(None, description="oklch() output format; server default when omitted")


class ConvertAllRequest(TextRequest):
    format_options: Optional[OklchFormatOptions] = Field(None, description="oklch() output format; server default when omitted")


class ContrastRequest(BaseModel):
    text_color: CssColorString = Field(..., description="CSS color of the text (foreground)")
    background_color: CssColorString = Field(..., description="CSS color of the background")
    target_lc: Optional[float] = Field(None, gt=0, description="When set, also suggest a text lightness reaching this APCA Lc on the background")
