from typing import Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

ColorFormat = Literal["oklch", "oklab", "hex", "rgb", "hsl", "named"]
NumberOrPercent = Literal["number", "percentage"]


class CssColorMatch(BaseModel):
    """A color literal found in text, decoded to OKLCH + alpha."""

    model_config = ConfigDict(frozen=True)

    start_offset: int = Field(ge=0)
    end_offset: int = Field(gt=0)
    L: float
    C: float
    H: float
    alpha: float = Field(default=1.0, ge=0.0, le=1.0)
    original_format: ColorFormat

    @model_validator(mode="after")
    def _check_span(self) -> "CssColorMatch":
        if self.end_offset <= self.start_offset:
            raise ValueError("end_offset must be greater than start_offset")
        return self

    @property
    def oklch(self) -> Tuple[float, float, float]:
        return self.L, self.C, self.H


class WcagLevel(BaseModel):
    model_config = ConfigDict(frozen=True)

    aa: bool
    aaa: bool


class OklchFormatOptions(BaseModel):
    """How each component of an oklch() literal is written."""

    lightness_format: NumberOrPercent = "number"
    chroma_format: NumberOrPercent = "number"
    hue_format: Literal["number", "deg"] = "number"
    alpha_format: NumberOrPercent = "number"


class Srgb(BaseModel):
    r: float
    g: float
    b: float


class AccessibleTextSuggestion(BaseModel):
    """How far to move a background color's lightness to get readable text on it."""

    model_config = ConfigDict(frozen=True)

    direction: Literal["darker", "lighter"]
    amount: float = Field(ge=0, description="Lightness distance from the background, 2 decimals")


class ContrastReport(BaseModel):
    text: Srgb
    background: Srgb
    apca_lc: float
    apca_label: str
    wcag_ratio: float
    wcag_normal: WcagLevel
    wcag_large: WcagLevel
    text_suggestion: Optional[AccessibleTextSuggestion] = None
