"""
Server settings, read from COLOR_TOOLS_* environment variables.
"""

import os
from functools import lru_cache
from typing import Literal, Mapping, Optional

from pydantic import BaseModel, Field

from color_core.models import OklchFormatOptions

ENV_PREFIX = "COLOR_TOOLS_"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseModel):
    host: str = "0.0.0.0"
    port: int = Field(default=8973, ge=1, le=65535)
    log_level: LogLevel = "INFO"
    lightness_format: Literal["number", "percentage"] = "number"
    chroma_format: Literal["number", "percentage"] = "number"
    hue_format: Literal["number", "deg"] = "number"
    alpha_format: Literal["number", "percentage"] = "number"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from COLOR_TOOLS_<FIELD> variables; unset ones keep their defaults."""
        env = os.environ if environ is None else environ
        values = {}
        for name in cls.model_fields:
            raw = env.get(ENV_PREFIX + name.upper())
            if raw is not None:
                values[name] = raw.upper() if name == "log_level" else raw
        return cls(**values)

    def format_options(self) -> OklchFormatOptions:
        """Default oklch() output format."""
        return OklchFormatOptions(
            lightness_format=self.lightness_format,
            chroma_format=self.chroma_format,
            hue_format=self.hue_format,
            alpha_format=self.alpha_format,
        )


@lru_cache(maxsize=None)
def get_settings() -> Settings:
    return Settings.from_env()
