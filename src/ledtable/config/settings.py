"""
Application settings using Pydantic.

Settings are loaded from environment variables with .env file support.
Nested fields use a double underscore, e.g. LEDTABLE_STREAM__PATTERN=wavy.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ledtable.graphics.color import PALETTES
from ledtable.protocol.frame import ByteOrder


class DisplaySettings(BaseModel):
    """LED table geometry and address."""

    width: int = Field(default=15, gt=0)
    height: int = Field(default=15, gt=0)

    host: str = "ledtable.dhcp"
    port: int = Field(default=1337, gt=0, lt=65536)

    # Byte order of the 16-bit frame header fields
    byte_order: Literal["big", "little"] = "big"

    @property
    def header_byte_order(self) -> ByteOrder:
        return ByteOrder.BIG if self.byte_order == "big" else ByteOrder.LITTLE


class StreamSettings(BaseModel):
    """Pattern selection and pacing. None means the pattern's default."""

    pattern: Literal["perlin", "lissajous", "wavy", "rain"] = "rain"
    palette: Optional[str] = None

    frame_period_ms: Optional[float] = Field(default=None, gt=0)
    max_ticks: Optional[int] = Field(default=None, gt=0)

    # Random seed; None seeds from the system clock
    seed: Optional[int] = None

    log_interval: int = Field(default=600, ge=0)

    @field_validator("palette")
    @classmethod
    def _known_palette(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and value.lower() not in PALETTES:
            raise ValueError(f"unknown palette {value!r}, expected one of {sorted(PALETTES)}")
        return value


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="LEDTABLE_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = False

    # Nested settings
    display: DisplaySettings = Field(default_factory=DisplaySettings)
    stream: StreamSettings = Field(default_factory=StreamSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
