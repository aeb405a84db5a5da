"""Configuration for the LED table streamer."""

from .settings import Settings, DisplaySettings, StreamSettings, get_settings

__all__ = ["Settings", "DisplaySettings", "StreamSettings", "get_settings"]
