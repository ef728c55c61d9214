"""Data models for book catalog."""

from .config import Config, DisplayConfig, SampleConfig

__all__ = ["Config", "DisplayConfig", "SampleConfig"]
