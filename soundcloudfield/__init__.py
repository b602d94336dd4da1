"""Render SoundCloud oEmbed players for content-management fields."""

__version__ = "0.1.0"
