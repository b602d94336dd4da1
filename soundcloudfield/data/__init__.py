"""Public façade for the soundcloudfield.data package.

Formatter settings are owned by the CMS; this package only reads them.
"""

from .settings import load_player_settings, settings_options

__all__ = [
    "load_player_settings",
    "settings_options",
]
