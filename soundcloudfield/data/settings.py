from typing import Any, Dict, Optional

from pydantic import ValidationError

from soundcloudfield.config import (
    CLIENT_HEIGHT_OPTIONS,
    DEFAULT_COLOR,
    DEFAULT_WIDTH,
    SETTINGS_FILE,
    VISUAL_HEIGHT_OPTIONS,
)
from soundcloudfield.core import PlayerSettings, PlayerType, log_warning, read_json


def load_player_settings(path: Optional[str] = None) -> PlayerSettings:
    """
    Load the formatter settings from the JSON settings file.

    The file may use either PlayerSettings field names or the stored
    formatter keys (soundcloud_player_*). A missing file gives the defaults;
    a corrupted or invalid file is reported and also gives the defaults.
    """

    def _on_error(e: Exception) -> None:
        log_warning("Player settings file is corrupted; using defaults.")

    data = read_json(path or SETTINGS_FILE, default={}, on_error=_on_error)
    if not isinstance(data, dict):
        log_warning("Player settings file is not an object; using defaults.")
        return PlayerSettings()

    try:
        return PlayerSettings.model_validate(data)
    except ValidationError as e:
        log_warning(f"Invalid player settings ({e.error_count()} error(s)); using defaults.")
        return PlayerSettings()


def settings_options() -> Dict[str, Any]:
    """
    Enumerated configuration surface, as offered by the formatter forms.
    """
    return {
        "player_type": [t.value for t in PlayerType],
        "visual_height": list(VISUAL_HEIGHT_OPTIONS),
        "client_height": list(CLIENT_HEIGHT_OPTIONS),
        "default_width": DEFAULT_WIDTH,
        "default_color": DEFAULT_COLOR,
    }
