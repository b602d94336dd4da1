import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from soundcloudfield.core import PlayerSettings, PlayerType
from soundcloudfield.data import load_player_settings, settings_options


def test_defaults_match_formatter_defaults() -> None:
    settings = PlayerSettings()

    assert settings.player_type == PlayerType.CLASSIC
    assert settings.width == 100
    assert settings.height_track == 166
    assert settings.height_set == 450
    assert settings.visual_height == 450
    assert settings.color == "ff7700"
    assert settings.autoplay is False
    assert settings.show_comments is True
    assert settings.summary() == ["Displays the SoundCloud player."]


@pytest.mark.parametrize(
    "raw, expected",
    [("#FF7700", "ff7700"), (" 336699 ", "336699"), ("", "ff7700"), (None, "ff7700")],
)
def test_color_is_normalised(raw, expected) -> None:
    assert PlayerSettings(color=raw).color == expected


@pytest.mark.parametrize("raw", ["zzzzzz", "fff", "#12345678"])
def test_invalid_color_is_rejected(raw) -> None:
    with pytest.raises(ValidationError):
        PlayerSettings(color=raw)


def test_formatter_keys_are_accepted() -> None:
    settings = PlayerSettings.model_validate(
        {
            "soundcloud_player_type": "visual",
            "soundcloud_player_width": "80",
            "soundcloud_player_height": "",
            "soundcloud_player_visual_height": 600,
            "soundcloud_player_autoplay": "",
            "soundcloud_player_showartwork": 1,
            "soundcloud_player_color": "#336699",
        }
    )

    assert settings.is_visual is True
    assert settings.width == 80
    assert settings.height_track == 166
    assert settings.visual_height == 600
    assert settings.autoplay is False
    assert settings.show_artwork is True
    assert settings.color == "336699"


def test_non_positive_dimensions_are_rejected() -> None:
    with pytest.raises(ValidationError):
        PlayerSettings(width=0)
    with pytest.raises(ValidationError):
        PlayerSettings(height_set=-10)


def test_settings_are_immutable() -> None:
    settings = PlayerSettings()

    with pytest.raises(ValidationError):
        settings.color = "000000"


def test_load_player_settings_from_file(tmp_path: Path) -> None:
    path = tmp_path / "player_settings.json"
    path.write_text(
        json.dumps({"soundcloud_player_color": "112233", "soundcloud_player_height_sets": 500}),
        encoding="utf-8",
    )

    settings = load_player_settings(str(path))

    assert settings.color == "112233"
    assert settings.height_set == 500


def test_load_player_settings_missing_file_gives_defaults(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setattr(
        "soundcloudfield.data.settings.SETTINGS_FILE",
        str(tmp_path / "missing.json"),
        raising=True,
    )

    assert load_player_settings() == PlayerSettings()


@pytest.mark.parametrize(
    "content",
    ["{ invalid json", "[1, 2, 3]", '{"soundcloud_player_color": "not-a-color"}'],
)
def test_load_player_settings_bad_file_gives_defaults(tmp_path: Path, content: str) -> None:
    path = tmp_path / "player_settings.json"
    path.write_text(content, encoding="utf-8")

    assert load_player_settings(str(path)) == PlayerSettings()


def test_settings_options_enumerate_configuration_surface() -> None:
    options = settings_options()

    assert options["player_type"] == ["classic", "visual"]
    assert options["visual_height"] == [300, 450, 600]
    assert options["client_height"] == [300, 400, 450, 500, 600]
