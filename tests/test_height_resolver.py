from soundcloudfield.core import PlayerSettings, PlayerType, TrackReference
from soundcloudfield.render import resolve_height


def _classic() -> PlayerSettings:
    return PlayerSettings(height_track=166, height_set=450, visual_height=600)


def test_track_url_uses_track_height() -> None:
    resolution = resolve_height("https://soundcloud.com/artist/trackname", _classic())

    assert resolution.height == 166
    assert resolution.is_set is False


def test_set_url_uses_set_height() -> None:
    resolution = resolve_height("https://soundcloud.com/artist/sets/album", _classic())

    assert resolution.height == 450
    assert resolution.is_set is True


def test_artist_url_without_third_segment_is_treated_as_set() -> None:
    resolution = resolve_height("https://soundcloud.com/artist", _classic())

    assert resolution.height == 450
    assert resolution.is_set is True


def test_url_without_path_is_treated_as_set() -> None:
    assert TrackReference("https://soundcloud.com").is_set is True


def test_visual_player_ignores_track_or_set() -> None:
    settings = PlayerSettings(player_type=PlayerType.VISUAL, visual_height=450)

    for url in (
        "https://soundcloud.com/artist/trackname",
        "https://soundcloud.com/artist/sets/album",
        "https://soundcloud.com/artist",
    ):
        assert resolve_height(url, settings).height == 450


def test_path_segments_keep_leading_empty_segment() -> None:
    reference = TrackReference("https://soundcloud.com/artist/sets/album?in=x")

    assert reference.path_segments == ["", "artist", "sets", "album"]


def test_unparseable_url_is_treated_as_set() -> None:
    reference = TrackReference("https://[soundcloud.com/a/b")

    assert reference.path_segments == []
    assert reference.is_set is True
