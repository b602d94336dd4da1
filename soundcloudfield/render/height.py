from soundcloudfield.core import HeightResolution, PlayerSettings, TrackReference


def resolve_height(url: str, settings: PlayerSettings) -> HeightResolution:
    """
    Pick the iframe height for a track/set URL.

    - visual player: the visual height, whatever the URL points at
    - classic player: the set height for sets and artist pages, the track
      height otherwise
    """
    reference = TrackReference(url)
    is_set = reference.is_set

    if settings.is_visual:
        height = settings.visual_height
    elif is_set:
        height = settings.height_set
    else:
        height = settings.height_track

    return HeightResolution(height=height, is_set=is_set)
