from typing import Iterator

from soundcloudfield.core import PlayerSettings
from soundcloudfield.data import load_player_settings
from soundcloudfield.soundcloud import OEmbedClient


def get_player_settings() -> PlayerSettings:
    return load_player_settings()


def get_oembed_client() -> Iterator[OEmbedClient]:
    client = OEmbedClient()
    try:
        yield client
    finally:
        client.close()
