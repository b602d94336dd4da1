from .oembed import OEmbedClient, build_oembed_url, decode_oembed
from .widget import SoundCloudWidgetClient

__all__ = [
    "OEmbedClient",
    "SoundCloudWidgetClient",
    "build_oembed_url",
    "decode_oembed",
]
