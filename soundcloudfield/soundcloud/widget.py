from typing import Any, Dict, Optional

import requests

from soundcloudfield.config import HTTP_TIMEOUT, SOUNDCLOUD_OEMBED_ENDPOINT
from soundcloudfield.core import log_info

from .oembed import OEmbedClient


class SoundCloudWidgetClient:
    """
    Embed API used by the client-side initializer.

    `initialize()` must be called once before `oembed()`; the initializer
    guards that call with its InitState.
    """

    def __init__(
        self,
        endpoint: str = SOUNDCLOUD_OEMBED_ENDPOINT,
        timeout: float = HTTP_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.endpoint = endpoint
        self.timeout = timeout
        self._session = session
        self._client: Optional[OEmbedClient] = None

    @property
    def initialized(self) -> bool:
        return self._client is not None

    def initialize(self) -> None:
        session = self._session or requests.Session()
        self._client = OEmbedClient(
            endpoint=self.endpoint, timeout=self.timeout, session=session
        )
        log_info("SoundCloud embed API initialized.")

    def oembed(self, track_url: str, options: Dict[str, Any]) -> Dict[str, Any]:
        if self._client is None:
            raise RuntimeError("SoundCloud embed API used before initialize()")
        return self._client.request_embed(track_url, **options)

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
