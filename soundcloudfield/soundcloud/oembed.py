"""SoundCloud oEmbed client.

Builds the oEmbed request for a track/set URL, issues a single GET and decodes
the provider's embed fragment. Every failure mode (transport error, non-2xx
status, blank body, malformed payload) is raised as an EmbedError subclass by
request_embed(); fetch() collapses them into an EmbedUnavailable result so the
renderer never sees an exception. There are no retries.
"""

import json
from typing import Any, Dict, Optional
from urllib.parse import quote_plus, urlencode

import requests

from soundcloudfield.config import HTTP_TIMEOUT, SOUNDCLOUD_OEMBED_ENDPOINT, USER_AGENT
from soundcloudfield.core import (
    DecodeFailure,
    EmbedError,
    EmbedResult,
    EmbedSuccess,
    EmbedUnavailable,
    EmptyResponse,
    FetchFailure,
    log_step,
    log_warning,
)


def build_oembed_url(
    track_url: str,
    endpoint: str = SOUNDCLOUD_OEMBED_ENDPOINT,
    extra: Optional[Dict[str, Any]] = None,
) -> str:
    """
    Build the oEmbed request URL:
        <endpoint>?iframe=true&format=json&url=<percent-encoded track_url>

    Extra embed options (maxheight, auto_play, ...) are appended after `url`.
    """
    oembed_url = f"{endpoint}?iframe=true&format=json&url={quote_plus(track_url)}"
    if extra:
        oembed_url += "&" + urlencode(extra)
    return oembed_url


def decode_oembed(body: str, track_url: str = "") -> Dict[str, Any]:
    """
    Parse an oEmbed JSON body and make sure it carries an `html` string.
    """
    if not body or not body.strip():
        raise EmptyResponse("Empty oEmbed response", url=track_url)

    try:
        payload = json.loads(body)
    except ValueError as e:
        raise DecodeFailure(f"Malformed oEmbed JSON: {e}", url=track_url) from e

    if not isinstance(payload, dict):
        raise DecodeFailure("oEmbed payload is not an object", url=track_url)

    html = payload.get("html")
    if not isinstance(html, str) or not html.strip():
        raise DecodeFailure("oEmbed payload has no html field", url=track_url)

    return payload


class OEmbedClient:
    def __init__(
        self,
        endpoint: str = SOUNDCLOUD_OEMBED_ENDPOINT,
        timeout: float = HTTP_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.endpoint = endpoint
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers["User-Agent"] = USER_AGENT

    def close(self) -> None:
        self.session.close()

    def _get_body(self, oembed_url: str, track_url: str) -> str:
        try:
            r = self.session.get(oembed_url, timeout=self.timeout)
        except requests.RequestException as e:
            raise FetchFailure(f"oEmbed request failed: {e}", url=track_url) from e

        if not r.ok:
            raise FetchFailure(f"oEmbed endpoint returned HTTP {r.status_code}", url=track_url)
        return r.text

    def request_embed(self, track_url: str, **options: Any) -> Dict[str, Any]:
        """
        Fetch and decode the oEmbed payload for `track_url`.

        Raises FetchFailure, EmptyResponse or DecodeFailure.
        """
        oembed_url = build_oembed_url(track_url, self.endpoint, extra=options or None)
        log_step(f"Fetching oEmbed data for {track_url}")
        body = self._get_body(oembed_url, track_url)
        return decode_oembed(body, track_url)

    def fetch(self, track_url: str) -> EmbedResult:
        """
        Return EmbedSuccess with the provider's embed fragment, or
        EmbedUnavailable when anything goes wrong.
        """
        try:
            payload = self.request_embed(track_url)
        except EmbedError as e:
            log_warning(f"SoundCloud content unavailable ({type(e).__name__}): {e}")
            return EmbedUnavailable(source_url=track_url, reason=type(e).__name__)
        return EmbedSuccess(html=payload["html"])
