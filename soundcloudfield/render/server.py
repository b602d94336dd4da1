from typing import Iterable, List
from urllib.parse import urlsplit

from soundcloudfield.core import (
    EmbedUnavailable,
    MarkupError,
    PlayerSettings,
    RenderedElement,
    log_info,
    log_warning,
)
from soundcloudfield.soundcloud import OEmbedClient

from .height import resolve_height
from .rewriter import rewrite
from .sanitize import DEFAULT_ALLOWED_TAGS, filter_allowed_tags
from .templating import unavailable_message


class ServerRenderer:
    """
    Server-side rendering path: one blocking oEmbed fetch per item, items
    rendered serially. A failed item yields the unavailable message and never
    affects its siblings.
    """

    def __init__(self, client: OEmbedClient, settings: PlayerSettings):
        self.client = client
        self.settings = settings

    def _unavailable(self, url: str) -> RenderedElement:
        return RenderedElement(markup=unavailable_message(url), available=False)

    def render_item(self, url: str) -> RenderedElement:
        try:
            urlsplit(url)
        except ValueError as e:
            log_warning(f"Malformed SoundCloud URL {url!r}: {e}")
            return self._unavailable(url)

        resolution = resolve_height(url, self.settings)
        result = self.client.fetch(url)
        if isinstance(result, EmbedUnavailable):
            return self._unavailable(url)

        try:
            markup = rewrite(
                result.html, self.settings.width, resolution.height, self.settings
            )
        except MarkupError as e:
            log_warning(f"SoundCloud embed for {url} could not be rewritten: {e}")
            return self._unavailable(url)

        return RenderedElement(
            markup=filter_allowed_tags(markup, DEFAULT_ALLOWED_TAGS),
            available=True,
            allowed_tags=DEFAULT_ALLOWED_TAGS,
        )

    def render(self, urls: Iterable[str]) -> List[RenderedElement]:
        elements = [self.render_item(url) for url in urls]
        available = sum(1 for e in elements if e.available)
        log_info(f"Rendered {len(elements)} SoundCloud item(s), {available} available.")
        return elements
