"""Client-side embed initializer.

Mirrors what the page script does for client-rendered players: initialize the
provider's embed API once, then for every placeholder on the page that has not
been processed yet, request its embed asynchronously, adjust height and color,
and swap the placeholder content for the final iframe.

Each placeholder request runs as its own future; there is no ordering between
placeholders and a failing request only leaves its own placeholder untouched.
"""

import threading
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Protocol, Set, Union

from pydantic import ValidationError

from soundcloudfield.config import CLIENT_WORKERS
from soundcloudfield.core import (
    ClientEmbedSettings,
    DecodeFailure,
    EmbedError,
    log_debug,
    log_warning,
)

from .rewriter import rewrite_markup
from .sanitize import filter_allowed_tags

ONCE_KEY = "soundcloudfield"


class EmbedAPI(Protocol):
    def initialize(self) -> None: ...

    def oembed(self, track_url: str, options: Dict[str, Any]) -> Dict[str, Any]: ...


class InitState:
    """
    One-shot gate for embed API initialization.

    Once `ensure()` has run its callback the state stays initialized for the
    lifetime of the object; it is never reset.
    """

    def __init__(self) -> None:
        self._initialized = False
        self._lock = threading.Lock()

    @property
    def initialized(self) -> bool:
        return self._initialized

    def ensure(self, initialize: Callable[[], None]) -> bool:
        """Run `initialize` on first call only. Returns True if it ran."""
        with self._lock:
            if self._initialized:
                return False
            self._initialized = True
            initialize()
            return True


@dataclass
class Placeholder:
    id: str
    html: str = ""
    processed: Set[str] = field(default_factory=set)


class Page:
    """The page region being attached: placeholders keyed by element id."""

    def __init__(self, placeholders: Iterable[Placeholder] = ()):
        self._elements: Dict[str, Placeholder] = {p.id: p for p in placeholders}
        self._lock = threading.Lock()

    def get(self, element_id: str) -> Optional[Placeholder]:
        return self._elements.get(element_id)

    def once(self, element_id: str, key: str = ONCE_KEY) -> bool:
        """
        Mark `element_id` as processed under `key`. Returns False when the
        element is missing or was already processed.
        """
        with self._lock:
            element = self._elements.get(element_id)
            if element is None or key in element.processed:
                return False
            element.processed.add(key)
            return True

    def replace_content(self, element_id: str, html: str) -> None:
        with self._lock:
            self._elements[element_id].html = html


def embed_options(entry: ClientEmbedSettings) -> Dict[str, Any]:
    return {
        "auto_play": entry.autoplay,
        "maxheight": entry.maxheight,
        "show_artwork": entry.showartwork,
        "show_playcount": entry.showplaycount,
        "color": entry.color,
    }


class ClientInitializer:
    def __init__(
        self,
        sdk: EmbedAPI,
        state: Optional[InitState] = None,
        executor: Optional[ThreadPoolExecutor] = None,
    ):
        self.sdk = sdk
        self.state = state or InitState()
        self._owns_executor = executor is None
        self.executor = executor or ThreadPoolExecutor(max_workers=CLIENT_WORKERS)

    def close(self) -> None:
        if self._owns_executor:
            self.executor.shutdown(wait=True)

    def attach(
        self,
        page: Page,
        payload: Iterable[Union[ClientEmbedSettings, Mapping[str, Any]]],
    ) -> List[Future]:
        """
        Initialize the embed API if needed, then start one embed request per
        unprocessed placeholder. Returns the started futures; each resolves to
        the inserted markup, or None when the embed was unavailable.
        """
        self.state.ensure(self.sdk.initialize)

        futures: List[Future] = []
        for raw in payload:
            try:
                entry = (
                    raw
                    if isinstance(raw, ClientEmbedSettings)
                    else ClientEmbedSettings.model_validate(raw)
                )
            except ValidationError as e:
                log_warning(f"Skipping malformed client embed entry: {e}")
                continue
            if not page.once(entry.id):
                continue
            futures.append(self.executor.submit(self._process, page, entry))
        return futures

    def _process(self, page: Page, entry: ClientEmbedSettings) -> Optional[str]:
        try:
            oembed = self.sdk.oembed(entry.url, embed_options(entry))
            if not isinstance(oembed, dict):
                raise DecodeFailure("oEmbed payload is not an object", url=entry.url)
            html = oembed.get("html")
            if not isinstance(html, str):
                raise DecodeFailure("oEmbed payload has no html field", url=entry.url)
            markup = rewrite_markup(
                html,
                attributes={"height": str(entry.maxheight)},
                params={"color": entry.color},
            )
        except (EmbedError, RuntimeError) as e:
            log_warning(f"Client embed for {entry.url} failed: {e}")
            return None

        markup = filter_allowed_tags(markup)
        page.replace_content(entry.id, markup)
        log_debug(f"Placeholder {entry.id} replaced with SoundCloud player.")
        return markup
