import re
from dataclasses import dataclass, field
from typing import Iterable, List

from soundcloudfield.config import CLIENT_LIBRARIES
from soundcloudfield.core import ClientEmbedSettings, PlayerSettings, to_flag

from .height import resolve_height
from .templating import placeholder_markup

_IDENTIFIER_FILTER = {" ": "-", "_": "-", "/": "-", "[": "-", "]": ""}
_INVALID_IDENTIFIER_CHARS = re.compile(r"[^\-0-9A-Za-z_\u00a1-\uffff]")


def clean_css_identifier(value: str) -> str:
    """
    Turn an arbitrary string (here: a track URL) into a valid CSS identifier,
    following the CMS rules: separators become "-", other invalid characters
    are dropped, and a leading digit or "--" is escaped.
    """
    for search, replace in _IDENTIFIER_FILTER.items():
        value = value.replace(search, replace)
    value = _INVALID_IDENTIFIER_CHARS.sub("", value)
    value = re.sub(r"^[0-9]", "_", value)
    value = re.sub(r"^(-[0-9])|^(--)", "__", value)
    return value


@dataclass
class ClientRenderOutput:
    elements: List[str] = field(default_factory=list)
    payload: List[ClientEmbedSettings] = field(default_factory=list)
    libraries: List[str] = field(default_factory=list)


class ClientRenderer:
    """
    Client-side rendering path: emits a placeholder per item plus the settings
    payload the page initializer uses to request each embed asynchronously.
    """

    def __init__(self, settings: PlayerSettings):
        self.settings = settings

    def build_payload(self, url: str) -> ClientEmbedSettings:
        resolution = resolve_height(url, self.settings)
        return ClientEmbedSettings(
            id=clean_css_identifier(url),
            url=url,
            autoplay=to_flag(self.settings.autoplay),
            maxheight=resolution.height,
            showartwork=to_flag(self.settings.show_artwork),
            showplaycount=to_flag(self.settings.show_playcount),
            color=self.settings.color,
        )

    def render(self, urls: Iterable[str]) -> ClientRenderOutput:
        output = ClientRenderOutput(libraries=list(CLIENT_LIBRARIES))
        for url in urls:
            entry = self.build_payload(url)
            output.payload.append(entry)
            output.elements.append(placeholder_markup(entry.id))
        return output
