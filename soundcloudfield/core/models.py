from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Tuple, Union
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, field_validator

from soundcloudfield.config import (
    DEFAULT_COLOR,
    DEFAULT_HTML5_PLAYER_HEIGHT,
    DEFAULT_HTML5_PLAYER_HEIGHT_SETS,
    DEFAULT_VISUAL_PLAYER_HEIGHT,
    DEFAULT_WIDTH,
)

HEX_DIGITS = set("0123456789abcdef")

_DIMENSION_DEFAULTS = {
    "width": DEFAULT_WIDTH,
    "height_track": DEFAULT_HTML5_PLAYER_HEIGHT,
    "height_set": DEFAULT_HTML5_PLAYER_HEIGHT_SETS,
    "visual_height": DEFAULT_VISUAL_PLAYER_HEIGHT,
}


class PlayerType(str, Enum):
    CLASSIC = "classic"
    VISUAL = "visual"


@dataclass(frozen=True)
class TrackReference:
    """
    A SoundCloud URL pointing at a track, a set, or an artist page.

    Path segments keep the leading empty segment produced by splitting an
    absolute path on "/", so "/artist/sets/album" gives
    ["", "artist", "sets", "album"].
    """

    url: str

    @property
    def path_segments(self) -> List[str]:
        try:
            path = urlparse(self.url).path
        except ValueError:
            # Unparseable URL: no path, so it is classified like an artist page.
            return []
        return path.split("/")

    @property
    def is_set(self) -> bool:
        # An artist page (no third segment) is treated like a set.
        segments = self.path_segments
        return len(segments) < 3 or segments[2] == "sets"


class PlayerSettings(BaseModel):
    """
    Formatter settings for the SoundCloud player.

    Accepts either the field names below or the keys used by the stored
    formatter configuration (``soundcloud_player_*``).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    player_type: PlayerType = Field(
        default=PlayerType.CLASSIC, alias="soundcloud_player_type"
    )
    width: int = Field(default=DEFAULT_WIDTH, alias="soundcloud_player_width")
    height_track: int = Field(
        default=DEFAULT_HTML5_PLAYER_HEIGHT, alias="soundcloud_player_height"
    )
    height_set: int = Field(
        default=DEFAULT_HTML5_PLAYER_HEIGHT_SETS,
        alias="soundcloud_player_height_sets",
    )
    visual_height: int = Field(
        default=DEFAULT_VISUAL_PLAYER_HEIGHT,
        alias="soundcloud_player_visual_height",
    )
    autoplay: bool = Field(default=False, alias="soundcloud_player_autoplay")
    color: str = Field(default=DEFAULT_COLOR, alias="soundcloud_player_color")
    hide_related: bool = Field(default=False, alias="soundcloud_player_hiderelated")
    show_artwork: bool = Field(default=False, alias="soundcloud_player_showartwork")
    show_comments: bool = Field(default=True, alias="soundcloud_player_showcomments")
    show_playcount: bool = Field(
        default=False, alias="soundcloud_player_showplaycount"
    )

    @field_validator("color", mode="before")
    @classmethod
    def _normalise_color(cls, value: Any) -> str:
        if value is None:
            return DEFAULT_COLOR
        color = str(value).strip().lstrip("#").lower()
        if not color:
            return DEFAULT_COLOR
        if len(color) != 6 or not set(color) <= HEX_DIGITS:
            raise ValueError(f"color must be 6 hexadecimal digits, got {value!r}")
        return color

    @field_validator(
        "width", "height_track", "height_set", "visual_height", mode="before"
    )
    @classmethod
    def _default_empty_dimension(cls, value: Any, info) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            return _DIMENSION_DEFAULTS[info.field_name]
        return value

    @field_validator("width", "height_track", "height_set", "visual_height")
    @classmethod
    def _positive_dimension(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("dimensions must be positive integers")
        return value

    @field_validator(
        "autoplay",
        "hide_related",
        "show_artwork",
        "show_comments",
        "show_playcount",
        mode="before",
    )
    @classmethod
    def _empty_checkbox_is_false(cls, value: Any) -> Any:
        # Unchecked checkboxes are stored as an empty string.
        if value is None or value == "":
            return False
        return value

    @property
    def is_visual(self) -> bool:
        return self.player_type == PlayerType.VISUAL

    def summary(self) -> List[str]:
        """Short description shown next to the formatter in the CMS UI."""
        return ["Displays the SoundCloud player."]


def to_flag(value: bool) -> str:
    """Player parameters are encoded as the literal strings true/false."""
    return "true" if value else "false"


@dataclass(frozen=True)
class EmbedSuccess:
    html: str

    @property
    def available(self) -> bool:
        return True


@dataclass(frozen=True)
class EmbedUnavailable:
    source_url: str
    reason: str = ""

    @property
    def available(self) -> bool:
        return False


EmbedResult = Union[EmbedSuccess, EmbedUnavailable]


@dataclass(frozen=True)
class RewriteParameters:
    """
    Values written onto the embed markup.

    - attributes : iframe attributes (width, height)
    - params     : player query parameters, in rewrite order
    """

    attributes: Dict[str, str]
    params: Dict[str, str]


@dataclass(frozen=True)
class HeightResolution:
    height: int
    is_set: bool


@dataclass
class RenderedElement:
    markup: str
    available: bool
    allowed_tags: Tuple[str, ...] = field(default_factory=tuple)


class ClientEmbedSettings(BaseModel):
    """Per-item payload consumed by the page-side initializer."""

    id: str
    url: str
    autoplay: str
    maxheight: int
    showartwork: str
    showplaycount: str
    color: str
