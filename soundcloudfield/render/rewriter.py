"""Player parameter rewriting for SoundCloud embed markup.

The provider's embed fragment does not always carry every player parameter,
so each one is upserted: an existing ``key=value`` pair in the iframe ``src``
keeps its position and gets the configured value, a missing one is appended
to the end of the query string. Repeated keys collapse to a single
occurrence, which makes rewrite() idempotent.

The fragment is parsed rather than pattern-matched. Attribute values come
back entity-decoded (``&amp;`` becomes ``&``) and are written out as-is,
since the markup is embedded directly in the page.
"""

from typing import Dict, List, Mapping, Optional, Tuple

from soundcloudfield.core import MarkupError, PlayerSettings, RewriteParameters, to_flag

from .sanitize import parse_fragment, serialize_tag

# Fixed rewrite order for the player query parameters.
PLAYER_PARAMS = (
    "auto_play",
    "show_comments",
    "show_playcount",
    "show_artwork",
    "color",
    "visual",
)


def build_rewrite_parameters(
    width: int, height: int, settings: PlayerSettings
) -> RewriteParameters:
    values = {
        "auto_play": to_flag(settings.autoplay),
        "show_comments": to_flag(settings.show_comments),
        "show_playcount": to_flag(settings.show_playcount),
        "show_artwork": to_flag(settings.show_artwork),
        "color": settings.color,
        "visual": to_flag(settings.is_visual),
    }
    return RewriteParameters(
        attributes={"width": f"{width}%", "height": str(height)},
        params={name: values[name] for name in PLAYER_PARAMS},
    )


def _split_query(query: str) -> List[Tuple[str, Optional[str]]]:
    pairs: List[Tuple[str, Optional[str]]] = []
    for chunk in query.split("&"):
        if not chunk:
            continue
        key, sep, value = chunk.partition("=")
        pairs.append((key, value if sep else None))
    return pairs


def _join_query(pairs: List[Tuple[str, Optional[str]]]) -> str:
    return "&".join(key if value is None else f"{key}={value}" for key, value in pairs)


def upsert_query_params(src: str, params: Mapping[str, str]) -> str:
    """
    Replace-if-present-else-append each of `params` in the query of `src`.

    Raw values of untouched pairs are kept byte for byte.
    """
    url, hash_sep, fragment = src.partition("#")
    base, _, query = url.partition("?")
    pairs = _split_query(query)

    for name, value in params.items():
        positions = [i for i, (key, _) in enumerate(pairs) if key == name]
        if not positions:
            pairs.append((name, value))
            continue
        pairs[positions[0]] = (name, value)
        for i in reversed(positions[1:]):
            del pairs[i]

    rebuilt = f"{base}?{_join_query(pairs)}" if pairs else base
    return f"{rebuilt}{hash_sep}{fragment}"


def rewrite_markup(
    html: str,
    attributes: Optional[Mapping[str, str]] = None,
    params: Optional[Mapping[str, str]] = None,
) -> str:
    """
    Upsert iframe `attributes` and `src` query `params` on the first iframe
    of `html`, returning the iframe alone.

    Raises MarkupError when the fragment holds no iframe.
    """
    soup = parse_fragment(html or "")
    iframe = soup.find("iframe")
    if iframe is None:
        raise MarkupError("Embed markup does not contain an iframe")

    attrs: Dict[str, Optional[str]] = dict(iframe.attrs)
    for name, value in (attributes or {}).items():
        attrs[name] = value
    if params:
        attrs["src"] = upsert_query_params(attrs.get("src") or "", params)

    return serialize_tag("iframe", attrs)


def rewrite(html: str, width: int, height: int, settings: PlayerSettings) -> str:
    """
    Apply the configured width (percent), height (px) and player parameters
    to the provider's embed markup.
    """
    parameters = build_rewrite_parameters(width, height, settings)
    return rewrite_markup(html, parameters.attributes, parameters.params)
