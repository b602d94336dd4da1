"""Output filtering for embed markup.

The CMS renders player markup with an explicit tag allow-list (only
``<iframe>``). filter_allowed_tags() applies that allow-list: disallowed tags
are unwrapped (their text is kept), script-like elements are dropped with
their content, event-handler attributes and URLs with a scheme other than
http(s) are removed.

Attribute values are written back without re-encoding entities, so a decoded
``src`` keeps its literal ``&`` separators.
"""

import re
from html import escape
from typing import Iterable, Mapping, Optional, Sequence
from urllib.parse import urlsplit

from bs4 import BeautifulSoup
from bs4.element import NavigableString, Tag

DEFAULT_ALLOWED_TAGS = ("iframe",)

DROPPED_WITH_CONTENT = {"script", "style", "template"}
URL_ATTRIBUTES = {"src", "href"}
ALLOWED_URL_SCHEMES = {"", "http", "https"}
_URL_NOISE = re.compile(r"[\x00-\x20\x7f]+")


def parse_fragment(html: str) -> BeautifulSoup:
    # Keep "class" and friends as plain strings instead of lists.
    return BeautifulSoup(html, "html.parser", multi_valued_attributes=None)


def serialize_attributes(attrs: Mapping[str, Optional[str]]) -> str:
    parts = []
    for name, value in attrs.items():
        value = "" if value is None else str(value)
        parts.append(f'{name}="{value.replace(chr(34), "&quot;")}"')
    return " ".join(parts)


def serialize_tag(name: str, attrs: Mapping[str, Optional[str]], inner: str = "") -> str:
    rendered = serialize_attributes(attrs)
    opening = f"<{name} {rendered}>" if rendered else f"<{name}>"
    return f"{opening}{inner}</{name}>"


def _allowed_url(value) -> bool:
    """
    Only http(s) and scheme-less URLs survive. Browsers ignore whitespace and
    control characters inside a scheme, so they are removed before checking.
    """
    if not isinstance(value, str):
        return False
    cleaned = _URL_NOISE.sub("", value).lower()
    try:
        scheme = urlsplit(cleaned).scheme
    except ValueError:
        return False
    return scheme in ALLOWED_URL_SCHEMES


def _safe_attributes(tag: Tag) -> dict:
    attrs = {}
    for name, value in tag.attrs.items():
        if name.lower().startswith("on"):
            continue
        if name.lower() in URL_ATTRIBUTES and not _allowed_url(value):
            continue
        attrs[name] = value
    return attrs


def _render_children(node: Tag, allowed: Sequence[str]) -> str:
    return "".join(_render_node(child, allowed) for child in node.children)


def _render_node(node, allowed: Sequence[str]) -> str:
    if isinstance(node, Tag):
        if node.name in DROPPED_WITH_CONTENT:
            return ""
        inner = _render_children(node, allowed)
        if node.name in allowed:
            return serialize_tag(node.name, _safe_attributes(node), inner)
        return inner
    if type(node) is NavigableString:
        return escape(str(node), quote=False)
    # Comments, doctypes, processing instructions.
    return ""


def filter_allowed_tags(
    markup: str, allowed: Iterable[str] = DEFAULT_ALLOWED_TAGS
) -> str:
    """
    Strip every tag that is not in `allowed` from `markup`.
    """
    allowed = tuple(tag.lower() for tag in allowed)
    return _render_children(parse_fragment(markup), allowed)
