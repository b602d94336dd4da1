"""Public façade for the soundcloudfield.render package.

This module exposes both rendering paths (server and client), the height
resolver, the shared parameter rewriter, the output tag filter and the
client-side initializer. Other packages should import render behaviour from
this façade instead of the internal submodules.
"""

from .client import ClientRenderer, ClientRenderOutput, clean_css_identifier
from .height import resolve_height
from .initializer import ClientInitializer, InitState, Page, Placeholder
from .rewriter import (
    PLAYER_PARAMS,
    build_rewrite_parameters,
    rewrite,
    rewrite_markup,
    upsert_query_params,
)
from .sanitize import DEFAULT_ALLOWED_TAGS, filter_allowed_tags
from .server import ServerRenderer
from .templating import placeholder_markup, unavailable_message

__all__ = [
    "resolve_height",
    "PLAYER_PARAMS",
    "build_rewrite_parameters",
    "rewrite",
    "rewrite_markup",
    "upsert_query_params",
    "DEFAULT_ALLOWED_TAGS",
    "filter_allowed_tags",
    "ServerRenderer",
    "ClientRenderer",
    "ClientRenderOutput",
    "clean_css_identifier",
    "ClientInitializer",
    "InitState",
    "Page",
    "Placeholder",
    "placeholder_markup",
    "unavailable_message",
]
