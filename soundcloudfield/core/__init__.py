"""Public façade for the soundcloudfield.core package.

This module exposes logging helpers, the JSON reader, error types and the
base models shared by the fetcher, the renderers and the API. Callers should
import these cross-cutting concerns from this façade instead of the internal
submodules.
"""

from .errors import DecodeFailure, EmbedError, EmptyResponse, FetchFailure, MarkupError
from .fs_utils import read_json
from .logging_config import configure_logging
from .logging_utils import (
    log_debug,
    log_error,
    log_info,
    log_step,
    log_success,
    log_warning,
)
from .models import (
    ClientEmbedSettings,
    EmbedResult,
    EmbedSuccess,
    EmbedUnavailable,
    HeightResolution,
    PlayerSettings,
    PlayerType,
    RenderedElement,
    RewriteParameters,
    TrackReference,
    to_flag,
)

__all__ = [
    "configure_logging",
    "log_debug",
    "log_info",
    "log_step",
    "log_success",
    "log_warning",
    "log_error",
    "read_json",
    "EmbedError",
    "FetchFailure",
    "EmptyResponse",
    "DecodeFailure",
    "MarkupError",
    "PlayerType",
    "PlayerSettings",
    "TrackReference",
    "EmbedResult",
    "EmbedSuccess",
    "EmbedUnavailable",
    "RewriteParameters",
    "HeightResolution",
    "RenderedElement",
    "ClientEmbedSettings",
    "to_flag",
]
