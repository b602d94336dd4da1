"""Error taxonomy for oEmbed retrieval.

All of these are collapsed into an ``EmbedUnavailable`` result at the render
boundary; none of them is allowed to abort rendering of sibling items.
"""


class EmbedError(Exception):
    """Base class for every failure while producing embed markup."""

    def __init__(self, message: str, url: str = ""):
        super().__init__(message)
        self.url = url


class FetchFailure(EmbedError):
    """Transport error or non-2xx response from the oEmbed endpoint."""


class EmptyResponse(EmbedError):
    """The oEmbed endpoint answered with a blank body."""


class DecodeFailure(EmbedError):
    """Malformed JSON, or a payload without a usable ``html`` field."""


class MarkupError(DecodeFailure):
    """The embed fragment does not contain an ``<iframe>`` to rewrite."""
