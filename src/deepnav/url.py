"""URL-like values.

Anything the navigator accepts as a URL, a plain string or a ``DeepURL``,
reduces to one canonical string via ``url_string()``. The matching engine
only ever looks at that string; the structured form exists for handlers
that want the query string.
"""

from dataclasses import dataclass
from functools import cached_property
from urllib.parse import SplitResult, urlsplit

from deepnav.query import QueryParams


@dataclass(frozen=True)
class DeepURL:
    """A URL string with lazily parsed structure.

    ``parsed`` is ``None`` when the string cannot be interpreted as a URL
    at all (``urlsplit`` rejects it, e.g. an unbalanced IPv6 bracket).
    """

    string: str

    def __str__(self) -> str:
        return self.string

    @cached_property
    def parsed(self) -> SplitResult | None:
        try:
            return urlsplit(self.string)
        except ValueError:
            return None

    @cached_property
    def query_params(self) -> QueryParams:
        """Query string parameters, e.g. ``title`` in ``myapp://alert?title=hi``."""
        if self.parsed is None:
            return QueryParams()
        return QueryParams(self.parsed.query)


type URLLike = str | DeepURL


def url_string(url: URLLike) -> str:
    """Return the canonical string of a URL-like value.

    Parsed ``SplitResult`` objects are rejected: ``geturl()`` drops an
    empty authority (``myapp:///x`` comes back as ``myapp:/x``), so the
    original text is no longer recoverable. Wrap the raw string in a
    ``DeepURL`` instead.
    """
    if isinstance(url, str):
        return url
    if isinstance(url, DeepURL):
        return url.string
    msg = f"Expected str or DeepURL, got {type(url).__name__}"
    raise TypeError(msg)


def as_url(url: URLLike) -> DeepURL:
    """Coerce a URL-like value to a ``DeepURL``."""
    if isinstance(url, DeepURL):
        return url
    return DeepURL(url_string(url))
