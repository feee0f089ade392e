"""URL normalization.

Every URL — registered pattern or incoming link — goes through
``normalize_url()`` before matching, so both sides compare in the same
canonical form::

    "myapp:///////user///<id>//hello/??/#abc=/def" -> "myapp://user/<id>/hello"
"""

import logging

from deepnav.errors import SchemeRequiredError
from deepnav.routing.regex import replace_regex
from deepnav.url import URLLike, as_url, url_string

logger = logging.getLogger("deepnav.routing")


def url_with_scheme(scheme: str | None, url: URLLike, *, strict: bool = False) -> str:
    """Prepend *scheme* to *url* when it has none.

    ``"/user/1"`` with scheme ``"myapp"`` becomes ``"myapp://user/1"``.
    The result is ``scheme + ":/" + url``, so an empty scheme yields
    ``"://user/1"`` and a path without a leading slash yields
    ``"myapp:/user"``.

    Raises ``SchemeRequiredError`` when neither *url* nor *scheme* carries
    a scheme and *strict* is set. Without *strict* the URL is returned
    unchanged and will not match any scheme-qualified pattern.
    """
    string = url_string(url)
    if "://" in string:
        return string
    if scheme is not None:
        if not string.startswith("/"):
            logger.warning("URL pattern doesn't have leading slash(/): %r", string)
        return scheme + ":/" + string
    if strict:
        raise SchemeRequiredError(string)
    logger.warning("Either navigator or URL should have scheme: %r", string)
    return string


def normalize_url(url: URLLike, scheme: str | None = None, *, strict: bool = False) -> str:
    """Return the canonical string form of *url*.

    - Prepend *scheme* if the URL has none (see ``url_with_scheme``)
    - Drop the query string and fragment
    - Collapse redundant slashes after the scheme (``myapp:///x`` -> ``myapp://x``)
    - Collapse double slashes elsewhere (``a//b`` -> ``a/b``)
    - Remove trailing slashes

    A value that cannot be parsed as a URL is returned as-is.
    Normalizing twice gives the same result as normalizing once.
    """
    parsed = as_url(url)
    if parsed.parsed is None:
        return parsed.string

    string = url_with_scheme(scheme, parsed, strict=strict)
    string = string.split("?", 1)[0].split("#", 1)[0]
    string = replace_regex(r":/{3,}", "://", string)
    string = replace_regex(r"(?<!:)/{2,}", "/", string)
    string = replace_regex(r"/+$", "", string)
    return string
