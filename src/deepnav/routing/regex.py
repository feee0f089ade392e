"""Single-pass regex substitution used by the URL normalizer."""

import logging
import re

logger = logging.getLogger("deepnav.routing")


def replace_regex(pattern: str, repl: str, string: str) -> str:
    """Replace every non-overlapping match of *pattern* in *string*.

    An uncompilable *pattern* leaves *string* unchanged. The patterns the
    normalizer passes are fixed; do not feed untrusted patterns here and
    rely on the silent fallback.
    """
    try:
        regex = re.compile(pattern)
    except re.error as exc:
        logger.debug("Ignoring invalid pattern %r: %s", pattern, exc)
        return string
    return regex.sub(repl, string)
