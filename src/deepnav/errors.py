"""deepnav exception hierarchy.

Shared across the navigator, registry, and CLI so every module raises
and catches the same types. The matching engine itself never raises for
an unmatched URL; it returns ``None``.
"""


class DeepNavError(Exception):
    """Base for all deepnav-specific errors."""


class ConfigurationError(DeepNavError):
    """Raised when a registration or navigator setting is invalid.

    Typically raised at startup while URL patterns are being mapped.
    """


class SchemeRequiredError(ConfigurationError):
    """A URL has no scheme and the navigator has no default scheme.

    Only raised when strict validation is enabled; otherwise the URL is
    passed through unchanged and simply never matches.
    """

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"Either navigator or URL should have scheme: {url!r}")
