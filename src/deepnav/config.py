"""Navigator configuration.

NavigatorConfig is a frozen dataclass — immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class NavigatorConfig:
    """Navigator configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = NavigatorConfig(scheme="myapp", strict=True)
    """

    # Default scheme for schemeless URLs ("/user/1" -> "myapp://user/1")
    scheme: str | None = None

    # Raise SchemeRequiredError for schemeless URLs when no scheme is set.
    # Enable during development; production degrades to "no match".
    strict: bool = False

    # Log every successful match at INFO on the "deepnav.navigator" logger
    log_matches: bool = False
