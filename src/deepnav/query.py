"""Query parameters of a deep link.

Query strings are stripped before matching, so placeholders never see
them. Handlers read them here instead::

    DeepURL("myapp://alert?title=Hello&tag=a&tag=b").query_params
    # QueryParams({'title': 'Hello', 'tag': 'a'})
"""

from collections.abc import Iterator, Mapping
from urllib.parse import parse_qs


class QueryParams(Mapping[str, str]):
    """Read-only view of a URL's query string.

    Indexing returns the first value for a name; ``get_list`` returns
    every value in the order they appear. Blank values (``flag=``) are
    kept as empty strings.
    """

    __slots__ = ("_values",)

    def __init__(self, query: str = "") -> None:
        self._values: dict[str, list[str]] = parse_qs(query, keep_blank_values=True)

    def __getitem__(self, name: str) -> str:
        return self._values[name][0]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"QueryParams({dict(self)!r})"

    def get_list(self, name: str) -> list[str]:
        """Every value given for *name*, or an empty list."""
        return list(self._values.get(name, ()))
