"""
Deferred relative-URL recipe for a single pending link.

A LinkInformation holds either a literal relative URL, used verbatim, or a
relative prefix with route segments and query pairs that are assembled when the
owning builder is built.
"""

from typing import Any, Iterable, List, Optional
from urllib.parse import quote_plus

from .exceptions import InvalidArgumentError

BLANK_QUERY_NAME_MESSAGE = "Parameter names cannot be null, empty, or whitespace."


def stringify(item: Any) -> str:
    """Trimmed string form of a route or query token; None becomes empty."""
    if item is None:
        return ""
    return str(item).strip()


def flatten_query_pairs(query_items: Iterable[Any], parameter_name: str = "query_pairs") -> List[str]:
    """
    Flatten ``name, value, name, value, ...`` into ``name=value`` tokens.

    An odd-length sequence pads the last value with an empty string.

    Raises:
        InvalidArgumentError: If any name is None, empty, or whitespace
    """
    items = list(query_items)
    tokens = []

    for index in range(0, len(items), 2):
        name = stringify(items[index])
        value = stringify(items[index + 1]) if index + 1 < len(items) else ""

        if not name:
            raise InvalidArgumentError(BLANK_QUERY_NAME_MESSAGE, parameter_name)

        tokens.append(f"{name}={value}")

    return tokens


def encode_url(url: str) -> str:
    """Percent-encode everything but unreserved characters, space as '+'."""
    return quote_plus(url, safe="")


class LinkInformation:
    """URL-construction recipe for one link."""

    def __init__(
        self,
        relative_url: Optional[str] = None,
        route_items: Optional[Iterable[Any]] = None,
        query_items: Optional[Iterable[Any]] = None,
        external_base_url: Optional[str] = None,
    ):
        self.relative_url = relative_url.strip() if relative_url else ""
        self.route_items: List[Any] = list(route_items) if route_items is not None else []
        self.query_items: List[Any] = list(query_items) if query_items is not None else []
        self.external_base_url = external_base_url.strip() if external_base_url else None

    @classmethod
    def from_relative_url(cls, raw_relative_url: Optional[str], external_base_url: Optional[str] = None) -> "LinkInformation":
        """Literal shape: the trimmed relative URL is used as-is."""
        return cls(relative_url=raw_relative_url, external_base_url=external_base_url)

    @classmethod
    def from_items(
        cls,
        route_items: Optional[Iterable[Any]] = None,
        query_items: Optional[Iterable[Any]] = None,
        relative_url: Optional[str] = None,
    ) -> "LinkInformation":
        """Composed shape: route segments and query pairs resolved lazily."""
        return cls(relative_url=relative_url, route_items=route_items, query_items=query_items)

    @property
    def is_literal(self) -> bool:
        return not self.route_items and not self.query_items

    @property
    def is_external(self) -> bool:
        return self.external_base_url is not None

    def with_query_items(self, query_items: Iterable[Any]) -> "LinkInformation":
        """Copy of this recipe with ``query_items`` appended after the existing ones."""
        return LinkInformation(
            relative_url=self.relative_url,
            route_items=self.route_items,
            query_items=self.query_items + list(query_items),
            external_base_url=self.external_base_url,
        )

    def get_url(self, encode: bool = False) -> str:
        """
        Resolve the relative URL.

        Pure function of the current recipe, so it can be called once per build.

        Args:
            encode: Percent-encode the resolved string

        Returns:
            The relative URL, possibly empty
        """
        if self.is_literal:
            url = self.relative_url
        else:
            route = "/".join(
                segment for segment in (stringify(item) for item in self.route_items) if segment
            )
            query = "&".join(flatten_query_pairs(self.query_items, "query_items"))

            prefix = self.relative_url.rstrip("/") if route else self.relative_url
            url = "/".join(part for part in (prefix, route) if part)
            if query:
                separator = "&" if "?" in url else "?"
                url = f"{url}{separator}{query}"

        return encode_url(url) if encode else url

    def __repr__(self) -> str:
        return (
            f"LinkInformation(relative_url={self.relative_url!r}, "
            f"route_items={self.route_items!r}, query_items={self.query_items!r}, "
            f"external_base_url={self.external_base_url!r})"
        )
