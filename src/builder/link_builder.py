"""
Fluent builder for HATEOAS link collections.

A LinkBuilder holds a base URL and an ordered list of pending links. Callers
chain ``add_*`` calls and finish with ``build`` to get ``Link`` values:

    links = (
        LinkBuilder("https://foo.bar")
        .add_link("self", "WeatherForecast")
        .add_query_link("next", "WeatherForecast", "page", 3)
        .add_formatted_link("previous", "WeatherForecast?page={0}", 1, condition=page > 1)
        .build()
    )

Every ``add_*`` method takes a keyword-only ``condition``. A false condition
appends nothing and suppresses the next ``add_parameters`` call.
"""

import logging
from enum import Enum
from typing import Any, List, NamedTuple, Optional

from models.link import DEFAULT_LINK_METHOD, Link

from .exceptions import InvalidArgumentError, InvalidOperationError
from .link_information import LinkInformation, encode_url, flatten_query_pairs
from .validation import check_no_none_elements, check_not_blank

logger = logging.getLogger(__name__)

NO_LINKS_MESSAGE = "At least one link must be added before query parameters can be added."
FORMAT_MISMATCH_MESSAGE = "Format arguments do not match the placeholders in the template."


class BuilderState(str, Enum):
    """Outcome of the most recent add call."""

    ACTIVE = "active"
    SUPPRESSED_SINCE_LAST_ADD = "suppressed_since_last_add"


class LinkEntry(NamedTuple):
    """One pending link: its label, URL recipe, and HTTP method."""

    rel: str
    information: LinkInformation
    method: str = DEFAULT_LINK_METHOD


def join_url(base_url: str, relative_url: str) -> str:
    """Join a base URL and a relative URL with exactly one '/' between them."""
    if not relative_url:
        return base_url
    return f"{base_url.rstrip('/')}/{relative_url.lstrip('/')}"


class LinkBuilder:
    """
    Accumulates rel/href pairs for one response.

    Not safe for concurrent use. Create one per response and discard it once
    built.
    """

    def __init__(self, base_url: str):
        """
        Args:
            base_url: Scheme and host shared by all links, e.g. "https://foo.bar"

        Raises:
            InvalidArgumentError: If base_url is None, empty, or whitespace
        """
        self._base_url = check_not_blank(base_url, "base_url")
        self._entries: List[LinkEntry] = []
        self._state = BuilderState.ACTIVE

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def state(self) -> BuilderState:
        return self._state

    @property
    def last_ignored(self) -> bool:
        return self._state is BuilderState.SUPPRESSED_SINCE_LAST_ADD

    @property
    def entries(self) -> List[LinkEntry]:
        """Snapshot of the pending entries in insertion order."""
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"LinkBuilder(base_url={self._base_url!r}, entries={len(self._entries)}, state={self._state.value})"

    def _suppress(self, rel_label: Optional[str]) -> "LinkBuilder":
        self._state = BuilderState.SUPPRESSED_SINCE_LAST_ADD
        logger.debug(f"Skipped link '{rel_label}': condition was false")
        return self

    def _append_entry(self, condition: bool, rel_label: Optional[str], information: LinkInformation, method: str) -> "LinkBuilder":
        """Single path through which every add call appends an entry."""
        if not condition:
            return self._suppress(rel_label)

        rel = check_not_blank(rel_label, "rel_label")
        method = check_not_blank(method, "method").upper()

        self._entries.append(LinkEntry(rel, information, method))
        self._state = BuilderState.ACTIVE
        return self

    def add_link(
        self,
        rel_label: str,
        raw_relative_url: Optional[str] = None,
        *,
        condition: bool = True,
        method: str = DEFAULT_LINK_METHOD,
    ) -> "LinkBuilder":
        """
        Add a link whose relative URL is used verbatim.

        Args:
            rel_label: The label used for the link
            raw_relative_url: Relative URL; None or blank resolves to the base URL
            condition: When false, nothing is added and the next add_parameters is skipped
            method: HTTP method reported on the link

        Returns:
            This builder
        """
        return self._append_entry(
            condition, rel_label, LinkInformation.from_relative_url(raw_relative_url), method
        )

    def add_route_link(
        self,
        rel_label: str,
        *route_items: Any,
        condition: bool = True,
        method: str = DEFAULT_LINK_METHOD,
    ) -> "LinkBuilder":
        """
        Add a link whose relative URL is the route items joined with '/'.

        Raises:
            InvalidArgumentError: If any route item is None
        """
        if not condition:
            return self._suppress(rel_label)

        check_not_blank(rel_label, "rel_label")
        items = check_no_none_elements(route_items, "route_items")
        return self._append_entry(condition, rel_label, LinkInformation.from_items(route_items=items), method)

    def add_query_link(
        self,
        rel_label: str,
        relative_url: Optional[str],
        *query_pairs: Any,
        condition: bool = True,
        method: str = DEFAULT_LINK_METHOD,
    ) -> "LinkBuilder":
        """Add a route link for ``relative_url`` followed by ``query_pairs`` as its query string."""
        if not condition:
            return self._suppress(rel_label)

        # Pairs are validated before the route entry is appended.
        check_not_blank(rel_label, "rel_label")
        flatten_query_pairs(query_pairs)

        route_items = [relative_url] if relative_url is not None else []
        return self.add_route_link(rel_label, *route_items, method=method).add_parameters(*query_pairs)

    def add_formatted_link(
        self,
        rel_label: str,
        relative_url_format: str,
        *arguments: Any,
        condition: bool = True,
        method: str = DEFAULT_LINK_METHOD,
    ) -> "LinkBuilder":
        """
        Add a link from a positional template such as ``"WeatherForecast/{0}"``.

        Raises:
            InvalidArgumentError: If the template is blank or the arguments do not fit it
        """
        if not condition:
            return self._suppress(rel_label)

        template = check_not_blank(relative_url_format, "relative_url_format")
        check_not_blank(rel_label, "rel_label")

        try:
            relative_url = template.format(*arguments)
        except (AttributeError, IndexError, KeyError, TypeError, ValueError) as format_error:
            raise InvalidArgumentError(FORMAT_MISMATCH_MESSAGE, "arguments") from format_error

        return self.add_link(rel_label, relative_url, method=method)

    def add_external_link(
        self,
        external_base_url: str,
        rel_label: str,
        raw_relative_url: Optional[str] = None,
        *,
        condition: bool = True,
        method: str = DEFAULT_LINK_METHOD,
    ) -> "LinkBuilder":
        """Add a link resolved against another site's base URL instead of this builder's."""
        if not condition:
            return self._suppress(rel_label)

        external_base_url = check_not_blank(external_base_url, "external_base_url")
        information = LinkInformation.from_relative_url(raw_relative_url, external_base_url=external_base_url)
        return self._append_entry(condition, rel_label, information, method)

    def add_parameters(self, *query_pairs: Any) -> "LinkBuilder":
        """
        Append query parameters to the most recently added link.

        Skipped entirely when the previous add call had a false condition.
        The target is always the last entry, whatever its label.

        Raises:
            InvalidOperationError: If no link has been added yet
            InvalidArgumentError: If a parameter name is blank
        """
        if self.last_ignored:
            logger.debug("Skipped query parameters: previous link was not added")
            return self

        if not self._entries:
            raise InvalidOperationError(NO_LINKS_MESSAGE)

        flatten_query_pairs(query_pairs)

        rel, information, method = self._entries.pop()
        self._entries.append(LinkEntry(rel, information.with_query_items(query_pairs), method))
        logger.debug(f"Added {len(query_pairs)} query items to link '{rel}'")
        return self

    def _resolve(self, entry: LinkEntry, encode: bool) -> Link:
        relative_url = entry.information.get_url().lstrip("/")
        if encode:
            relative_url = encode_url(relative_url)
        base_url = entry.information.external_base_url or self._base_url
        return Link(rel=entry.rel, href=join_url(base_url, relative_url), method=entry.method)

    def build(self, encode: bool = False) -> List[Link]:
        """
        Resolve every pending link in insertion order.

        Does not change the builder, so it can be called repeatedly.

        Args:
            encode: Percent-encode the relative part of each href
        """
        return [self._resolve(entry, encode) for entry in self._entries]

    def build_encoded(self) -> List[Link]:
        """Build with every relative URL percent-encoded."""
        return self.build(encode=True)
