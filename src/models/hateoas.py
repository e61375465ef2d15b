"""
HATEOAS (Hypermedia as the Engine of Application State) support.

Provides a links field for response models and lookups over built links.
"""

from typing import Iterable, List, Optional

from pydantic import BaseModel, Field

from builder.exceptions import InvalidOperationError
from builder.validation import check_not_blank, check_not_none
from models.link import Link

SELF_REL = "self"


class HATEOASMixin(BaseModel):
    """Mixin to add HATEOAS links to response models."""

    links: List[Link] = Field(default_factory=list, description="Hypermedia navigation links")

    def add_link(self, link: Link) -> None:
        """Add a hypermedia link to this resource."""
        self.links.append(link)

    def get_link(self, rel: str) -> Optional[Link]:
        """Get the first link with the given relationship type."""
        for link in self.links:
            if link.rel == rel:
                return link
        return None


def to_href(links: Iterable[Link], rel: str) -> Optional[str]:
    """
    Find the href of the link labeled ``rel``.

    Args:
        links: Built links to search
        rel: Relationship label to look for

    Returns:
        The href, or None when no link carries the label

    Raises:
        InvalidArgumentError: If links is None or rel is blank
        InvalidOperationError: If more than one link carries the label
    """
    check_not_none(links, "links")
    rel = check_not_blank(rel, "rel")

    matches = [link for link in links if link.rel == rel]
    if len(matches) > 1:
        raise InvalidOperationError(f"More than one link is labeled '{rel}'.")

    return matches[0].href if matches else None


def to_self_href(links: Iterable[Link]) -> Optional[str]:
    """Href of the ``self`` link."""
    return to_href(links, SELF_REL)
