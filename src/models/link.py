"""
Hypermedia link value produced by the link builder.
"""

from pydantic import BaseModel, Field

DEFAULT_LINK_METHOD = "GET"


class Link(BaseModel):
    """Represents a hypermedia link."""

    rel: str = Field(description="Relationship type (self, next, previous, etc.)")
    href: str = Field(description="Absolute URL of the linked resource")
    method: str = Field(default=DEFAULT_LINK_METHOD, description="HTTP method for the link")

    class Config:
        """Pydantic configuration."""
        from_attributes = True
        frozen = True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Link):
            return NotImplemented
        return (self.rel, self.href, self.method) == (other.rel, other.href, other.method)

    def __hash__(self) -> int:
        return hash((self.rel, self.href, self.method))

    def __str__(self) -> str:
        return f"{self.rel}: {self.href}"
