"""
Fluent HATEOAS link builder.

Accumulates rel/href pairs from literal paths, route segments, templates, and
query parameters, then resolves them into ``Link`` values.
"""

from .exceptions import InvalidArgumentError, InvalidOperationError, LinkBuilderError
from .link_builder import BuilderState, LinkBuilder, LinkEntry
from .link_information import LinkInformation

__all__ = [
    "BuilderState",
    "InvalidArgumentError",
    "InvalidOperationError",
    "LinkBuilder",
    "LinkBuilderError",
    "LinkEntry",
    "LinkInformation",
]
