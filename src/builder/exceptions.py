"""
Exceptions raised by the link builder.

All failures are raised synchronously at the call that receives the bad value,
before any builder state is touched.
"""

from typing import Optional


class LinkBuilderError(Exception):
    """Base exception for link building operations."""
    pass


class InvalidArgumentError(LinkBuilderError, ValueError):
    """Raised when a required argument is missing, blank, or malformed."""

    def __init__(self, message: str, parameter_name: Optional[str] = None):
        self.parameter_name = parameter_name
        self.reason = message
        if parameter_name:
            message = f"{message} (Parameter '{parameter_name}')"
        super().__init__(message)


class InvalidOperationError(LinkBuilderError, RuntimeError):
    """Raised when an operation is not valid in the builder's current state."""
    pass
