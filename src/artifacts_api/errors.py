"""Error taxonomy for request construction.

- InvalidInput: caller input violated a validated value constraint
- EncodingError: a header value, path parameter or body could not be encoded

Transport and decode errors belong to the collaborators that do I/O and parsing.
"""

from typing import Any


class ArtifactsApiError(Exception):
    """Base class for every error raised while building a request."""


class InvalidInput(ArtifactsApiError, ValueError):
    """A validated value could not be constructed from the raw input."""

    def __init__(self, field: str, constraint: str, value: Any, message: str = ""):
        self.field = field
        self.constraint = constraint
        self.value = value
        detail = f": {message}" if message else ""
        super().__init__(f"invalid {field} {value!r} ({constraint}){detail}")


class EncodingError(ArtifactsApiError, ValueError):
    """A request descriptor could not be encoded for transmission."""
