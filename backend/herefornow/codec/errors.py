"""Codec error taxonomy."""

from __future__ import annotations


class RenderError(Exception):
    """Base class for every error raised by the codec."""


class InvalidInputError(RenderError, ValueError):
    """Negative, non-integer or otherwise out-of-range input."""


class DataURIError(RenderError, ValueError):
    """A data URI with the wrong media prefix or an undecodable payload."""


def require_non_negative_int(value: object, name: str) -> int:
    """Return ``value`` if it is a plain non-negative int, else raise."""
    # bool is an int subclass; True must not render as one participant
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(f"{name} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise InvalidInputError(f"{name} must be non-negative, got {value}")
    return value
