"""Central error types used across the package."""

from __future__ import annotations


class TrackViewError(RuntimeError):
    """Base error for GPX track view failures."""


class GpxLoadError(TrackViewError):
    """Raised when a GPX file is missing or cannot be parsed."""


class UnsupportedMutationError(TrackViewError, TypeError):
    """Raised when a view state receives an object it cannot apply."""


__all__ = [
    "TrackViewError",
    "GpxLoadError",
    "UnsupportedMutationError",
]
