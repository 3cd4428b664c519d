"""Error types raised by the grid model and path search."""

from __future__ import annotations


class GridError(Exception):
    """Base error for grid setup and search faults."""


class OutOfBoundsError(GridError, IndexError):
    """Raised when a coordinate lies outside the grid or its open interior."""


class MapFormatError(GridError, ValueError):
    """Raised when a text map cannot be turned into a grid."""


class CorruptParentChainError(GridError, RuntimeError):
    """Raised when parent links do not lead back to the start cell."""


__all__ = [
    "GridError",
    "OutOfBoundsError",
    "MapFormatError",
    "CorruptParentChainError",
]
