"""Exception hierarchy for hex grid operations.

Construction problems subclass ``ValueError`` and lookup failures subclass
``LookupError`` so callers can catch either the specific type or the
builtin family.
"""

from __future__ import annotations


class HexGridError(Exception):
    """Base class for all errors raised by hexcube."""


class InvalidCoordinate(HexGridError, ValueError):
    """A cube coordinate whose components do not sum to zero, or are not integers."""


class InvalidRotation(HexGridError, ValueError):
    """A rotation angle that is not a multiple of 60 degrees."""


class PathNotFound(HexGridError, LookupError):
    """No route exists between two cells.

    Attributes:
        source: Start cell of the search.
        destination: Requested end cell.
    """

    def __init__(self, source, destination) -> None:
        super().__init__(f"No path from {source!r} to {destination!r}")
        self.source = source
        self.destination = destination
