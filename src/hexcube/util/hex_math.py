"""Hex math utilities — geometry functions for hexagonal grids.

All functions operate on cube-coordinate :class:`Hex` values and never
mutate their arguments.
Reference: https://www.redblobgames.com/grids/hexagons/
"""

from __future__ import annotations

from collections.abc import Container, Iterable

from hexcube.models.fractional_hex import FractionalHex
from hexcube.models.hex import ZERO, Hex
from hexcube.util.constants import LINE_NUDGE


def hex_length(h: Hex) -> int:
    """Distance from the origin."""
    return h.length()


def hex_distance(a: Hex, b: Hex) -> int:
    """Compute the hex grid distance between two coordinates."""
    return a.distance_to(b)


def hex_neighbors(coord: Hex) -> list[Hex]:
    """Return the 6 neighbors of a hex coordinate."""
    return coord.neighbors()


def hex_rotate(coord: Hex, degrees: int) -> Hex:
    """Rotate a coordinate about the origin by a multiple of 60 degrees."""
    return coord.rotate(degrees)


def hex_linedraw(a: Hex, b: Hex) -> list[Hex]:
    """Draw a line between two hex coordinates using linear interpolation.

    Returns a list of hex coordinates from a to b (inclusive), one per step.
    Both endpoints are nudged by ``LINE_NUDGE`` so an interpolated point
    never sits exactly on the edge between two cells.

    The segment is traced from the origin to ``b - a`` and shifted back by
    ``a`` after rounding, so float precision depends on the line length
    only, not on how far the cells are from the origin.
    """
    n = a.distance_to(b)
    start = FractionalHex.from_hex(ZERO, LINE_NUDGE)
    end = FractionalHex.from_hex(b - a, LINE_NUDGE)
    step = 1.0 / max(n, 1)
    return [a + FractionalHex.lerp(start, end, step * i).round() for i in range(n + 1)]


def hex_range(center: Hex, radius: int) -> list[Hex]:
    """Return all hexes within `radius` distance from center (inclusive)."""
    return center.disk(radius)


def hex_disk(center: Hex, radius: int) -> set[Hex]:
    """Same cells as :func:`hex_range`, as a set."""
    return set(center.disk(radius))


def hex_ring(center: Hex, radius: int) -> list[Hex]:
    """Return all hexes at exactly `radius` distance from center."""
    return center.ring(radius)


def hex_spiral(center: Hex, radius: int) -> list[Hex]:
    """Return the center followed by every ring out to `radius`."""
    return center.spiral(radius)


def hex_polygon(corners: Iterable[Hex]) -> set[Hex]:
    """Trace the outline of a closed polygon.

    Lines are drawn between consecutive corners, wrapping from the last
    corner back to the first. No corners gives an empty set, a single
    corner gives just that cell.
    """
    corners = list(corners)
    outline: set[Hex] = set()
    for i, start in enumerate(corners):
        end = corners[(i + 1) % len(corners)]
        outline.update(hex_linedraw(start, end))
    return outline


def line_of_sight(a: Hex, b: Hex, blocked: Container[Hex]) -> bool:
    """True if no cell on the traced line a -> b (endpoints included) is blocked."""
    return not any(h in blocked for h in hex_linedraw(a, b))
