"""Hexagonal coordinate system using cube coordinates (q, r, s).

Cube coordinates place every cell on the plane q + r + s = 0. Two fixed
direction tables drive every algorithm in the package:
- ``ORTHOGONAL``: the 6 edge neighbours O0..O5, clockwise starting east
- ``DIAGONAL``: the 6 vertex neighbours D0..D5, where Di lies between Oi and O(i+1)

Reference: https://www.redblobgames.com/grids/hexagons/
"""

from __future__ import annotations

from collections.abc import Container, Iterable
from dataclasses import dataclass
from typing import Optional

from hexcube.util.constants import ROTATION_STEP_DEGREES
from hexcube.util.errors import InvalidCoordinate, InvalidRotation


@dataclass(frozen=True)
class Hex:
    """Immutable cube hex coordinate.

    Attributes:
        q: East axis.
        r: North-west axis.
        s: South-west axis; always ``-q - r``.

    Raises:
        InvalidCoordinate: If the components are not integers or do not sum to zero.
    """

    q: int
    r: int
    s: int

    def __post_init__(self) -> None:
        for value in (self.q, self.r, self.s):
            if not isinstance(value, int) or isinstance(value, bool):
                raise InvalidCoordinate(f"Hex components must be int, got {value!r}")
        if self.q + self.r + self.s != 0:
            raise InvalidCoordinate(
                f"Sum of coordinates must be zero, got ({self.q}, {self.r}, {self.s})"
            )

    @classmethod
    def from_axial(cls, q: int, r: int) -> Hex:
        """Build a Hex from axial (q, r); s is derived."""
        return cls(q, r, -q - r)

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.q, self.r, self.s)

    # -- Arithmetic ------------------------------------------------------

    def add(self, other: Hex) -> Hex:
        return Hex(self.q + other.q, self.r + other.r, self.s + other.s)

    def subtract(self, other: Hex) -> Hex:
        return Hex(self.q - other.q, self.r - other.r, self.s - other.s)

    def multiply(self, k: int) -> Hex:
        return Hex(self.q * k, self.r * k, self.s * k)

    def __add__(self, other: Hex) -> Hex:
        if not isinstance(other, Hex):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Hex) -> Hex:
        if not isinstance(other, Hex):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, k: int) -> Hex:
        if not isinstance(k, int):
            return NotImplemented
        return self.multiply(k)

    __rmul__ = __mul__

    def __neg__(self) -> Hex:
        return Hex(-self.q, -self.r, -self.s)

    # -- Geometry --------------------------------------------------------

    def length(self) -> int:
        """Distance from the origin. |q|+|r|+|s| is always even."""
        return (abs(self.q) + abs(self.r) + abs(self.s)) // 2

    def distance_to(self, other: Hex) -> int:
        """Hex grid distance (number of steps along hex edges)."""
        return self.subtract(other).length()

    def neighbor(self, direction: int) -> Hex:
        """Edge-adjacent cell in ``ORTHOGONAL[direction % 6]``."""
        return self.add(ORTHOGONAL[direction % 6])

    def neighbors(self) -> list[Hex]:
        """Return the 6 edge-adjacent cells, in ``ORTHOGONAL`` order."""
        return [self.add(unit) for unit in ORTHOGONAL]

    def diagonal_neighbor(self, direction: int) -> Hex:
        """Vertex-adjacent cell in ``DIAGONAL[direction % 6]``."""
        return self.add(DIAGONAL[direction % 6])

    def diagonal_neighbors(self) -> list[Hex]:
        """Return the 6 vertex-adjacent cells (distance 2), in ``DIAGONAL`` order."""
        return [self.add(unit) for unit in DIAGONAL]

    def rotate_left(self) -> Hex:
        """One 60° step: (q, r, s) -> (-s, -q, -r)."""
        return Hex(-self.s, -self.q, -self.r)

    def rotate_right(self) -> Hex:
        """One 60° step the other way: (q, r, s) -> (-r, -s, -q)."""
        return Hex(-self.r, -self.s, -self.q)

    def rotate(self, degrees: int) -> Hex:
        """Rotate about the origin.

        Positive angles apply :meth:`rotate_left` once per 60°, negative
        angles apply :meth:`rotate_right`.

        Raises:
            InvalidRotation: If ``degrees`` is not a multiple of 60.
        """
        if degrees % ROTATION_STEP_DEGREES != 0:
            raise InvalidRotation(f"Rotation must be a multiple of 60 degrees, got {degrees}")
        steps = (abs(degrees) // ROTATION_STEP_DEGREES) % 6
        h = self
        for _ in range(steps):
            h = h.rotate_left() if degrees > 0 else h.rotate_right()
        return h

    # -- Regions ---------------------------------------------------------

    def disk(self, radius: int) -> list[Hex]:
        """Return all hexes within `radius` steps (inclusive), in row order.

        Contains exactly 3n²+3n+1 cells; empty for a negative radius.
        """
        results: list[Hex] = []
        for dq in range(-radius, radius + 1):
            for dr in range(max(-radius, -dq - radius), min(radius, -dq + radius) + 1):
                results.append(Hex(self.q + dq, self.r + dr, self.s - dq - dr))
        return results

    def ring(self, radius: int) -> list[Hex]:
        """Return all hexes at exactly `radius` steps away.

        Walks clockwise from ``self + O4 * radius``. Radius 0 is the
        center alone; a negative radius yields an empty list.
        """
        if radius < 0:
            return []
        if radius == 0:
            return [self]
        results: list[Hex] = []
        h = self.add(ORTHOGONAL[4].multiply(radius))
        for unit in ORTHOGONAL:
            for _ in range(radius):
                results.append(h)
                h = h.add(unit)
        return results

    def spiral(self, radius: int) -> list[Hex]:
        """Center followed by rings 1..radius."""
        if radius < 0:
            return []
        results = [self]
        for k in range(1, radius + 1):
            results.extend(self.ring(k))
        return results

    # -- Lines, paths, visibility -----------------------------------------

    def line_to(self, other: Hex) -> list[Hex]:
        """Return the cells on the straight segment from self to other (inclusive)."""
        from hexcube.util.hex_math import hex_linedraw

        return hex_linedraw(self, other)

    def line_of_sight(self, other: Hex, blocked: Container[Hex]) -> bool:
        """True if no cell on the line to `other` is blocked."""
        from hexcube.util.hex_math import line_of_sight

        return line_of_sight(self, other, blocked)

    def path_to(
        self, destination: Hex, blocked: Container[Hex], max_depth: Optional[int] = None
    ) -> Optional[list[Hex]]:
        """Shortest path to `destination` avoiding `blocked`, or None."""
        from hexcube.engine.hex_pathfinding import find_path

        return find_path(self, destination, blocked, max_depth=max_depth)

    def reachable(self, steps: int, blocked: Container[Hex]) -> list[Hex]:
        """All cells reachable within `steps` moves avoiding `blocked`."""
        from hexcube.engine.hex_pathfinding import reachable

        return reachable(self, steps, blocked)

    @staticmethod
    def polygon(corners: Iterable[Hex]) -> set[Hex]:
        """Outline cells of the closed polygon through `corners`."""
        from hexcube.util.hex_math import hex_polygon

        return hex_polygon(corners)

    # -- Serialization ---------------------------------------------------

    def __repr__(self) -> str:
        return f"Hex({self.q}, {self.r}, {self.s})"


ZERO = Hex(0, 0, 0)

# The 6 edge directions, clockwise from east
ORTHOGONAL: tuple[Hex, ...] = (
    Hex(1, 0, -1),   # O0
    Hex(1, -1, 0),   # O1
    Hex(0, -1, 1),   # O2
    Hex(-1, 0, 1),   # O3
    Hex(-1, 1, 0),   # O4
    Hex(0, 1, -1),   # O5
)

# The 6 vertex directions, each between two edge directions
DIAGONAL: tuple[Hex, ...] = (
    Hex(2, -1, -1),  # D0
    Hex(1, -2, 1),   # D1
    Hex(-1, -1, 2),  # D2
    Hex(-2, 1, 1),   # D3
    Hex(-1, 2, -1),  # D4
    Hex(1, 1, -2),   # D5
)
