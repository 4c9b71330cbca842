"""Hexagonal grid snapshot.

Holds the set of blocked cells and an optional disk-shaped boundary.
A HexGrid can be passed anywhere a blocked-cell container is expected.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from hexcube.models.hex import ZERO, Hex
from hexcube.util.constants import DEFAULT_MAX_SEARCH_DEPTH

if TYPE_CHECKING:
    from hexcube.loaders.grid_config_loader import GridConfig


@dataclass
class HexGrid:
    """The playing field as a hexagonal grid.

    Attributes:
        blocked: Cells that cannot be entered or seen through.
        radius: If set, only cells within this distance of `center` exist;
            everything outside counts as blocked.
        center: Middle of the bounded disk.
        max_search_depth: Level limit handed to the pathfinder.
    """

    blocked: set[Hex] = field(default_factory=set)
    radius: Optional[int] = None
    center: Hex = ZERO
    max_search_depth: Optional[int] = DEFAULT_MAX_SEARCH_DEPTH

    @classmethod
    def from_config(cls, config: GridConfig, blocked: Iterable[Hex] = ()) -> HexGrid:
        """Build a grid whose bound and search limit come from `config`."""
        return cls(
            blocked=set(blocked),
            radius=config.default_radius,
            max_search_depth=config.max_search_depth,
        )

    # -- Queries ---------------------------------------------------------

    def contains(self, h: Hex) -> bool:
        """True if `h` lies inside the grid bound (blocked or not)."""
        return self.radius is None or self.center.distance_to(h) <= self.radius

    def is_blocked(self, h: Hex) -> bool:
        return h in self.blocked or not self.contains(h)

    def __contains__(self, h: object) -> bool:
        return isinstance(h, Hex) and self.is_blocked(h)

    def cells(self) -> list[Hex]:
        """All open cells of a bounded grid, in row order.

        Raises:
            ValueError: If the grid has no radius.
        """
        if self.radius is None:
            raise ValueError("An unbounded grid has no finite cell list")
        return [h for h in self.center.disk(self.radius) if h not in self.blocked]

    # -- Mutation --------------------------------------------------------

    def block(self, *cells: Hex) -> None:
        """Mark cells as impassable."""
        self.blocked.update(cells)

    def unblock(self, *cells: Hex) -> None:
        """Make cells passable again."""
        self.blocked.difference_update(cells)

    # -- Algorithms ------------------------------------------------------

    def path(self, source: Hex, destination: Hex) -> Optional[list[Hex]]:
        """Shortest path inside this grid, or None."""
        from hexcube.engine.hex_pathfinding import find_path

        return find_path(source, destination, self, max_depth=self._search_depth())

    def reachable(self, source: Hex, steps: int) -> list[Hex]:
        """Cells reachable from `source` in at most `steps` moves."""
        from hexcube.engine.hex_pathfinding import reachable

        return reachable(source, steps, self)

    def line_of_sight(self, a: Hex, b: Hex) -> bool:
        from hexcube.util.hex_math import line_of_sight

        return line_of_sight(a, b, self)

    # -- Internal --------------------------------------------------------

    def _search_depth(self) -> Optional[int]:
        # A bounded grid runs out of frontier on its own.
        if self.radius is not None:
            return None
        return self.max_search_depth
