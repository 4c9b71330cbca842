"""Tests for HexGrid — bounds, blocking, and the search wrappers."""

import pytest

from hexcube.loaders.grid_config_loader import GridConfig
from hexcube.models.grid import HexGrid
from hexcube.models.hex import ZERO, Hex


def _make_wall_grid(radius: int = 4) -> HexGrid:
    """Bounded grid with a wall along q == 1, open at both ends."""
    wall = [Hex(1, r, -1 - r) for r in range(-radius + 1, radius - 1)]
    return HexGrid(blocked=set(wall), radius=radius)


class TestHexGridBounds:
    def test_unbounded_contains_everything(self):
        g = HexGrid()
        assert g.contains(Hex(100, -50, -50))

    def test_bounded_contains(self):
        g = HexGrid(radius=2)
        assert g.contains(Hex(2, -2, 0))
        assert not g.contains(Hex(3, -2, -1))

    def test_outside_counts_as_blocked(self):
        g = HexGrid(radius=2)
        assert Hex(3, 0, -3) in g
        assert Hex(1, 0, -1) not in g

    def test_offset_center(self):
        g = HexGrid(radius=1, center=Hex(5, -5, 0))
        assert g.contains(Hex(5, -4, -1))
        assert not g.contains(ZERO)

    def test_non_hex_membership(self):
        assert (1, 0, -1) not in HexGrid(blocked={Hex(1, 0, -1)})

    def test_cells_excludes_blocked(self):
        g = HexGrid(blocked={ZERO}, radius=2)
        cells = g.cells()
        assert len(cells) == 18
        assert ZERO not in cells

    def test_cells_needs_radius(self):
        with pytest.raises(ValueError):
            HexGrid().cells()


class TestHexGridBlocking:
    def test_block_then_blocked(self):
        g = HexGrid()
        g.block(Hex(1, 0, -1), Hex(0, 1, -1))
        assert g.is_blocked(Hex(1, 0, -1))
        assert g.is_blocked(Hex(0, 1, -1))

    def test_unblock_frees_cell(self):
        g = HexGrid(blocked={Hex(1, 0, -1)})
        g.unblock(Hex(1, 0, -1))
        assert not g.is_blocked(Hex(1, 0, -1))

    def test_unblock_missing_is_noop(self):
        g = HexGrid()
        g.unblock(Hex(1, 0, -1))
        assert g.blocked == set()


class TestHexGridSearch:
    def test_path_around_wall(self):
        g = _make_wall_grid()
        start, goal = Hex(0, 0, 0), Hex(2, 0, -2)
        path = g.path(start, goal)
        assert path is not None
        assert path[0] == start and path[-1] == goal
        assert not any(h in g.blocked for h in path)
        assert all(g.contains(h) for h in path)
        assert len(path) - 1 > start.distance_to(goal)

    def test_destination_outside_bounds(self):
        g = HexGrid(radius=2)
        assert g.path(ZERO, Hex(4, 0, -4)) is None

    def test_sealed_off_destination_terminates(self):
        goal = Hex(2, -1, -1)
        g = HexGrid(blocked=set(goal.ring(1)), radius=3)
        assert g.path(ZERO, goal) is None

    def test_unbounded_uses_search_depth(self):
        goal = Hex(5, 0, -5)
        g = HexGrid(blocked=set(goal.ring(1)), max_search_depth=10)
        assert g.path(ZERO, goal) is None

    def test_reachable_clipped_to_bounds(self):
        g = HexGrid(radius=1)
        assert set(g.reachable(ZERO, 5)) == set(ZERO.disk(1))

    def test_line_of_sight(self):
        g = HexGrid(blocked={Hex(1, 0, -1)})
        assert not g.line_of_sight(ZERO, Hex(3, 0, -3))
        assert g.line_of_sight(ZERO, Hex(0, 3, -3))


class TestHexGridFromConfig:
    def test_radius_and_depth_from_config(self):
        cfg = GridConfig(default_radius=3, max_search_depth=20)
        g = HexGrid.from_config(cfg, blocked=[Hex(1, 0, -1)])
        assert g.radius == 3
        assert g.max_search_depth == 20
        assert g.blocked == {Hex(1, 0, -1)}

    def test_default_config_is_unbounded(self):
        g = HexGrid.from_config(GridConfig())
        assert g.radius is None
        assert g.contains(Hex(50, -50, 0))
