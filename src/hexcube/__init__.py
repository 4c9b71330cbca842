"""Cube-coordinate hex grid geometry and search.

Usage:
    from hexcube import Hex, find_path

    path = find_path(Hex(0, 0, 0), Hex(2, -1, -1), blocked=set())
"""

from hexcube.engine.hex_pathfinding import (
    find_path,
    reachable,
    reachable_by_distance,
    require_path,
)
from hexcube.loaders.grid_config_loader import GridConfig, load_grid_config
from hexcube.loaders.grid_loader import load_grid
from hexcube.models.fractional_hex import FractionalHex
from hexcube.models.grid import HexGrid
from hexcube.models.hex import DIAGONAL, ORTHOGONAL, ZERO, Hex
from hexcube.util.errors import HexGridError, InvalidCoordinate, InvalidRotation, PathNotFound
from hexcube.util.hex_math import (
    hex_distance,
    hex_linedraw,
    hex_polygon,
    hex_range,
    hex_ring,
    hex_spiral,
    line_of_sight,
)

__version__ = "0.1.0"

__all__ = [
    "DIAGONAL",
    "ORTHOGONAL",
    "ZERO",
    "FractionalHex",
    "GridConfig",
    "Hex",
    "HexGrid",
    "HexGridError",
    "InvalidCoordinate",
    "InvalidRotation",
    "PathNotFound",
    "find_path",
    "hex_distance",
    "hex_linedraw",
    "hex_polygon",
    "hex_range",
    "hex_ring",
    "hex_spiral",
    "line_of_sight",
    "load_grid",
    "load_grid_config",
    "reachable",
    "reachable_by_distance",
    "require_path",
]
