"""Grid loader — parses hex grid definitions into HexGrid models.

Two layouts are accepted, optionally combined in one file:

- ``blocked``: list of ``[q, r, s]`` or axial ``[q, r]`` entries
- ``tiles``: dict of ``{"q,r,s": "tile_type"}`` (or ``"q,r"``) where
  tile_type is one of:
  - "blocked" / "void": impassable, opaque
  - anything else: open

Optional top-level keys ``radius`` and ``center`` bound the grid.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import yaml

from hexcube.models.grid import HexGrid
from hexcube.models.hex import Hex
from hexcube.util.errors import InvalidCoordinate

log = logging.getLogger(__name__)

BLOCKING_TILES = frozenset({"blocked", "void"})


def parse_hex(value: str | Sequence[int]) -> Hex:
    """Parse ``"q,r,s"``, ``"q,r"``, ``[q, r, s]`` or ``[q, r]`` into a Hex.

    Raises:
        InvalidCoordinate: On a malformed entry or a non-zero sum.
    """
    parts: Sequence[Any] = value.split(",") if isinstance(value, str) else value
    if not isinstance(value, str):
        for p in parts:
            if not isinstance(p, int) or isinstance(p, bool):
                raise InvalidCoordinate(f"Hex components must be int, got {p!r} in {value!r}")
    try:
        coords = [int(p) for p in parts]
    except (TypeError, ValueError) as e:
        raise InvalidCoordinate(f"Malformed hex coordinate {value!r}") from e

    if len(coords) == 2:
        return Hex.from_axial(*coords)
    if len(coords) == 3:
        return Hex(*coords)
    raise InvalidCoordinate(f"Expected 2 or 3 components, got {value!r}")


def load_grid(path: str | Path) -> HexGrid:
    """Load a hex grid from a YAML file.

    Args:
        path: Path to the grid YAML file.

    Returns:
        Populated HexGrid instance.
    """
    path = Path(path)
    with path.open() as f:
        data: dict[str, Any] = yaml.safe_load(f) or {}

    grid = load_grid_from_tiles(data.get("tiles") or {})
    grid.block(*(parse_hex(entry) for entry in data.get("blocked") or []))

    if data.get("radius") is not None:
        grid.radius = int(data["radius"])
    if data.get("center") is not None:
        grid.center = parse_hex(data["center"])

    log.info("Loaded grid from %s: %d blocked cells, radius %s",
             path, len(grid.blocked), grid.radius)
    return grid


def load_grid_from_tiles(tiles: dict[str, str]) -> HexGrid:
    """Load a HexGrid from a tiles dictionary.

    Args:
        tiles: Dict of {"q,r,s": "tile_type"}; see module docstring.

    Returns:
        HexGrid whose blocked set holds every blocking tile.
    """
    grid = HexGrid()
    for key, tile_type in tiles.items():
        if tile_type in BLOCKING_TILES:
            grid.blocked.add(parse_hex(key))
    return grid
