"""Hex pathfinding on an unweighted grid.

Breadth-first search over the six edge neighbours of each cell. Blocked
cells are supplied by the caller as any container supporting ``in``
(a set, a list, a :class:`~hexcube.models.grid.HexGrid`, ...). The
container is only read, never stored.

This module provides:
- Pathfinding (layered BFS, shortest in edge count)
- Reachability (flood fill bounded by a step budget)
- Path validation (connectivity, no gaps)
- Path distance calculation and sub-path extraction
"""

from __future__ import annotations

import logging
from collections.abc import Container
from dataclasses import dataclass
from typing import Optional

from hexcube.models.hex import ORTHOGONAL, Hex
from hexcube.util.errors import PathNotFound

log = logging.getLogger(__name__)

_ROOT = -1


@dataclass(frozen=True)
class _Node:
    """Search node; `parent` indexes the arena, _ROOT for the source."""

    hex: Hex
    parent: int


def _unwind(nodes: list[_Node], index: int) -> list[Hex]:
    path: list[Hex] = []
    while index != _ROOT:
        node = nodes[index]
        path.append(node.hex)
        index = node.parent
    path.reverse()
    return path


def find_path(
    source: Hex,
    destination: Hex,
    blocked: Container[Hex],
    max_depth: Optional[int] = None,
) -> Optional[list[Hex]]:
    """Find the shortest path from source to destination.

    Expands one BFS level at a time, visiting neighbours in ``ORTHOGONAL``
    order, and stops as soon as the destination is generated. The source
    itself is never checked against `blocked`.

    Args:
        source: Start cell.
        destination: Goal cell.
        blocked: Impassable cells.
        max_depth: Give up after this many levels. Needed on an open plane
            when the destination may be walled off.

    Returns:
        List of Hex from source to destination (inclusive), or None if the
        destination is blocked (even when it equals the source),
        unreachable, or beyond `max_depth`.
    """
    if destination in blocked:
        log.debug("find_path %r -> %r: destination blocked", source, destination)
        return None
    if source == destination:
        return [source]

    visited: set[Hex] = {source}
    nodes: list[_Node] = [_Node(source, _ROOT)]
    frontier: list[int] = [0]
    depth = 0

    while frontier:
        if max_depth is not None and depth >= max_depth:
            log.debug("find_path %r -> %r: depth limit %d reached", source, destination, max_depth)
            return None
        depth += 1

        next_frontier: list[int] = []
        for index in frontier:
            current = nodes[index].hex
            for unit in ORTHOGONAL:
                candidate = current.add(unit)
                if candidate in visited or candidate in blocked:
                    continue
                visited.add(candidate)
                nodes.append(_Node(candidate, index))
                if candidate == destination:
                    log.debug("find_path %r -> %r: found at depth %d, %d nodes",
                              source, destination, depth, len(nodes))
                    return _unwind(nodes, len(nodes) - 1)
                next_frontier.append(len(nodes) - 1)
        frontier = next_frontier

    log.debug("find_path %r -> %r: frontier exhausted after %d levels", source, destination, depth)
    return None


def require_path(
    source: Hex,
    destination: Hex,
    blocked: Container[Hex],
    max_depth: Optional[int] = None,
) -> list[Hex]:
    """Like :func:`find_path` but raises instead of returning None.

    Raises:
        PathNotFound: If no path exists.
    """
    path = find_path(source, destination, blocked, max_depth=max_depth)
    if path is None:
        raise PathNotFound(source, destination)
    return path


def reachable_by_distance(source: Hex, steps: int, blocked: Container[Hex]) -> list[list[Hex]]:
    """Flood fill from source, grouped by distance.

    Returns:
        ``fringes[k]`` holds the cells first reached after exactly k moves;
        ``fringes[0] == [source]``. Trailing empty fringes are dropped.
    """
    visited: set[Hex] = {source}
    fringes: list[list[Hex]] = [[source]]

    for _ in range(steps):
        fringe: list[Hex] = []
        for h in fringes[-1]:
            for unit in ORTHOGONAL:
                candidate = h.add(unit)
                if candidate in visited or candidate in blocked:
                    continue
                visited.add(candidate)
                fringe.append(candidate)
        if not fringe:
            break
        fringes.append(fringe)

    return fringes


def reachable(source: Hex, steps: int, blocked: Container[Hex]) -> list[Hex]:
    """Return every cell reachable from source within `steps` moves.

    Each cell appears once, in discovery order, source first. A step
    budget of zero or less yields just the source.
    """
    visited: set[Hex] = {source}
    found: list[Hex] = [source]
    fringe: list[Hex] = [source]

    for _ in range(steps):
        next_fringe: list[Hex] = []
        for h in fringe:
            for unit in ORTHOGONAL:
                candidate = h.add(unit)
                if candidate in visited or candidate in blocked:
                    continue
                visited.add(candidate)
                found.append(candidate)
                next_fringe.append(candidate)
        if not next_fringe:
            break
        fringe = next_fringe

    return found


def validate_path(path: list[Hex]) -> bool:
    """Check that each consecutive pair in the path are hex neighbors.

    Args:
        path: Ordered list of hex coordinates.

    Returns:
        True if the path is valid (all steps are between neighbors).
    """
    if len(path) < 2:
        return True
    return all(path[i].distance_to(path[i + 1]) == 1 for i in range(len(path) - 1))


def path_distance(path: list[Hex]) -> int:
    """Return the number of steps in a path (len - 1)."""
    return max(0, len(path) - 1)


def sub_path_from(path: list[Hex], start_index: int) -> list[Hex]:
    """Extract a sub-path starting from a given index.

    Args:
        path: The full path.
        start_index: Index to start from (clamped to valid range).

    Returns:
        Sub-path from start_index to the end.
    """
    start_index = max(0, min(start_index, len(path) - 1))
    return path[start_index:]
