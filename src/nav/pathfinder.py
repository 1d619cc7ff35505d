# A* pathfinding over NavGrid
# src/nav/pathfinder.py
"""
A* pathfinding over NavGrid.

- Uses Manhattan distance heuristic.
- 4-directional neighbors, unit step cost.
- Per-call SearchState; the grid itself is never mutated, so one NavGrid
  can serve any number of searches.

Open-set selection picks the lowest f; among equal f the cell that entered
the open set first wins. A heap keyed on (f, open_order) with lazy deletion
gives that order without a linear scan.
"""

from __future__ import annotations

import heapq
import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .grid import Coord, NavGrid
from .tracing import SearchTracer

log = logging.getLogger(__name__)

Path = Tuple[Coord, ...]

STEP_COST = 1

REASON_NO_PATH = "no_path_found"
REASON_START_BLOCKED = "start_blocked"


@dataclass(frozen=True)
class PathfindingResult:
    """Structured result for a pathfinding attempt."""

    path: Path
    success: bool
    reason: str | None = None
    nodes_expanded: int = 0

    @property
    def steps(self) -> int:
        """Number of unit moves along the path (0 when not found)."""
        return max(len(self.path) - 1, 0)

    def __bool__(self) -> bool:
        return self.success


@dataclass
class SearchState:
    """
    Bookkeeping for a single search.

    Missing keys mean "never reached": g and f read as +inf and the cell
    has no parent.
    """

    g: Dict[Coord, float] = field(default_factory=dict)
    f: Dict[Coord, float] = field(default_factory=dict)
    parent: Dict[Coord, Coord] = field(default_factory=dict)

    def g_of(self, coord: Coord) -> float:
        return self.g.get(coord, math.inf)

    def f_of(self, coord: Coord) -> float:
        return self.f.get(coord, math.inf)


def manhattan(a: Coord, b: Coord) -> int:
    """Manhattan distance; admissible and consistent for 4-dir unit moves."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def find_path(
    grid: NavGrid,
    start: Coord,
    goal: Coord,
    *,
    tracer: Optional[SearchTracer] = None,
) -> PathfindingResult:
    """
    A* search for a path from start to goal on grid.

    Returns a PathfindingResult with:
      - path: coordinates ordered start -> goal inclusive, or () if none
      - success: bool
      - reason: if not success, "no_path_found" or "start_blocked"
      - nodes_expanded: number of cells moved to the closed set

    Raises ValueError if start or goal lies outside the grid.
    """
    for label, coord in (("start", start), ("goal", goal)):
        if not grid.in_bounds(*coord):
            raise ValueError(
                f"{label} {coord} is outside the {grid.width}x{grid.height} grid"
            )

    log.debug("find_path start=%s goal=%s grid=%dx%d", start, goal, grid.width, grid.height)

    if start == goal:
        return _finish(PathfindingResult(path=(start,), success=True))

    if not grid.is_walkable(*start):
        return _finish(
            PathfindingResult(path=(), success=False, reason=REASON_START_BLOCKED)
        )

    state = SearchState()
    state.g[start] = 0
    state.f[start] = manhattan(start, goal)

    # open_order remembers when each cell first entered the open set
    open_order: Dict[Coord, int] = {start: 0}
    open_heap: List[Tuple[float, int, Coord]] = [(state.f[start], 0, start)]
    closed: set[Coord] = set()
    nodes_expanded = 0

    while open_heap:
        f_current, _, current = heapq.heappop(open_heap)

        # stale entry: already closed, or superseded by a cheaper push
        if current in closed or f_current != state.f_of(current):
            continue

        if current == goal:
            return _finish(
                PathfindingResult(
                    path=_reconstruct_path(state.parent, current),
                    success=True,
                    nodes_expanded=nodes_expanded,
                )
            )

        closed.add(current)
        nodes_expanded += 1
        g_current = state.g[current]
        if tracer is not None:
            tracer.on_expand(current, g_current, f_current)

        for nxt in grid.neighbors_4dir(current):
            if nxt in closed:
                continue

            if nxt not in open_order:
                open_order[nxt] = len(open_order)

            candidate_g = g_current + STEP_COST
            old_g = state.g_of(nxt)
            if candidate_g >= old_g:
                continue

            state.parent[nxt] = current
            state.g[nxt] = candidate_g
            state.f[nxt] = candidate_g + manhattan(nxt, goal)
            heapq.heappush(open_heap, (state.f[nxt], open_order[nxt], nxt))

            if tracer is not None:
                tracer.on_relax(nxt, old_g, candidate_g, current)

    return _finish(
        PathfindingResult(
            path=(),
            success=False,
            reason=REASON_NO_PATH,
            nodes_expanded=nodes_expanded,
        )
    )


def _reconstruct_path(parent: Dict[Coord, Coord], current: Coord) -> Path:
    """Follow parent links back to the start and return start -> goal."""
    path: List[Coord] = [current]
    while current in parent:
        current = parent[current]
        path.append(current)
    path.reverse()
    return tuple(path)


def _finish(result: PathfindingResult) -> PathfindingResult:
    if result.success:
        log.debug(
            "find_path found steps=%d expanded=%d", result.steps, result.nodes_expanded
        )
    else:
        log.info(
            "find_path failed reason=%s expanded=%d", result.reason, result.nodes_expanded
        )
    return result
