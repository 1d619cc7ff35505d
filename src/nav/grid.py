# occupancy grid parsed from character rows
# src/nav/grid.py
"""
NavGrid: static occupancy grid for 4-directional pathfinding.

This module only knows about walkability. It:
- Parses character rows into FREE / BLOCKED cells.
- Records optional start / goal markers for callers.
- Answers bounds, walkability and neighbor queries.

Search bookkeeping (costs, parents) is NOT stored here; see pathfinder.py.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Sequence, Tuple

# (x, y) integer coordinates; x is the column, y is the row
Coord = Tuple[int, int]

# West, east, north, south. Fixed so tie-breaks are reproducible.
NEIGHBOR_OFFSETS: Tuple[Coord, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


class CellState(Enum):
    FREE = "free"
    BLOCKED = "blocked"


class MalformedGridError(ValueError):
    """Raised when character rows cannot be turned into a NavGrid."""

    def __init__(self, message: str, row: Optional[int] = None) -> None:
        super().__init__(message)
        self.row = row


@dataclass(frozen=True)
class Glyphs:
    """Characters used in map text."""

    blocked: str = "X"
    free: str = "-"
    start: str = "S"
    goal: str = "G"


DEFAULT_GLYPHS = Glyphs()


@dataclass(frozen=True)
class NavGrid:
    """
    Read-only occupancy grid.

    Responsibilities:
    - Provide walkability tests (is_walkable).
    - Provide neighbor coordinates for pathfinding.

    It does NOT:
    - Hold g/f/parent values.
    - Change after construction.
    """

    width: int
    height: int
    cells: Tuple[Tuple[CellState, ...], ...]  # [y][x]
    start: Optional[Coord] = None
    goal: Optional[Coord] = None

    # ------------------------------------------------------------------
    # Core queries
    # ------------------------------------------------------------------

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def state_at(self, x: int, y: int) -> Optional[CellState]:
        """Occupancy of (x, y), or None when out of bounds."""
        if not self.in_bounds(x, y):
            return None
        return self.cells[y][x]

    def is_walkable(self, x: int, y: int) -> bool:
        """False when (x, y) is out of bounds or BLOCKED."""
        return self.state_at(x, y) is CellState.FREE

    def neighbors_4dir(self, coord: Coord) -> list[Coord]:
        """
        Return the walkable orthogonal neighbors of coord.

        Order is always west, east, north, south. Neighbors outside the
        grid or BLOCKED are dropped rather than raising.
        """
        x, y = coord
        out: list[Coord] = []
        for dx, dy in NEIGHBOR_OFFSETS:
            nx, ny = x + dx, y + dy
            if self.is_walkable(nx, ny):
                out.append((nx, ny))
        return out

    def walkable_cells(self) -> Iterator[Coord]:
        """Yield every FREE cell in row-major order."""
        for y, row in enumerate(self.cells):
            for x, state in enumerate(row):
                if state is CellState.FREE:
                    yield (x, y)


# ----------------------------------------------------------------------
# Construction
# ----------------------------------------------------------------------


def build_grid(
    rows: Sequence[str],
    *,
    glyphs: Glyphs = DEFAULT_GLYPHS,
    require_markers: bool = False,
) -> NavGrid:
    """
    Parse rows of characters into a NavGrid.

    - glyphs.blocked marks a BLOCKED cell; every other character is FREE.
    - glyphs.start / glyphs.goal record the start / goal coordinates.
      Each may appear at most once.

    Raises MalformedGridError for empty input, ragged rows, duplicated
    markers, or (with require_markers=True) a missing marker.
    """
    if not rows:
        raise MalformedGridError("Grid has no rows")

    width = len(rows[0])
    if width == 0:
        raise MalformedGridError("Grid rows must not be empty", row=0)

    cells: list[Tuple[CellState, ...]] = []
    start: Optional[Coord] = None
    goal: Optional[Coord] = None

    for y, row in enumerate(rows):
        if len(row) != width:
            raise MalformedGridError(
                f"Row {y} has length {len(row)}, expected {width}", row=y
            )

        parsed: list[CellState] = []
        for x, ch in enumerate(row):
            if ch == glyphs.blocked:
                parsed.append(CellState.BLOCKED)
                continue

            if ch == glyphs.start:
                if start is not None:
                    raise MalformedGridError(
                        f"Duplicate start marker {ch!r} at {(x, y)}, first at {start}",
                        row=y,
                    )
                start = (x, y)
            elif ch == glyphs.goal:
                if goal is not None:
                    raise MalformedGridError(
                        f"Duplicate goal marker {ch!r} at {(x, y)}, first at {goal}",
                        row=y,
                    )
                goal = (x, y)

            parsed.append(CellState.FREE)
        cells.append(tuple(parsed))

    if require_markers:
        if start is None:
            raise MalformedGridError(f"Missing start marker {glyphs.start!r}")
        if goal is None:
            raise MalformedGridError(f"Missing goal marker {glyphs.goal!r}")

    return NavGrid(
        width=width,
        height=len(rows),
        cells=tuple(cells),
        start=start,
        goal=goal,
    )
