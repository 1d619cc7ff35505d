# tests/test_nav_grid.py
"""
Unit tests for NavGrid construction and queries.
"""

from __future__ import annotations

import pytest

from nav import CellState, Glyphs, MalformedGridError, NavGrid, build_grid


SAMPLE_ROWS = [
    "G-----",
    "XXXXX-",
    "S-X-X-",
    "--X-X-",
    "--X-X-",
    "------",
]


def test_build_sample_map_records_markers_and_blocks() -> None:
    grid = build_grid(SAMPLE_ROWS, require_markers=True)

    assert (grid.width, grid.height) == (6, 6)
    assert grid.start == (0, 2)
    assert grid.goal == (0, 0)

    # markers are walkable
    assert grid.is_walkable(0, 2)
    assert grid.is_walkable(0, 0)

    # row 1 is blocked except the last column
    for x in range(5):
        assert grid.state_at(x, 1) is CellState.BLOCKED
        assert not grid.is_walkable(x, 1)
    assert grid.is_walkable(5, 1)


def test_markers_are_optional_by_default() -> None:
    grid = build_grid(["---", "-X-"])

    assert grid.start is None
    assert grid.goal is None
    assert grid.state_at(1, 1) is CellState.BLOCKED


def test_out_of_bounds_is_not_walkable() -> None:
    grid = build_grid(["--", "--"])

    for x, y in [(-1, 0), (0, -1), (2, 0), (0, 2), (100, 100)]:
        assert not grid.in_bounds(x, y)
        assert not grid.is_walkable(x, y)
        assert grid.state_at(x, y) is None


def test_neighbors_order_is_west_east_north_south() -> None:
    grid = build_grid(["---", "---", "---"])

    assert grid.neighbors_4dir((1, 1)) == [(0, 1), (2, 1), (1, 0), (1, 2)]


def test_neighbors_skip_blocked_and_out_of_bounds() -> None:
    grid = build_grid([
        "-X-",
        "---",
    ])

    # corner: west and north are outside, east is blocked
    assert grid.neighbors_4dir((0, 0)) == [(0, 1)]
    # bottom middle: north is blocked
    assert grid.neighbors_4dir((1, 1)) == [(0, 1), (2, 1)]
    # a coordinate outside the grid only sees in-bounds walkable cells
    assert grid.neighbors_4dir((-1, 1)) == [(0, 1)]


def test_walkable_cells_row_major() -> None:
    grid = build_grid(["-X", "X-"])

    assert list(grid.walkable_cells()) == [(0, 0), (1, 1)]


def test_custom_glyphs() -> None:
    glyphs = Glyphs(blocked="#", free=".", start="A", goal="B")
    grid = build_grid(["A.#", "..B"], glyphs=glyphs, require_markers=True)

    assert grid.start == (0, 0)
    assert grid.goal == (2, 1)
    assert not grid.is_walkable(2, 0)
    # the default blocked glyph means nothing here
    assert build_grid(["X"], glyphs=glyphs).is_walkable(0, 0)


def test_grid_is_immutable() -> None:
    grid = build_grid(["--"])

    with pytest.raises(AttributeError):
        grid.width = 5  # type: ignore[misc]
    assert isinstance(grid, NavGrid)


@pytest.mark.parametrize(
    "rows",
    [
        [],
        [""],
        ["---", "--"],
        ["--", "---"],
    ],
)
def test_malformed_shapes(rows) -> None:
    with pytest.raises(MalformedGridError):
        build_grid(rows)


def test_ragged_row_reports_row_index() -> None:
    with pytest.raises(MalformedGridError) as excinfo:
        build_grid(["---", "---", "-"])

    assert excinfo.value.row == 2


def test_duplicate_markers_rejected() -> None:
    with pytest.raises(MalformedGridError):
        build_grid(["S-S"])
    with pytest.raises(MalformedGridError):
        build_grid(["G", "G"])


def test_missing_markers_rejected_only_when_required() -> None:
    build_grid(["S--"])

    with pytest.raises(MalformedGridError):
        build_grid(["S--"], require_markers=True)
    with pytest.raises(MalformedGridError):
        build_grid(["--G"], require_markers=True)


def test_malformed_grid_error_is_value_error() -> None:
    assert issubclass(MalformedGridError, ValueError)
