# src/nav/__init__.py
"""
Grid navigation.

Provides:
- NavGrid / build_grid: static occupancy grid parsed from character rows
- find_path: A* search returning a PathfindingResult
- SearchTracer: optional per-search expansion / relaxation records
"""

from __future__ import annotations

from .grid import (
    DEFAULT_GLYPHS,
    CellState,
    Coord,
    Glyphs,
    MalformedGridError,
    NavGrid,
    build_grid,
)
from .pathfinder import PathfindingResult, find_path, manhattan
from .tracing import SearchTracer

__all__ = [
    "DEFAULT_GLYPHS",
    "CellState",
    "Coord",
    "Glyphs",
    "MalformedGridError",
    "NavGrid",
    "build_grid",
    "PathfindingResult",
    "find_path",
    "manhattan",
    "SearchTracer",
]
