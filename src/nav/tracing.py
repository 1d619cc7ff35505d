# src/nav/tracing.py
"""
Tracing for A* searches.

A SearchTracer is handed to find_path() and receives one record per
expansion and per relaxation. Tests and debugging tools read the records
back; optionally each record is also logged at DEBUG level.

It does NOT:
- Influence the search
- Persist anything
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Deque, List, Optional, Union

from .grid import Coord


@dataclass(frozen=True)
class ExpansionRecord:
    """A cell moved from the open set to the closed set."""

    coord: Coord
    g: float
    f: float


@dataclass(frozen=True)
class RelaxationRecord:
    """A cheaper route to coord was found through parent."""

    coord: Coord
    old_g: float
    new_g: float
    parent: Coord


TraceRecord = Union[ExpansionRecord, RelaxationRecord]


class SearchTracer:
    """
    In-memory search tracer with optional logging.

    Keeps a rolling buffer of the most recent records; max_records bounds
    memory on large maps.
    """

    def __init__(
        self,
        *,
        logger: Optional[logging.Logger] = None,
        max_records: int = 100_000,
        log_records: bool = False,
    ) -> None:
        self._logger = logger or logging.getLogger("nav.search")
        self._records: Deque[TraceRecord] = deque(maxlen=max_records)
        self._log_records = log_records

    # ------------------------------------------------------------------
    # Hooks called by find_path
    # ------------------------------------------------------------------

    def on_expand(self, coord: Coord, g: float, f: float) -> None:
        record = ExpansionRecord(coord=coord, g=g, f=f)
        self._records.append(record)
        if self._log_records:
            self._logger.debug("expand coord=%s g=%s f=%s", coord, g, f)

    def on_relax(self, coord: Coord, old_g: float, new_g: float, parent: Coord) -> None:
        record = RelaxationRecord(coord=coord, old_g=old_g, new_g=new_g, parent=parent)
        self._records.append(record)
        if self._log_records:
            self._logger.debug(
                "relax coord=%s g=%s->%s parent=%s", coord, old_g, new_g, parent
            )

    # ------------------------------------------------------------------
    # Read back
    # ------------------------------------------------------------------

    def get_records(self) -> List[TraceRecord]:
        """Return a snapshot of all currently buffered records."""
        return list(self._records)

    def expansions(self) -> List[ExpansionRecord]:
        return [r for r in self._records if isinstance(r, ExpansionRecord)]

    def relaxations(self) -> List[RelaxationRecord]:
        return [r for r in self._records if isinstance(r, RelaxationRecord)]

    def clear(self) -> None:
        self._records.clear()
