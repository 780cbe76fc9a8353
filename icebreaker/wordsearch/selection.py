"""Turns a pointer drag gesture into an ordered selection path."""

import logging
from typing import List

from pydantic import BaseModel, PrivateAttr

from .models import Cell, SelectionPath


logger = logging.getLogger(__name__)


class SelectionTracker(BaseModel):
    """
    Tracks the cells a user drags across, in encounter order.

    Revisited cells are ignored. By default any cell may extend the path and
    shape is left to matching; with ``strict`` only cells continuing a
    straight line from the previous cell are accepted.

    Attributes:
        strict: Enforce straight-line adjacency while dragging
    """

    strict: bool = False
    _path: List[Cell] = PrivateAttr(default_factory=list)
    _active: bool = PrivateAttr(default=False)

    @property
    def in_progress(self) -> bool:
        """Whether a drag is currently active."""
        return self._active

    @property
    def path(self) -> SelectionPath:
        """Snapshot of the in-progress path."""
        return tuple(self._path)

    def begin(self, cell: Cell) -> None:
        """Start a new path containing exactly ``cell``."""
        if self._active:
            logger.warning("Selection started while another was in progress; discarding %s", self.path)
        self._path = [Cell(*cell)]
        self._active = True

    def extend(self, cell: Cell) -> None:
        """Append ``cell`` unless idle, already on the path, or (strict) off-line."""
        if not self._active:
            return
        cell = Cell(*cell)
        if cell in self._path:
            return
        if self.strict and not self._continues_line(cell):
            logger.debug("Ignoring off-line cell %s", cell)
            return
        self._path.append(cell)

    def end(self) -> SelectionPath:
        """Finish the drag, returning its path and resetting to idle."""
        path = self.path
        self._path = []
        self._active = False
        return path

    def cancel(self) -> None:
        """Abort the drag without a result."""
        self._path = []
        self._active = False

    def _continues_line(self, cell: Cell) -> bool:
        last = self._path[-1]
        dr, dc = cell.row - last.row, cell.col - last.col
        if max(abs(dr), abs(dc)) != 1:
            return False
        if len(self._path) < 2:
            return True
        prev = self._path[-2]
        return (last.row - prev.row, last.col - prev.col) == (dr, dc)
