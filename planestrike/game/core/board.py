"""Per-side cell status grid."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

import numpy as np

from planestrike.game.core.models import GRID_SIZE, CellStatus, Point
from planestrike.game.core.placement import in_bounds

_VALID_STATUSES = np.array([int(status) for status in CellStatus], dtype=np.int64)


def _empty_grid(size: int) -> np.ndarray:
    grid = np.zeros((size, size), dtype=np.int8)
    grid.setflags(write=False)
    return grid


@dataclass(frozen=True, slots=True, eq=False)
class BoardData:
    """Numpy-backed, read-only status grid indexed as ``cells[y, x]``.

    Updates never touch the existing array; ``with_updates`` returns a new
    board so callers can detect changes by value.
    """

    size: int = GRID_SIZE
    cells: np.ndarray | None = None

    def __post_init__(self) -> None:
        if self.cells is None:
            object.__setattr__(self, "cells", _empty_grid(self.size))
            return
        if self.cells.shape != (self.size, self.size):
            raise ValueError(
                f"Board grid shape {self.cells.shape} does not match size {self.size}."
            )
        if self.cells.size and not np.isin(self.cells, _VALID_STATUSES).all():
            raise ValueError("Board grid contains values that are not cell statuses.")
        grid = self.cells.astype(np.int8)
        grid.setflags(write=False)
        object.__setattr__(self, "cells", grid)

    @classmethod
    def empty(cls, size: int = GRID_SIZE) -> BoardData:
        return cls(size=size, cells=_empty_grid(size))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoardData):
            return NotImplemented
        return self.size == other.size and bool(np.array_equal(self.cells, other.cells))

    def __hash__(self) -> int:
        return hash((self.size, self.cells.tobytes()))

    def in_bounds(self, point: Point) -> bool:
        return in_bounds(point, self.size)

    def status_at(self, point: Point) -> CellStatus:
        """Return the status of one cell."""
        if not self.in_bounds(point):
            raise IndexError(f"Point ({point.x}, {point.y}) is outside the board.")
        return CellStatus(int(self.cells[point.y, point.x]))

    def is_empty(self, point: Point) -> bool:
        return self.in_bounds(point) and self.cells[point.y, point.x] == CellStatus.EMPTY

    def with_updates(self, updates: Mapping[Point, CellStatus]) -> BoardData:
        """Return a new board with the listed cells changed.

        Statuses only move forward: EMPTY to any status, HIT to KILL. Anything
        else is rejected so a resolved cell can never be reverted.
        """
        grid = self.cells.copy()
        for point, status in updates.items():
            current = self.status_at(point)
            if not _allowed_transition(current, status):
                raise ValueError(
                    f"Illegal transition {current.name} -> {status.name} at ({point.x}, {point.y})."
                )
            grid[point.y, point.x] = int(status)
        grid.setflags(write=False)
        return BoardData(size=self.size, cells=grid)

    def empty_cells(self) -> list[Point]:
        """List EMPTY cells in row-major order."""
        ys, xs = np.nonzero(self.cells == CellStatus.EMPTY)
        return [Point(int(x), int(y)) for y, x in zip(ys, xs)]

    def count(self, status: CellStatus) -> int:
        return int(np.count_nonzero(self.cells == status))

    def rows(self) -> list[list[CellStatus]]:
        """Return the grid as nested lists of statuses, row by row."""
        return [[CellStatus(int(value)) for value in row] for row in self.cells]


def _allowed_transition(current: CellStatus, new: CellStatus) -> bool:
    if current == new:
        return True
    if current is CellStatus.EMPTY:
        return True
    return current is CellStatus.HIT and new is CellStatus.KILL
