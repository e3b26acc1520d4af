"""Placement legality checks."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from planestrike.game.core.models import GRID_SIZE, Fleet, Plane, Point


def in_bounds(point: Point, size: int = GRID_SIZE) -> bool:
    """Return whether the coordinate is in board bounds."""
    return 0 <= point.x < size and 0 <= point.y < size


def is_valid_placement(
    cells: Sequence[Point], others: Iterable[Plane], size: int = GRID_SIZE
) -> bool:
    """Return whether ``cells`` fit on the board without touching ``others``.

    ``others`` must not contain the plane being placed or moved, so a plane can
    be checked against the rest of its fleet while it is repositioned.
    """
    if not all(in_bounds(cell, size) for cell in cells):
        return False
    if isinstance(others, Fleet):
        occupied = others.occupied()
    else:
        occupied = {cell for plane in others for cell in plane.cells}
    return not any(cell in occupied for cell in cells)
