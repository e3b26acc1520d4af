"""Manual fleet placement edits used during setup.

Every helper returns the updated fleet, or ``None`` when the edit is rejected
and the caller's fleet stays as it was.
"""

from __future__ import annotations

from planestrike.game.core.models import (
    PLANE_COUNT,
    Direction,
    Fleet,
    Plane,
    Point,
    footprint,
    make_plane,
)
from planestrike.game.core.placement import is_valid_placement


def plane_at_head(fleet: Fleet, point: Point) -> Plane | None:
    """Return the plane whose head sits on ``point``."""
    for plane in fleet:
        if plane.head == point:
            return plane
    return None


def place_plane(
    fleet: Fleet,
    head: Point,
    direction: Direction,
    plane_id: str,
    *,
    count: int = PLANE_COUNT,
) -> Fleet | None:
    """Add a new plane if the fleet has room and the footprint is legal."""
    if len(fleet) >= count or fleet.by_id(plane_id) is not None:
        return None
    if not is_valid_placement(footprint(head, direction), fleet):
        return None
    return fleet.with_plane(make_plane(plane_id, head, direction))


def move_plane(fleet: Fleet, plane_id: str, head: Point) -> Fleet | None:
    """Move an existing plane's head, keeping its direction."""
    plane = fleet.by_id(plane_id)
    if plane is None:
        return None
    return _apply_edit(fleet, plane.moved_to(head))


def turn_plane(fleet: Fleet, plane_id: str, direction: Direction) -> Fleet | None:
    """Rotate an existing plane around its head."""
    plane = fleet.by_id(plane_id)
    if plane is None:
        return None
    return _apply_edit(fleet, plane.turned_to(direction))


def remove_plane(fleet: Fleet, plane_id: str) -> Fleet | None:
    if fleet.by_id(plane_id) is None:
        return None
    return fleet.without(plane_id)


def _apply_edit(fleet: Fleet, edited: Plane) -> Fleet | None:
    others = fleet.without(edited.id)
    if not is_valid_placement(edited.cells, others):
        return None
    return fleet.replaced(edited)
