"""Fleet validation and random fleet generation."""

from __future__ import annotations

import random
import string
from collections.abc import Collection

from planestrike.game.core.models import (
    DIRECTIONS,
    GRID_SIZE,
    PLANE_COUNT,
    PLANE_SIZE,
    Fleet,
    Plane,
    Point,
    footprint,
    make_plane,
)
from planestrike.game.core.placement import is_valid_placement

_ID_ALPHABET = string.digits + string.ascii_lowercase
_ID_LENGTH = 9


def new_plane_id(rng: random.Random, taken: Collection[str] = ()) -> str:
    """Draw a short base-36 id from ``rng`` that is not in ``taken``."""
    while True:
        candidate = "".join(rng.choices(_ID_ALPHABET, k=_ID_LENGTH))
        if candidate not in taken:
            return candidate


def validate_fleet(fleet: Fleet, *, count: int = PLANE_COUNT) -> tuple[bool, str]:
    """Validate that a fleet is complete, in bounds and non-overlapping."""
    if len(fleet) != count:
        return False, f"Fleet must contain exactly {count} planes."

    seen_ids: set[str] = set()
    accepted: list[Plane] = []
    for plane in fleet:
        if plane.id in seen_ids:
            return False, f"Duplicate plane id: {plane.id}."
        seen_ids.add(plane.id)
        if len(plane.cells) != PLANE_SIZE or plane.cells != footprint(plane.head, plane.direction):
            return False, f"Plane {plane.id} footprint does not match its head and direction."
        if not is_valid_placement(plane.cells, accepted):
            return False, f"Invalid placement for plane {plane.id}."
        accepted.append(plane)
    return True, ""


def random_fleet(
    rng: random.Random,
    *,
    count: int = PLANE_COUNT,
    size: int = GRID_SIZE,
    max_attempts: int = 10_000,
) -> Fleet:
    """Generate a non-overlapping fleet by rejection sampling heads and directions."""
    fleet = Fleet()
    for _ in range(max_attempts):
        if len(fleet) == count:
            return fleet
        head = Point(rng.randrange(size), rng.randrange(size))
        direction = rng.choice(DIRECTIONS)
        cells = footprint(head, direction)
        if not is_valid_placement(cells, fleet, size):
            continue
        plane_id = new_plane_id(rng, {plane.id for plane in fleet})
        fleet = fleet.with_plane(make_plane(plane_id, head, direction))
    if len(fleet) == count:
        return fleet
    raise RuntimeError("Failed to generate random fleet placement.")
