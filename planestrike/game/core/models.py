"""Core domain models used by game logic."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, replace
from enum import IntEnum, StrEnum

GRID_SIZE = 10
PLANE_COUNT = 3
PLANE_SIZE = 10


class Direction(StrEnum):
    """Direction the plane's nose points to."""

    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"


DIRECTIONS: tuple[Direction, ...] = (
    Direction.UP,
    Direction.DOWN,
    Direction.LEFT,
    Direction.RIGHT,
)


class CellStatus(IntEnum):
    """Status of a single board cell."""

    EMPTY = 0
    MISS = 1
    HIT = 2
    KILL = 3


class Turn(StrEnum):
    """Current turn owner."""

    PLAYER = "PLAYER"
    AI = "AI"


class GameStatus(StrEnum):
    """Lifecycle of a single game."""

    SETUP = "SETUP"
    PLAYING = "PLAYING"
    PLAYER_WON = "PLAYER_WON"
    AI_WON = "AI_WON"


@dataclass(frozen=True, slots=True)
class Point:
    """Board coordinate."""

    x: int
    y: int


# (behind, across) unit vectors: the body trails the head along ``behind``.
_AXES: dict[Direction, tuple[tuple[int, int], tuple[int, int]]] = {
    Direction.UP: ((0, 1), (1, 0)),
    Direction.DOWN: ((0, -1), (1, 0)),
    Direction.LEFT: ((1, 0), (0, 1)),
    Direction.RIGHT: ((-1, 0), (0, 1)),
}

# (steps behind the head, offsets across) for wing, fuselage and tail rows.
_BODY_ROWS: tuple[tuple[int, range], ...] = (
    (1, range(-2, 3)),
    (2, range(0, 1)),
    (3, range(-1, 2)),
)


def footprint(head: Point, direction: Direction) -> tuple[Point, ...]:
    """Compute the 10 cells of a plane, head first.

    No bounds or overlap checks are done here; see ``placement``.
    """
    (bx, by), (ax, ay) = _AXES[direction]
    cells: list[Point] = [head]
    for behind, across in _BODY_ROWS:
        for offset in across:
            cells.append(
                Point(head.x + bx * behind + ax * offset, head.y + by * behind + ay * offset)
            )
    return tuple(cells)


@dataclass(frozen=True, slots=True)
class Plane:
    """A placed plane. Build with ``make_plane`` so cells match head/direction."""

    id: str
    head: Point
    direction: Direction
    cells: tuple[Point, ...]
    is_destroyed: bool = False

    def owns(self, point: Point) -> bool:
        return point in self.cells

    def moved_to(self, head: Point) -> Plane:
        """Return a copy with a new head and re-derived footprint."""
        return make_plane(self.id, head, self.direction, is_destroyed=self.is_destroyed)

    def turned_to(self, direction: Direction) -> Plane:
        """Return a copy facing ``direction`` with re-derived footprint."""
        return make_plane(self.id, self.head, direction, is_destroyed=self.is_destroyed)

    def destroyed(self) -> Plane:
        return replace(self, is_destroyed=True)


def make_plane(
    plane_id: str, head: Point, direction: Direction, *, is_destroyed: bool = False
) -> Plane:
    """Create a plane whose cells are derived from ``head`` and ``direction``."""
    return Plane(
        id=plane_id,
        head=head,
        direction=direction,
        cells=footprint(head, direction),
        is_destroyed=is_destroyed,
    )


@dataclass(frozen=True, slots=True)
class Fleet:
    """Ordered collection of one side's planes."""

    planes: tuple[Plane, ...] = ()

    def __iter__(self) -> Iterator[Plane]:
        return iter(self.planes)

    def __len__(self) -> int:
        return len(self.planes)

    def by_id(self, plane_id: str) -> Plane | None:
        """Find plane by id."""
        for plane in self.planes:
            if plane.id == plane_id:
                return plane
        return None

    def owner_of(self, point: Point) -> Plane | None:
        """Return the plane occupying ``point``, if any."""
        for plane in self.planes:
            if plane.owns(point):
                return plane
        return None

    def occupied(self) -> set[Point]:
        return {cell for plane in self.planes for cell in plane.cells}

    def with_plane(self, plane: Plane) -> Fleet:
        return Fleet(planes=(*self.planes, plane))

    def replaced(self, plane: Plane) -> Fleet:
        """Return a fleet where the plane with the same id is swapped for ``plane``."""
        return Fleet(planes=tuple(plane if p.id == plane.id else p for p in self.planes))

    def without(self, plane_id: str) -> Fleet:
        return Fleet(planes=tuple(p for p in self.planes if p.id != plane_id))

    def all_destroyed(self) -> bool:
        """Return whether every plane is destroyed."""
        return all(plane.is_destroyed for plane in self.planes)

    def is_complete(self, count: int = PLANE_COUNT) -> bool:
        return len(self.planes) == count
