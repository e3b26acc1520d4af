from planestrike.game.core.models import (
    DIRECTIONS,
    Direction,
    Fleet,
    Point,
    footprint,
    make_plane,
)


def _offsets(head: Point, direction: Direction) -> set[tuple[int, int]]:
    return {(cell.x - head.x, cell.y - head.y) for cell in footprint(head, direction)}


def test_footprint_has_ten_distinct_cells_with_head_first() -> None:
    for x in range(-2, 12):
        for y in range(-2, 12):
            for direction in DIRECTIONS:
                cells = footprint(Point(x, y), direction)
                assert len(cells) == 10
                assert len(set(cells)) == 10
                assert cells[0] == Point(x, y)


def test_footprint_head_5_5_down_regression() -> None:
    cells = footprint(Point(5, 5), Direction.DOWN)
    assert len(cells) == 10
    assert Point(5, 5) in cells


def test_footprint_up_shape() -> None:
    assert footprint(Point(4, 2), Direction.UP) == (
        Point(4, 2),
        Point(2, 3),
        Point(3, 3),
        Point(4, 3),
        Point(5, 3),
        Point(6, 3),
        Point(4, 4),
        Point(3, 5),
        Point(4, 5),
        Point(5, 5),
    )


def test_footprint_directions_are_rotations_of_each_other() -> None:
    head = Point(5, 5)
    up = _offsets(head, Direction.UP)
    # Rotating UP by 90 degrees steps gives the other three orientations.
    assert _offsets(head, Direction.DOWN) == {(-dx, -dy) for dx, dy in up}
    assert _offsets(head, Direction.LEFT) == {(dy, dx) for dx, dy in up}
    assert _offsets(head, Direction.RIGHT) == {(-dy, -dx) for dx, dy in up}
    assert _offsets(head, Direction.LEFT) == {(dy, -dx) for dx, dy in up}


def test_plane_edits_rederive_cells() -> None:
    plane = make_plane("p1", Point(4, 0), Direction.UP)
    moved = plane.moved_to(Point(4, 5))
    turned = plane.turned_to(Direction.LEFT)
    assert moved.cells == footprint(Point(4, 5), Direction.UP)
    assert turned.cells == footprint(Point(4, 0), Direction.LEFT)
    assert moved.id == turned.id == "p1"
    assert plane.cells == footprint(Point(4, 0), Direction.UP)


def test_fleet_lookup_helpers(valid_fleet: Fleet) -> None:
    alpha = valid_fleet.by_id("alpha")
    assert alpha is not None
    assert valid_fleet.owner_of(Point(0, 1)) == alpha
    assert valid_fleet.owner_of(Point(5, 5)) is None
    assert valid_fleet.by_id("missing") is None
    assert len(valid_fleet.occupied()) == 30
    assert valid_fleet.is_complete()
    assert len(valid_fleet.without("alpha")) == 2


def test_fleet_all_destroyed(valid_fleet: Fleet) -> None:
    assert not valid_fleet.all_destroyed()
    fleet = valid_fleet
    for plane in valid_fleet:
        fleet = fleet.replaced(plane.destroyed())
    assert fleet.all_destroyed()
    assert [plane.id for plane in fleet] == ["alpha", "bravo", "charlie"]
