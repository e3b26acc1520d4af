"""Shot outcome evaluation (miss/hit/kill) with kill cascading."""

from __future__ import annotations

from dataclasses import dataclass

from planestrike.game.core.board import BoardData
from planestrike.game.core.models import CellStatus, Fleet, Point


@dataclass(frozen=True, slots=True)
class AttackResult:
    """Outcome of one resolved shot plus the updated defending side."""

    status: CellStatus
    fleet_destroyed: bool
    board: BoardData
    fleet: Fleet
    plane_id: str | None = None
    applied: bool = True


def resolve_attack(target: Point, board: BoardData, fleet: Fleet) -> AttackResult:
    """Resolve a shot at ``target`` against the defending board and fleet.

    A head shot destroys the plane: the head becomes KILL and every cell of
    that plane already marked HIT is upgraded to KILL. Cells of the plane that
    were never fired upon stay EMPTY.

    Firing outside the board or at a cell that is not EMPTY is a no-op and
    returns ``applied=False`` with the inputs unchanged. For such a result
    ``status`` is the cell's current status, or EMPTY when the target is
    off the board; only ``applied`` tells the two cases apart from a shot.
    """
    if not board.is_empty(target):
        current = board.status_at(target) if board.in_bounds(target) else CellStatus.EMPTY
        return AttackResult(
            status=current, fleet_destroyed=False, board=board, fleet=fleet, applied=False
        )

    plane = fleet.owner_of(target)
    if plane is None:
        return AttackResult(
            status=CellStatus.MISS,
            fleet_destroyed=fleet.all_destroyed(),
            board=board.with_updates({target: CellStatus.MISS}),
            fleet=fleet,
        )

    if target != plane.head:
        return AttackResult(
            status=CellStatus.HIT,
            fleet_destroyed=fleet.all_destroyed(),
            board=board.with_updates({target: CellStatus.HIT}),
            fleet=fleet,
            plane_id=plane.id,
        )

    updates = {
        cell: CellStatus.KILL
        for cell in plane.cells
        if board.in_bounds(cell) and board.status_at(cell) is CellStatus.HIT
    }
    updates[target] = CellStatus.KILL
    next_fleet = fleet.replaced(plane.destroyed())
    return AttackResult(
        status=CellStatus.KILL,
        fleet_destroyed=next_fleet.all_destroyed(),
        board=board.with_updates(updates),
        fleet=next_fleet,
        plane_id=plane.id,
    )
