"""Startup self-checks for the rules engine."""

from __future__ import annotations

import logging

from planestrike.game.core.models import DIRECTIONS, PLANE_SIZE, Point, footprint

logger = logging.getLogger(__name__)

_PROBE_HEAD = Point(5, 5)


def run_diagnostics() -> list[str]:
    """Check plane footprints for every direction. Returns failure messages."""
    logger.info("diagnostics_started")
    failures: list[str] = []
    for direction in DIRECTIONS:
        cells = footprint(_PROBE_HEAD, direction)
        if len(cells) != PLANE_SIZE:
            failures.append(f"{direction.value}: plane size mismatch ({len(cells)} cells)")
        if len(set(cells)) != len(cells):
            failures.append(f"{direction.value}: duplicate cells in footprint")
        if _PROBE_HEAD not in cells:
            failures.append(f"{direction.value}: footprint is missing its head")
    for failure in failures:
        logger.error("diagnostics_failure %s", failure)
    logger.info("diagnostics_complete failures=%d", len(failures))
    return failures
