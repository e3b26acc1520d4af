from __future__ import annotations

import random

import pytest

from planestrike.game.core.models import Direction, Fleet, Point, make_plane


def make_valid_fleet() -> Fleet:
    return Fleet(
        planes=(
            make_plane("alpha", Point(2, 0), Direction.UP),
            make_plane("bravo", Point(7, 0), Direction.UP),
            make_plane("charlie", Point(2, 9), Direction.DOWN),
        )
    )


@pytest.fixture
def valid_fleet() -> Fleet:
    return make_valid_fleet()


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1337)
