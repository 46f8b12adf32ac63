"""
Shut the Box - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

import pytest

from src.engine.dice import ScriptedDieSource
from src.engine.game import ShutTheBoxGame


# =============================================================================
# MOVE TEST DATA
# =============================================================================

@pytest.fixture
def sum_twelve_moves() -> dict[str, tuple[tuple[int, ...], bool]]:
    """
    Moves checked against an active sum of 12 on a fresh board.

    Returns:
        Dict mapping name to (tiles, expected validity)
    """
    return {
        "three_tiles": ((1, 2, 9), True),
        "middle_three": ((3, 4, 5), True),
        "four_tiles": ((1, 2, 3, 6), True),
        "pair": ((3, 9), True),
        "pair_reversed": ((9, 3), True),
        "sum_eleven": ((1, 2, 8), False),
        "sum_thirteen": ((7, 6), False),
        "single_short": ((9,), False),
        "empty": ((), False),
    }


# =============================================================================
# GAME FIXTURES
# =============================================================================

@pytest.fixture
def game() -> ShutTheBoxGame:
    """Fresh game with unseeded random dice."""
    return ShutTheBoxGame()


@pytest.fixture
def scripted_game():
    """Factory for games whose dice follow a fixed sequence of faces."""
    def _make(*faces: int) -> ShutTheBoxGame:
        return ShutTheBoxGame(ScriptedDieSource(faces))
    return _make


@pytest.fixture
def nine_only_game() -> ShutTheBoxGame:
    """Game with tiles 1-8 already lowered, only tile 9 raised."""
    g = ShutTheBoxGame()
    for tile in range(1, 9):
        assert g.flip_tile(tile)
    return g
