"""
Shut the Box - Game Engine Base Classes

This module defines the constants, enums and immutable data structures shared
by the board, dice and turn controller.
"""

from dataclasses import dataclass
from enum import Enum


# Tile numbering is 1-based: tiles 1..9
MIN_TILE = 1
MAX_TILE = 9
TILE_NUMBERS: tuple[int, ...] = tuple(range(MIN_TILE, MAX_TILE + 1))
FULL_SCORE = sum(TILE_NUMBERS)  # 45

DIE_FACES = 6
# Highest raised tile that still allows playing with a single die
ONE_DIE_THRESHOLD = 6


class GameOutcome(Enum):
    """Terminal status of a game."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class Roll:
    """
    Immutable representation of a turn's dice.

    Attributes:
        die_a: Value of the first die (0 before any roll)
        die_b: Value of the second die, 0 when only one die is in play
    """
    die_a: int = 0
    die_b: int = 0

    @property
    def current_sum(self) -> int:
        """Target a move must sum to. 0 means no active roll."""
        return self.die_a + self.die_b

    @property
    def is_single_die(self) -> bool:
        """Returns True if the second die is the unused sentinel."""
        return self.die_b == 0

    def as_pair(self) -> tuple[int, int]:
        """Return the dice as a (die_a, die_b) tuple."""
        return (self.die_a, self.die_b)

    def __str__(self) -> str:
        if self.is_single_die:
            return f"[{self.die_a}]"
        return f"[{self.die_a}, {self.die_b}]"


NO_ROLL = Roll()
