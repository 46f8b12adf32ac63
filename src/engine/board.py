"""
Shut the Box - Tile Board

Holds the raised/lowered state of tiles 1-9 and derives the score and the
win condition. Tiles only move from raised to lowered; the sole way back up
is a full reset.
"""

from typing import Sequence

from src.engine.base import FULL_SCORE, MAX_TILE, TILE_NUMBERS
from src.engine.validators import is_tile_in_range


class Board:
    """
    The nine-tile board.

    Tile state is stored as a list of booleans where index 0 is tile 1.
    True means the tile is raised.
    """

    def __init__(self) -> None:
        self._raised: list[bool] = [True] * MAX_TILE

    @classmethod
    def from_snapshot(cls, vector: Sequence[int]) -> "Board":
        """
        Build a board from a 9-element raised/lowered vector.

        Args:
            vector: Nine values, 1 = raised, 0 = lowered

        Returns:
            New Board in the given state

        Raises:
            ValueError: If the vector is not nine 0/1 values
        """
        if len(vector) != MAX_TILE:
            raise ValueError(f"Board needs exactly {MAX_TILE} tiles, got {len(vector)}.")
        for i, value in enumerate(vector):
            if value not in (0, 1):
                raise ValueError(f"Tile {i + 1} must be 0 or 1, got {value}.")

        board = cls()
        board._raised = [value == 1 for value in vector]
        return board

    def is_raised(self, tile: int) -> bool:
        """Returns True if `tile` is in range and currently raised."""
        return is_tile_in_range(tile) and self._raised[tile - 1]

    def lower(self, tile: int) -> bool:
        """
        Lower a single raised tile.

        Args:
            tile: Tile number (1-9)

        Returns:
            True if the tile was lowered, False if it was out of range or
            already down. The board is unchanged on failure.
        """
        if not self.is_raised(tile):
            return False
        self._raised[tile - 1] = False
        return True

    def raised_tiles(self) -> tuple[int, ...]:
        """Tile numbers currently raised, ascending."""
        return tuple(t for t in TILE_NUMBERS if self._raised[t - 1])

    def snapshot(self) -> tuple[int, ...]:
        """Nine-element vector, 1 = raised, 0 = lowered."""
        return tuple(1 if up else 0 for up in self._raised)

    def score(self) -> int:
        """Sum of the raised tile numbers. 0 means every tile is down."""
        return sum(self.raised_tiles())

    def is_fully_lowered(self) -> bool:
        return self.score() == 0

    def reset(self) -> None:
        """Raise all nine tiles."""
        self._raised = [True] * MAX_TILE

    def __str__(self) -> str:
        return " ".join(str(t) if self._raised[t - 1] else "_" for t in TILE_NUMBERS)

    def __repr__(self) -> str:
        return f"Board(score={self.score()}/{FULL_SCORE}, tiles={self.snapshot()})"
