"""
Shut the Box - Move Validation

Checks proposed tile selections against the board and the active roll.
Every check here fails closed: bad input yields False, never an exception,
so callers can pass user selections straight through.
"""

from typing import TYPE_CHECKING, Iterable

from src.engine.base import MAX_TILE, MIN_TILE

if TYPE_CHECKING:
    from src.engine.board import Board


def is_tile_in_range(tile: object) -> bool:
    """
    Check that `tile` names one of the nine tiles.

    Args:
        tile: Candidate tile number

    Returns:
        True if tile is an int in [1, 9]
    """
    if not isinstance(tile, int) or isinstance(tile, bool):
        return False
    return MIN_TILE <= tile <= MAX_TILE


def is_die_value(value: object) -> bool:
    """True if `value` is a non-negative int usable as an injected die (0 = unused)."""
    if not isinstance(value, int) or isinstance(value, bool):
        return False
    return value >= 0


def is_valid_move(
    board: "Board",
    tiles: Iterable[int],
    current_sum: int,
    game_over: bool = False,
) -> bool:
    """
    Validate a proposed move.

    A move is valid when the game is still running, a roll is active, every
    tile is in range and raised, and the tiles sum exactly to the roll.
    Duplicates are not rejected on their own; they fail the sum check.

    Args:
        board: Current board
        tiles: Tile numbers the player wants to lower
        current_sum: Active roll total (0 = no active roll)
        game_over: Whether the game has already ended

    Returns:
        True if the move may be applied
    """
    if game_over or current_sum == 0:
        return False

    try:
        selected = list(tiles)
    except TypeError:
        return False

    for tile in selected:
        if not board.is_raised(tile):
            return False

    return sum(selected) == current_sum
