"""
Shut the Box - Game Snapshots

Pydantic model for the externally visible game state. The tiles vector,
active sum, game-over flag and last dice pair together are enough to rebuild
a game that behaves identically from that point on.
"""

from pydantic import BaseModel, Field, field_validator, model_validator

from src.engine.base import DIE_FACES, MAX_TILE, GameOutcome, Roll
from src.engine.board import Board
from src.engine.dice import DieSource
from src.engine.game import ShutTheBoxGame
from src.engine.search import has_reachable_subset


class GameSnapshot(BaseModel):
    """Serializable view of a ShutTheBoxGame."""

    tiles: list[int] = Field(min_length=MAX_TILE, max_length=MAX_TILE)
    current_sum: int = Field(default=0, ge=0)
    game_over: bool = False
    dice: tuple[int, int] = (0, 0)

    model_config = {"frozen": True}

    @field_validator("tiles")
    @classmethod
    def tiles_are_flags(cls, tiles: list[int]) -> list[int]:
        for i, value in enumerate(tiles):
            if value not in (0, 1):
                raise ValueError(f"Tile {i + 1} must be 0 or 1, got {value}.")
        return tiles

    @field_validator("dice")
    @classmethod
    def dice_in_range(cls, dice: tuple[int, int]) -> tuple[int, int]:
        for value in dice:
            if not (0 <= value <= DIE_FACES):
                raise ValueError(f"Die value must be 0-{DIE_FACES}, got {value}.")
        return dice

    @model_validator(mode="after")
    def sum_matches_dice(self) -> "GameSnapshot":
        # The active sum is either cleared or equal to the last roll
        if self.current_sum not in (0, sum(self.dice)):
            raise ValueError(
                f"current_sum {self.current_sum} does not match dice {self.dice}."
            )

        reachable = has_reachable_subset(self.raised_tiles, self.current_sum)
        if not self.game_over and not reachable:
            raise ValueError(
                f"current_sum {self.current_sum} is unreachable but game_over is False."
            )
        if self.game_over and reachable and not self.is_shut:
            raise ValueError(
                "game_over is True but the board is neither shut nor stuck."
            )
        return self

    @property
    def is_shut(self) -> bool:
        """Every tile down with the sum cleared by the final move."""
        return self.current_sum == 0 and not any(self.tiles)

    @property
    def raised_tiles(self) -> tuple[int, ...]:
        return tuple(tile for tile, up in enumerate(self.tiles, start=1) if up)

    @property
    def score(self) -> int:
        return sum(self.raised_tiles)

    @property
    def outcome(self) -> GameOutcome:
        """
        Terminal status implied by the snapshot.

        A won game always has its sum cleared by the final move, while a lost
        game keeps the unreachable sum, even when every tile is down.
        """
        if not self.game_over:
            return GameOutcome.IN_PROGRESS
        if self.is_shut:
            return GameOutcome.WON
        return GameOutcome.LOST


def take_snapshot(game: ShutTheBoxGame) -> GameSnapshot:
    """Capture the current state of `game`."""
    return GameSnapshot(
        tiles=game.get_tiles(),
        current_sum=game.get_current_sum(),
        game_over=game.is_game_over(),
        dice=game.get_dice(),
    )


def restore_game(
    snapshot: GameSnapshot,
    die_source: DieSource | None = None,
) -> ShutTheBoxGame:
    """
    Rebuild a game from a snapshot.

    Args:
        snapshot: Previously captured state
        die_source: Die source for future rolls (default: unseeded random)

    Returns:
        New game in the captured state, with an empty history
    """
    game = ShutTheBoxGame(die_source)
    game.load_state(
        board=Board.from_snapshot(snapshot.tiles),
        roll=Roll(die_a=snapshot.dice[0], die_b=snapshot.dice[1]),
        current_sum=snapshot.current_sum,
        outcome=snapshot.outcome,
    )
    return game
