"""
Shut the Box - Turn Controller

Owns the board, the dice and the game outcome, and exposes the operation
surface a host (UI, test harness, replay script) calls into.

Turn lifecycle:
    1. roll_dice() (or set_dice_values()) sets the active sum; if no subset
       of raised tiles can reach it, the game is lost.
    2. make_move(tiles) lowers tiles summing to the active sum and clears it;
       lowering the last tile wins the game.
    3. Once over, rolling and injecting dice are no-ops that echo the last
       pair, and every move is rejected until reset().

Gameplay errors never raise: operations report failure with False.
"""

import logging
from collections import deque
from typing import Iterable

from src.engine.base import NO_ROLL, GameOutcome, Roll
from src.engine.board import Board
from src.engine.dice import Dice, DieSource
from src.engine.events import EventPayload, GameEvent
from src.engine.search import has_reachable_subset
from src.engine.validators import is_die_value, is_valid_move

logger = logging.getLogger(__name__)

# Oldest entries are dropped once the history is full
HISTORY_LIMIT = 1000


class ShutTheBoxGame:
    """
    A single game of Shut the Box.

    Not safe for concurrent use; give each session its own instance.
    """

    def __init__(
        self,
        die_source: DieSource | None = None,
        history_limit: int = HISTORY_LIMIT,
    ) -> None:
        """
        Args:
            die_source: Source of die faces; defaults to an unseeded
                RandomDieSource
            history_limit: Maximum number of history entries kept
        """
        self._board = Board()
        self._dice = Dice(die_source)
        self._roll: Roll = NO_ROLL
        self._current_sum = 0
        self._outcome = GameOutcome.IN_PROGRESS
        self._history: deque[EventPayload] = deque(maxlen=history_limit)

    @classmethod
    def new(cls, die_source: DieSource | None = None) -> "ShutTheBoxGame":
        """Create a fresh game with all tiles raised."""
        return cls(die_source)

    # === Dice ===

    def roll_dice(self) -> tuple[int, int]:
        """
        Roll for the next turn.

        Returns:
            (die_a, die_b); die_b is 0 when a single die was rolled. After
            game over the last pair is returned and no dice are thrown.
        """
        if self.is_game_over():
            return self._roll.as_pair()

        roll = self._dice.roll(self._board.raised_tiles())
        self._activate_roll(roll, injected=False)
        return roll.as_pair()

    def set_dice_values(self, die_a: int, die_b: int) -> tuple[int, int]:
        """
        Inject a roll without consuming randomness.

        Runs the same game-over check as roll_dice(). After game over, or
        when either value is not a non-negative int, this is a no-op that
        returns the last pair.
        """
        if self.is_game_over() or not (is_die_value(die_a) and is_die_value(die_b)):
            return self._roll.as_pair()

        roll = Roll(die_a=die_a, die_b=die_b)
        self._activate_roll(roll, injected=True)
        return roll.as_pair()

    def _activate_roll(self, roll: Roll, injected: bool) -> None:
        self._roll = roll
        self._current_sum = roll.current_sum
        logger.debug("Dice %s (injected=%s), sum %d", roll, injected, self._current_sum)
        self._record(
            GameEvent.DICE_ROLLED,
            dice=list(roll.as_pair()),
            current_sum=self._current_sum,
            injected=injected,
        )

        if not has_reachable_subset(self._board.raised_tiles(), self._current_sum):
            self._outcome = GameOutcome.LOST
            logger.info(
                "Game lost: no tiles reach %d, final score %d",
                self._current_sum,
                self._board.score(),
            )
            self._record(
                GameEvent.GAME_LOST,
                current_sum=self._current_sum,
                score=self._board.score(),
            )

    # === Tiles and moves ===

    def flip_tile(self, tile: int) -> bool:
        """
        Lower a single tile directly, bypassing the roll.

        Returns:
            True if the tile was raised and is now lowered
        """
        if not self._board.lower(tile):
            return False
        self._record(GameEvent.TILE_FLIPPED, tile=tile)
        return True

    def is_valid_move(self, tiles: Iterable[int]) -> bool:
        """True if `tiles` are all raised and sum to the active roll."""
        return is_valid_move(self._board, tiles, self._current_sum, self.is_game_over())

    def make_move(self, tiles: Iterable[int]) -> bool:
        """
        Validate and apply a move.

        Args:
            tiles: Tile numbers to lower

        Returns:
            True if the move was applied. On False nothing changed.
        """
        try:
            selected = list(tiles)
        except TypeError:
            return False
        if not self.is_valid_move(selected):
            return False

        for tile in selected:
            self._board.lower(tile)
        self._current_sum = 0

        score = self._board.score()
        logger.debug("Lowered %s, score now %d", selected, score)
        self._record(GameEvent.MOVE_APPLIED, tiles=selected, score=score)

        if self._board.is_fully_lowered():
            self._outcome = GameOutcome.WON
            logger.info("Game won: box shut")
            self._record(GameEvent.GAME_WON, score=0)

        return True

    # === Queries ===

    def get_tiles(self) -> list[int]:
        """Nine-element list, 1 = raised, 0 = lowered."""
        return list(self._board.snapshot())

    def get_score(self) -> int:
        return self._board.score()

    def is_game_over(self) -> bool:
        return self._outcome is not GameOutcome.IN_PROGRESS

    def get_current_sum(self) -> int:
        return self._current_sum

    def get_dice(self) -> tuple[int, int]:
        """Last dice pair rolled or injected, (0, 0) before the first roll."""
        return self._roll.as_pair()

    @property
    def outcome(self) -> GameOutcome:
        """Fixed at the moment the game ends; a loss stays a loss even at score 0."""
        return self._outcome

    @property
    def history(self) -> tuple[EventPayload, ...]:
        """Recorded events, oldest first, capped at the history limit."""
        return tuple(self._history)

    # === Lifecycle ===

    def reset(self) -> None:
        """Return to the fresh-game state. The die source is kept."""
        self._board.reset()
        self._roll = NO_ROLL
        self._current_sum = 0
        self._outcome = GameOutcome.IN_PROGRESS
        self._history.clear()
        logger.info("Game reset")
        self._record(GameEvent.GAME_RESET)

    def load_state(
        self,
        board: Board,
        roll: Roll,
        current_sum: int,
        outcome: GameOutcome,
    ) -> None:
        """Replace the game state wholesale. Used by snapshot restore."""
        self._board = board
        self._roll = roll
        self._current_sum = current_sum
        self._outcome = outcome
        self._history.clear()

    def _record(self, event: GameEvent, **data) -> None:
        self._history.append(EventPayload(event=event, data=data))

    def __repr__(self) -> str:
        return (
            f"ShutTheBoxGame(tiles='{self._board}', sum={self._current_sum}, "
            f"outcome={self.outcome.value})"
        )
