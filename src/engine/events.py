"""
Shut the Box - Turn History Events

Event types and payloads recorded by the turn controller for every accepted
state change.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class GameEvent(Enum):
    """Events that can occur during a game."""

    DICE_ROLLED = auto()
    TILE_FLIPPED = auto()
    MOVE_APPLIED = auto()
    GAME_WON = auto()
    GAME_LOST = auto()
    GAME_RESET = auto()


# Events after which the game is frozen until reset
TERMINAL_EVENTS = frozenset({GameEvent.GAME_WON, GameEvent.GAME_LOST})


@dataclass(frozen=True)
class EventPayload:
    """A single history entry."""

    event: GameEvent
    data: dict[str, Any] = field(default_factory=dict)

    @property
    def is_terminal(self) -> bool:
        return self.event in TERMINAL_EVENTS
