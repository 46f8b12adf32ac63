"""
Shut the Box Game Engine.

Pure Python game logic with zero UI/persistence dependencies.
Handles the tile board, dice rolling, move validation and game-over
detection.
"""

from src.engine.base import (
    FULL_SCORE,
    NO_ROLL,
    TILE_NUMBERS,
    GameOutcome,
    Roll,
)
from src.engine.board import Board
from src.engine.dice import Dice, DieSource, RandomDieSource, ScriptedDieSource
from src.engine.events import EventPayload, GameEvent
from src.engine.game import ShutTheBoxGame
from src.engine.search import has_reachable_subset

__all__ = [
    # Constants
    "FULL_SCORE",
    "NO_ROLL",
    "TILE_NUMBERS",
    # Data Classes
    "Roll",
    "EventPayload",
    # Enums
    "GameOutcome",
    "GameEvent",
    # Components
    "Board",
    "Dice",
    "DieSource",
    "RandomDieSource",
    "ScriptedDieSource",
    "has_reachable_subset",
    # Engine
    "ShutTheBoxGame",
]
