"""
Shut the Box State Layer.

Serializable snapshots of a running game, for replays and hand-off between
hosts. Nothing is persisted here.
"""

from src.state.models import GameSnapshot, restore_game, take_snapshot

__all__ = [
    "GameSnapshot",
    "restore_game",
    "take_snapshot",
]
