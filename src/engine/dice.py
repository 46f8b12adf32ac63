"""
Shut the Box - Dice Subsystem

Rolls one or two D6 depending on the board. While any of tiles 7-9 is still
raised both dice are thrown; once only tiles 1-6 remain, a single die is
used and the second die reports the sentinel value 0.

Randomness comes from an injectable DieSource so tests and replays can
substitute a fixed sequence.
"""

import random
from typing import Iterable, Protocol

from src.engine.base import DIE_FACES, ONE_DIE_THRESHOLD, Roll


class DieSource(Protocol):
    """Anything that yields a uniform integer in [1, 6]."""

    def roll_die(self) -> int:
        ...


class RandomDieSource:
    """DieSource backed by a private `random.Random` instance."""

    def __init__(self, seed: int | None = None):
        """
        Args:
            seed: Optional seed for reproducible rolls
        """
        self._random = random.Random(seed)

    def roll_die(self) -> int:
        return self._random.randint(1, DIE_FACES)


class ScriptedDieSource:
    """
    DieSource that replays a fixed sequence of faces.

    Raises:
        ValueError: If any scripted face is outside [1, 6]
    """

    def __init__(self, faces: Iterable[int]):
        self._faces = list(faces)
        for face in self._faces:
            if not (1 <= face <= DIE_FACES):
                raise ValueError(f"Scripted die face must be 1-{DIE_FACES}, got {face}.")
        self._position = 0

    @property
    def remaining(self) -> int:
        """Number of faces not yet consumed."""
        return len(self._faces) - self._position

    def roll_die(self) -> int:
        if self._position >= len(self._faces):
            raise RuntimeError("Scripted die source is exhausted.")
        face = self._faces[self._position]
        self._position += 1
        return face


class Dice:
    """Applies the one-die/two-die rule on top of a DieSource."""

    def __init__(self, source: DieSource | None = None):
        self.source: DieSource = source if source is not None else RandomDieSource()

    @staticmethod
    def uses_one_die(raised_tiles: Iterable[int]) -> bool:
        """
        Returns True when every raised tile is 6 or lower.

        An empty board also qualifies, though a finished game never rolls.
        """
        return all(tile <= ONE_DIE_THRESHOLD for tile in raised_tiles)

    def roll(self, raised_tiles: Iterable[int]) -> Roll:
        """
        Roll for the next turn.

        Args:
            raised_tiles: Tile numbers currently raised

        Returns:
            Roll with die_b == 0 in one-die mode
        """
        if self.uses_one_die(raised_tiles):
            return Roll(die_a=self.source.roll_die(), die_b=0)
        return Roll(die_a=self.source.roll_die(), die_b=self.source.roll_die())
