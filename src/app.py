"""
Shut the Box - Application Entry Point

Wires settings and logging into a ready-to-play game for a host
environment.
"""

import logging

from src.config.settings import Settings, configure_logging, get_settings
from src.engine.dice import RandomDieSource
from src.engine.game import ShutTheBoxGame

logger = logging.getLogger(__name__)


def create_game(settings: Settings | None = None) -> ShutTheBoxGame:
    """
    Create a game configured from the environment.

    Args:
        settings: Explicit settings; loaded from the environment if omitted

    Returns:
        Fresh game whose dice are seeded from `dice_seed` when set
    """
    settings = settings or get_settings()
    configure_logging(settings)
    game = ShutTheBoxGame(RandomDieSource(settings.dice_seed))
    logger.info("Shut the Box engine ready (dice_seed=%s)", settings.dice_seed)
    return game
