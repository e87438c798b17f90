"""Wave clearing and level progression."""

from typing import List, Tuple

from starfall.entities import Formation
from starfall.events import GameEvent
from starfall.formation import create_enemy_formation
from starfall.logger import get_logger

# Get a logger for this module
logger = get_logger(__name__)


def check_wave_cleared(formation: Formation, level: int) -> Tuple[Formation, int, List[GameEvent]]:
    """Advance to the next level once every enemy of the wave is gone.

    Args:
        formation: Formation as left by collision resolution.
        level: Current level.

    Returns:
        Tuple of (formation to use from now on, new level, emitted events).
        When the wave is still active the inputs are returned unchanged.
    """
    if not formation.is_empty:
        return formation, level, []

    level += 1
    logger.info(f"Wave cleared, advancing to level {level}")
    return create_enemy_formation(), level, [GameEvent.LEVEL_UP]
