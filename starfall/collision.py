"""Projectile versus enemy collision detection and scoring."""

from typing import Iterable, List, Tuple

from starfall.config import ENEMY_SCORE_PER_LEVEL
from starfall.entities import Enemy, Formation, Projectile
from starfall.events import GameEvent
from starfall.logger import get_logger

# Get a logger for this module
logger = get_logger(__name__)


def is_hit(enemy: Enemy, projectile: Projectile) -> bool:
    """Axis-aligned proximity test between an enemy and a projectile.

    The projectile's own size is ignored; only its position is compared against
    a box of the enemy's size around the enemy position.
    """
    return abs(enemy.x - projectile.x) < enemy.size and abs(enemy.y - projectile.y) < enemy.size


def enemy_score(level: int) -> int:
    """Points awarded for one enemy destroyed at the given level."""
    return ENEMY_SCORE_PER_LEVEL * level


def resolve_collisions(
    formation: Formation, projectiles: Iterable[Projectile], level: int
) -> Tuple[int, List[GameEvent]]:
    """Remove every enemy touched by any projectile.

    A single projectile can destroy several enemies in the same tick, and
    projectiles are left alive after a hit.

    Args:
        formation: Formation whose enemy list is filtered in place.
        projectiles: Live projectiles for this tick.
        level: Current level, used for scoring.

    Returns:
        Tuple of (points gained, one EXPLOSION event per destroyed enemy).
    """
    projectiles = list(projectiles)
    if not projectiles or formation.is_empty:
        return 0, []

    points = 0
    events: List[GameEvent] = []
    survivors: List[Enemy] = []

    for enemy in formation.enemies:
        if any(is_hit(enemy, projectile) for projectile in projectiles):
            points += enemy_score(level)
            events.append(GameEvent.EXPLOSION)
            logger.debug(
                f"Enemy ({enemy.row}, {enemy.col}) destroyed at ({enemy.x:.1f}, {enemy.y:.1f})"
            )
        else:
            survivors.append(enemy)

    formation.enemies = survivors
    return points, events
