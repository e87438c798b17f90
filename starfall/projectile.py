"""Player projectiles: spawning, movement and expiry."""

from typing import List

from starfall.config import PROJECTILE_SPEED
from starfall.entities import Player, Projectile
from starfall.logger import get_logger

# Get a logger for this module
logger = get_logger(__name__)


def spawn_projectile(projectiles: List[Projectile], player: Player) -> Projectile:
    """Fire a projectile from the nose of the player's ship.

    There is no cap on live projectiles; every fire intent spawns one.

    Args:
        projectiles: Live projectile list, appended to in place.
        player: The ship firing the shot.

    Returns:
        The new projectile.
    """
    projectile = Projectile(x=player.x + player.size / 2, y=player.y)
    projectiles.append(projectile)
    logger.debug(f"Projectile fired at ({projectile.x:.1f}, {projectile.y:.1f})")
    return projectile


def advance_projectiles(projectiles: List[Projectile]) -> int:
    """Move every projectile up and drop the ones that left the top of the field.

    Args:
        projectiles: Live projectile list, updated in place.

    Returns:
        Number of projectiles that expired this tick.
    """
    for projectile in projectiles:
        projectile.y -= PROJECTILE_SPEED

    before = len(projectiles)
    projectiles[:] = [projectile for projectile in projectiles if projectile.y > 0]
    return before - len(projectiles)
