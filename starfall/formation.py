"""Enemy formation layout and rigid-body motion."""

import random

from starfall.config import (
    ENEMIES_PER_ROW,
    ENEMY_BASE_SPEED,
    ENEMY_DIRECTION,
    ENEMY_DROP,
    ENEMY_LEVEL_SPEED,
    ENEMY_ROWS,
    ENEMY_SIZE,
    ENEMY_SPACING,
    FORMATION_ORIGIN,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
)
from starfall.entities import Enemy, Formation
from starfall.logger import get_logger

# Get a logger for this module
logger = get_logger(__name__)

# Rightmost x an enemy may occupy before the formation bounces
RIGHT_LIMIT = SCREEN_WIDTH - ENEMY_SIZE


def create_enemy_formation() -> Formation:
    """Build a fresh formation in the canonical row-major grid.

    Returns:
        Formation with ENEMY_ROWS * ENEMIES_PER_ROW enemies moving right.
    """
    origin_x, origin_y = FORMATION_ORIGIN
    step = ENEMY_SIZE + ENEMY_SPACING
    enemies = [
        Enemy(x=col * step + origin_x, y=row * step + origin_y, row=row, col=col)
        for row in range(ENEMY_ROWS)
        for col in range(ENEMIES_PER_ROW)
    ]
    return Formation(enemies=enemies, direction=ENEMY_DIRECTION)


def horizontal_speed(level: int) -> float:
    """Speed factor applied to the formation direction at the given level."""
    return ENEMY_BASE_SPEED + level * ENEMY_LEVEL_SPEED


def update_formation(formation: Formation, level: int, rng: random.Random) -> None:
    """Advance the formation by one tick.

    The wall check uses positions from before the move. On a bounce the shared
    direction flips and every enemy drops by ENEMY_DROP. Enemies whose bottom
    edge reaches the bottom of the screen are recycled to the top at a random x.

    Args:
        formation: Formation to move in place.
        level: Current level, which sets the horizontal speed.
        rng: Random source for recycled enemy positions.
    """
    if formation.is_empty:
        return

    leftmost = min(enemy.x for enemy in formation.enemies)
    rightmost = max(enemy.x for enemy in formation.enemies)

    if leftmost <= 0 or rightmost >= RIGHT_LIMIT:
        formation.direction *= -1
        for enemy in formation.enemies:
            enemy.y += ENEMY_DROP
        logger.debug(f"Formation bounced, direction now {formation.direction}")

    dx = formation.direction * horizontal_speed(level)
    for enemy in formation.enemies:
        enemy.x += dx

    recycle_leaked_enemies(formation, rng)


def recycle_leaked_enemies(formation: Formation, rng: random.Random) -> int:
    """Send enemies that reached the bottom back to the top.

    Returns:
        Number of enemies recycled.
    """
    recycled = 0
    for enemy in formation.enemies:
        if enemy.y + enemy.size >= SCREEN_HEIGHT:
            enemy.y = 0
            enemy.x = rng.random() * RIGHT_LIMIT
            recycled += 1
    if recycled:
        logger.info(f"{recycled} enemies slipped past the player and were recycled")
    return recycled
