"""Parallax starfield scrolling behind the playfield."""

import random
from typing import List

from starfall.config import RATIO, SCREEN_HEIGHT, SCREEN_WIDTH, STAR_COUNT, STAR_LEVEL_SPEEDUP
from starfall.entities import Star


def create_stars(rng: random.Random, count: int = STAR_COUNT) -> List[Star]:
    """Scatter a fresh set of stars over the whole screen.

    Args:
        rng: Random source used for positions, sizes and speeds.
        count: Number of stars to create.

    Returns:
        List of newly created stars.
    """
    return [
        Star(
            x=rng.random() * SCREEN_WIDTH,
            y=rng.random() * SCREEN_HEIGHT,
            size=(rng.random() * 2 + 1) * RATIO,
            base_speed=rng.random() * 0.5 + 0.5,
        )
        for _ in range(count)
    ]


def star_speed_multiplier(level: int) -> float:
    """Stars scroll faster as the level rises."""
    return 1 + (level - 1) * STAR_LEVEL_SPEEDUP


def update_stars(stars: List[Star], level: int, rng: random.Random) -> None:
    """Move every star down; stars leaving the bottom wrap to the top at a new x."""
    multiplier = star_speed_multiplier(level)
    for star in stars:
        star.y += star.base_speed * multiplier * RATIO
        if star.y > SCREEN_HEIGHT:
            star.y = 0
            star.x = rng.random() * SCREEN_WIDTH
