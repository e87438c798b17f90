"""Entity definitions shared by the simulation, the renderer and the tests."""

from dataclasses import dataclass, field
from typing import List

import pygame

from starfall.config import ENEMY_DIRECTION, ENEMY_SIZE, PLAYER_SIZE, PROJECTILE_SIZE


@dataclass
class Player:
    """The player's ship. Position is the top-left of its triangular glyph."""

    x: float
    y: float
    size: int = PLAYER_SIZE

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(round(self.x), round(self.y), self.size, self.size)


@dataclass
class Enemy:
    """A single member of the enemy formation."""

    x: float
    y: float
    row: int = 0
    col: int = 0
    size: int = ENEMY_SIZE

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(round(self.x), round(self.y), self.size, self.size)


@dataclass
class Projectile:
    """A shot fired by the player, travelling straight up."""

    x: float
    y: float
    size: int = PROJECTILE_SIZE


@dataclass
class Star:
    """Cosmetic background star; recycled to the top instead of destroyed."""

    x: float
    y: float
    size: float
    base_speed: float


@dataclass
class Formation:
    """The live enemy set and the horizontal direction it moves in as one body.

    ``direction`` is shared by every enemy: it is either ``+ENEMY_DIRECTION``
    (moving right) or ``-ENEMY_DIRECTION`` (moving left).
    """

    enemies: List[Enemy] = field(default_factory=list)
    direction: float = ENEMY_DIRECTION

    def __len__(self) -> int:
        return len(self.enemies)

    def __iter__(self):
        return iter(self.enemies)

    @property
    def is_empty(self) -> bool:
        return not self.enemies
