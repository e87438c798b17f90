"""Centralized game configuration settings."""

import logging
import os
from typing import Optional, Tuple

# ==============================================================================
# GENERAL SETTINGS
# ==============================================================================

# Frame rate
FPS: int = 60

WINDOW_TITLE: str = "Starfall"


# ==============================================================================
# LOGGING SETTINGS
# ==============================================================================

# Can be set to logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, or logging.CRITICAL
LOG_LEVEL: int = logging.WARNING

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
LOG_DIR = os.path.join(BASE_DIR, ".logs")


# ==============================================================================
# SCREEN AND DISPLAY SETTINGS
# ==============================================================================

# Device-pixel ratio; every size and speed below is pre-multiplied by it
RATIO: int = 2

BASE_WIDTH: int = 400
BASE_HEIGHT: int = 400

SCREEN_WIDTH: int = BASE_WIDTH * RATIO
SCREEN_HEIGHT: int = BASE_HEIGHT * RATIO

# Colors
WHITE: Tuple[int, int, int] = (255, 255, 255)
BACKGROUND_COLOR: Tuple[int, int, int] = (0, 0, 51)
PLAYER_COLOR: Tuple[int, int, int] = (0, 255, 255)
ENEMY_COLOR: Tuple[int, int, int] = (255, 0, 255)
PROJECTILE_COLOR: Tuple[int, int, int] = (255, 255, 0)
STAR_COLOR: Tuple[int, int, int] = WHITE
BUTTON_COLOR: Tuple[int, int, int] = (40, 40, 120)

# Font settings
DEFAULT_FONT_SIZE: int = 24 * RATIO
TITLE_FONT_SIZE: int = 48 * RATIO
DEFAULT_FONT_NAME: Optional[str] = None  # Use default pygame font


# ==============================================================================
# PLAYER SETTINGS
# ==============================================================================

PLAYER_SIZE: int = 20 * RATIO
PLAYER_STEP: int = 10 * RATIO  # pixels per move intent

# Key repeat while a key is held (delay, interval) in milliseconds
KEY_REPEAT: Tuple[int, int] = (150, 40)


# ==============================================================================
# PROJECTILE SETTINGS
# ==============================================================================

PROJECTILE_SIZE: int = 5 * RATIO
PROJECTILE_SPEED: int = 5 * RATIO  # pixels per tick, upward
PROJECTILE_LINE_WIDTH: int = 2 * RATIO


# ==============================================================================
# ENEMY SETTINGS
# ==============================================================================

ENEMY_SIZE: int = 15 * RATIO
ENEMY_ROWS: int = 4
ENEMIES_PER_ROW: int = 8
ENEMY_SPACING: int = 10 * RATIO  # gap between neighbouring enemies
FORMATION_ORIGIN: Tuple[int, int] = (50 * RATIO, 50 * RATIO)

ENEMY_DIRECTION: int = 1 * RATIO  # initial horizontal direction (moving right)
ENEMY_DROP: int = 5 * RATIO  # vertical drop applied on a wall bounce

# Horizontal speed is ENEMY_BASE_SPEED + level * ENEMY_LEVEL_SPEED, times the direction
ENEMY_BASE_SPEED: float = 0.5
ENEMY_LEVEL_SPEED: float = 0.1

ENEMY_SCORE_PER_LEVEL: int = 10


# ==============================================================================
# BACKGROUND SETTINGS
# ==============================================================================

STAR_COUNT: int = 100
STAR_LEVEL_SPEEDUP: float = 0.1  # star speed multiplier gained per level


# ==============================================================================
# SOUND SETTINGS
# ==============================================================================

SAMPLE_RATE: int = 44100
DEFAULT_SOUND_VOLUME: float = 0.5
AMBIENCE_VOLUME: float = 0.15
