"""Game state and the per-tick simulation step.

Everything here is free of rendering and audio: each operation mutates the
``GameState`` it is given and returns the events it produced, which the game
loop later hands to the sound manager.
"""

import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional

from starfall.background import create_stars, update_stars
from starfall.collision import resolve_collisions
from starfall.config import PLAYER_SIZE, PLAYER_STEP, SCREEN_HEIGHT, SCREEN_WIDTH
from starfall.controls import Intent
from starfall.entities import Formation, Player, Projectile, Star
from starfall.events import GameEvent
from starfall.formation import create_enemy_formation, update_formation
from starfall.levels import check_wave_cleared
from starfall.logger import get_logger
from starfall.projectile import advance_projectiles, spawn_projectile

# Get a logger for this module
logger = get_logger(__name__)


class GamePhase(Enum):
    """Session phase. START waits for the player; PLAYING runs ticks."""

    START = auto()
    PLAYING = auto()


def initial_player() -> Player:
    """Player ship at the bottom centre of the screen."""
    return Player(x=SCREEN_WIDTH / 2, y=SCREEN_HEIGHT - PLAYER_SIZE)


@dataclass
class GameState:
    """Everything the simulation owns for one game session."""

    phase: GamePhase = GamePhase.START
    score: int = 0
    level: int = 1
    player: Player = field(default_factory=initial_player)
    formation: Formation = field(default_factory=Formation)
    projectiles: List[Projectile] = field(default_factory=list)
    stars: List[Star] = field(default_factory=list)
    rng: random.Random = field(default_factory=random.Random, repr=False, compare=False)


def new_game_state(seed: Optional[int] = None) -> GameState:
    """Create the pre-session state shown behind the start screen."""
    return GameState(rng=random.Random(seed))


def start_session(state: GameState) -> List[GameEvent]:
    """Reset the session and switch to PLAYING.

    Calling this while already PLAYING re-initializes the session the same way.

    Returns:
        The AMBIENT_LOOP_START event.
    """
    if state.phase is GamePhase.PLAYING:
        logger.info("Session restarted while playing")

    state.phase = GamePhase.PLAYING
    state.score = 0
    state.level = 1
    state.projectiles = []
    state.player = initial_player()
    state.stars = create_stars(state.rng)
    state.formation = create_enemy_formation()

    logger.info("Session started")
    return [GameEvent.AMBIENT_LOOP_START]


def move_player(player: Player, dx: float) -> None:
    """Shift the player horizontally, clamped to the playfield."""
    player.x = max(0, min(SCREEN_WIDTH - player.size, player.x + dx))


def apply_intent(state: GameState, intent: Intent) -> List[GameEvent]:
    """Apply a decoded input intent between ticks.

    Movement and fire are only accepted while PLAYING. PAUSE and QUIT belong
    to the game loop and are ignored here.

    Returns:
        Events caused by the intent.
    """
    if intent is Intent.START:
        return start_session(state)

    if state.phase is not GamePhase.PLAYING:
        return []

    if intent is Intent.MOVE_LEFT:
        move_player(state.player, -PLAYER_STEP)
    elif intent is Intent.MOVE_RIGHT:
        move_player(state.player, PLAYER_STEP)
    elif intent is Intent.FIRE:
        spawn_projectile(state.projectiles, state.player)
        return [GameEvent.SHOOT]
    return []


def tick(state: GameState) -> List[GameEvent]:
    """Advance the simulation by one frame.

    Order: stars, formation motion, projectiles, collisions, wave progression.
    Ticks in the START phase do nothing.

    Returns:
        Events emitted during the tick, in the order they happened.
    """
    if state.phase is GamePhase.START:
        return []

    events: List[GameEvent] = []

    update_stars(state.stars, state.level, state.rng)
    update_formation(state.formation, state.level, state.rng)
    advance_projectiles(state.projectiles)

    points, hit_events = resolve_collisions(state.formation, state.projectiles, state.level)
    state.score += points
    events.extend(hit_events)

    state.formation, state.level, wave_events = check_wave_cleared(state.formation, state.level)
    events.extend(wave_events)

    return events
