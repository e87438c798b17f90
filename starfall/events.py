"""Named events emitted by the simulation for the audio collaborator."""

from enum import Enum


class GameEvent(str, Enum):
    """Side effects requested by a simulation step.

    The value is the sound name the sound manager plays for the event.
    """

    SHOOT = "shoot"
    EXPLOSION = "explosion"
    LEVEL_UP = "level-up"
    AMBIENT_LOOP_START = "ambient-loop-start"
