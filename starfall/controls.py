"""Translate pygame input events into game intents."""

from enum import Enum, auto
from typing import Optional, Tuple

import pygame

from starfall.config import SCREEN_HEIGHT, SCREEN_WIDTH, TITLE_FONT_SIZE


class Intent(Enum):
    """A decoded player action."""

    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    FIRE = auto()
    START = auto()
    PAUSE = auto()
    QUIT = auto()


KEY_INTENTS = {
    pygame.K_LEFT: Intent.MOVE_LEFT,
    pygame.K_RIGHT: Intent.MOVE_RIGHT,
    pygame.K_SPACE: Intent.FIRE,
    pygame.K_RETURN: Intent.START,
    pygame.K_KP_ENTER: Intent.START,
    pygame.K_p: Intent.PAUSE,
    pygame.K_ESCAPE: Intent.QUIT,
}

# Start button, centred below the title
START_BUTTON_SIZE: Tuple[int, int] = (TITLE_FONT_SIZE * 4, TITLE_FONT_SIZE + 20)
START_BUTTON_RECT = pygame.Rect(0, 0, *START_BUTTON_SIZE)
START_BUTTON_RECT.center = (SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2 + TITLE_FONT_SIZE)


def translate_event(event: pygame.event.Event, button_visible: bool = True) -> Optional[Intent]:
    """Map a pygame event to an intent.

    Args:
        event: Event read from the pygame queue.
        button_visible: Whether the start button is on screen and clickable.

    Returns:
        The matching intent, or None for events the game does not react to.
    """
    if event.type == pygame.QUIT:
        return Intent.QUIT
    if event.type == pygame.KEYDOWN:
        return KEY_INTENTS.get(event.key)
    if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1 and button_visible:
        if START_BUTTON_RECT.collidepoint(event.pos):
            return Intent.START
    return None
