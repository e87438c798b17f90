"""Main game loop and session management."""

from typing import Optional

import pygame

from starfall.config import FPS, KEY_REPEAT, SAMPLE_RATE, SCREEN_HEIGHT, SCREEN_WIDTH, WINDOW_TITLE
from starfall.controls import Intent, translate_event
from starfall.logger import get_logger
from starfall.renderer import Renderer
from starfall.simulation import GamePhase, apply_intent, new_game_state, start_session, tick
from starfall.sound_manager import SoundManager, dispatch_events

# Get logger for this module
logger = get_logger(__name__)

# Window events after which the idle start screen must be painted again
REDRAW_EVENTS = (pygame.VIDEOEXPOSE, pygame.WINDOWEXPOSED)


class Game:
    """Owns the window, the clock and the game state, and runs the frame loop."""

    def __init__(self, seed: Optional[int] = None, mute: bool = False, fps: int = FPS):
        """Create the window and an idle session waiting on the start screen.

        Args:
            seed: Seed for every random draw of the simulation.
            mute: Run without opening the audio device.
            fps: Target frames per second.
        """
        if mute:
            pygame.display.init()
            pygame.font.init()
        else:
            pygame.mixer.pre_init(SAMPLE_RATE, -16, 1)
            pygame.init()
        logger.info("Initializing game")

        self.is_running = True
        self.is_paused = False
        self.fps = fps

        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        pygame.key.set_repeat(*KEY_REPEAT)

        self.clock = pygame.time.Clock()
        self.sound_manager = SoundManager(enabled=not mute)
        self.renderer = Renderer(self.screen)
        self.state = new_game_state(seed)

        # Drawn once, then again only when the window asks to be repainted
        self.start_screen_drawn = False

    def run(self):
        """Starts and manages the main game loop."""
        while self.is_running:
            if self.state.phase is GamePhase.START:
                self._wait_for_start()
                continue

            self._handle_events()
            self._update()
            self._render()
            self.clock.tick(self.fps)

        self.sound_manager.stop_ambience()
        pygame.quit()

    def stop(self) -> None:
        """End the session; no further frames are scheduled."""
        logger.info("Stopping game")
        self.is_running = False

    def start_session(self) -> None:
        """Begin (or restart) a session."""
        # Audio is optional; a failure here never blocks the session
        self.sound_manager.resume()
        self.is_paused = False
        dispatch_events(start_session(self.state), self.sound_manager)

    def _wait_for_start(self) -> None:
        """Idle on the start screen without running any ticks."""
        if not self.start_screen_drawn:
            self._render()
            self.start_screen_drawn = True

        event = pygame.event.wait()
        if event.type in REDRAW_EVENTS:
            self.start_screen_drawn = False
            return
        self._process_event(event)

    def _handle_events(self) -> None:
        """Process all pending events before the next tick."""
        for event in pygame.event.get():
            self._process_event(event)

    def _process_event(self, event: pygame.event.Event) -> None:
        intent = translate_event(event, button_visible=self.state.phase is GamePhase.START)
        if intent is None:
            return

        if intent is Intent.QUIT:
            self.stop()
        elif intent is Intent.START:
            self.start_session()
        elif intent is Intent.PAUSE:
            if self.state.phase is GamePhase.PLAYING:
                self.is_paused = not self.is_paused
                logger.info("Game paused" if self.is_paused else "Game resumed")
        elif not self.is_paused:
            dispatch_events(apply_intent(self.state, intent), self.sound_manager)

    def _update(self) -> None:
        """Run one simulation tick and play the sounds it asked for."""
        if self.is_paused:
            return
        events = tick(self.state)
        dispatch_events(events, self.sound_manager)

    def _render(self) -> None:
        """Draws the game state to the screen."""
        self.renderer.draw(self.state, paused=self.is_paused)
        pygame.display.flip()
