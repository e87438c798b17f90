"""Draws the game state and the score line onto a pygame surface."""

import pygame

from starfall.config import (
    BACKGROUND_COLOR,
    BUTTON_COLOR,
    DEFAULT_FONT_NAME,
    DEFAULT_FONT_SIZE,
    ENEMY_COLOR,
    PLAYER_COLOR,
    PROJECTILE_COLOR,
    PROJECTILE_LINE_WIDTH,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    STAR_COLOR,
    TITLE_FONT_SIZE,
    WHITE,
    WINDOW_TITLE,
)
from starfall.controls import START_BUTTON_RECT
from starfall.entities import Player
from starfall.simulation import GamePhase, GameState


def status_text(score: int, level: int) -> str:
    """Text shown by the score display."""
    return f"Score: {score} | Level: {level}"


class Renderer:
    """Renders entity snapshots; never writes back into the game state."""

    def __init__(self, surface: pygame.Surface) -> None:
        """Initialize the renderer.

        Args:
            surface: Surface everything is drawn on, usually the display.
        """
        self.surface = surface
        if not pygame.font.get_init():
            pygame.font.init()
        self.font = pygame.font.SysFont(DEFAULT_FONT_NAME, DEFAULT_FONT_SIZE)
        self.title_font = pygame.font.SysFont(DEFAULT_FONT_NAME, TITLE_FONT_SIZE)

    def draw(self, state: GameState, paused: bool = False) -> None:
        """Draw a full frame for the given state."""
        self.surface.fill(BACKGROUND_COLOR)

        for star in state.stars:
            pygame.draw.circle(self.surface, STAR_COLOR, (star.x, star.y), star.size)

        self._draw_player(state.player)

        for enemy in state.formation:
            pygame.draw.rect(self.surface, ENEMY_COLOR, enemy.rect)

        for projectile in state.projectiles:
            pygame.draw.line(
                self.surface,
                PROJECTILE_COLOR,
                (projectile.x, projectile.y),
                (projectile.x, projectile.y - projectile.size * 2),
                PROJECTILE_LINE_WIDTH,
            )

        if state.phase is GamePhase.START:
            self._draw_start_screen()
        else:
            self.draw_status(state.score, state.level)
            if paused:
                self._draw_centered("PAUSED", self.title_font, SCREEN_HEIGHT // 2)

    def draw_status(self, score: int, level: int) -> None:
        """Score display: current score and level in the top left corner."""
        text = self.font.render(status_text(score, level), True, WHITE)
        self.surface.blit(text, (10, 10))

    def _draw_player(self, player: Player) -> None:
        """Triangle pointing up, with its apex at the top centre of the ship."""
        rect = player.rect
        pygame.draw.polygon(
            self.surface, PLAYER_COLOR, [rect.midtop, rect.bottomleft, rect.bottomright]
        )

    def _draw_start_screen(self) -> None:
        """Title and start button shown before a session begins."""
        self._draw_centered(WINDOW_TITLE.upper(), self.title_font, SCREEN_HEIGHT // 3)

        pygame.draw.rect(self.surface, BUTTON_COLOR, START_BUTTON_RECT, border_radius=8)
        pygame.draw.rect(self.surface, WHITE, START_BUTTON_RECT, width=2, border_radius=8)
        label = self.font.render("Start Game", True, WHITE)
        self.surface.blit(label, label.get_rect(center=START_BUTTON_RECT.center))

        hints = ["ENTER or click to start", "ARROWS move   SPACE fire   P pause"]
        y = START_BUTTON_RECT.bottom + 40
        for hint in hints:
            self._draw_centered(hint, self.font, y)
            y += DEFAULT_FONT_SIZE

    def _draw_centered(self, text: str, font: pygame.font.Font, y: int) -> None:
        surface = font.render(text, True, WHITE)
        self.surface.blit(surface, surface.get_rect(center=(SCREEN_WIDTH // 2, y)))
