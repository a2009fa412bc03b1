"""
PyGame renderer for Ping Pong game
"""

import pygame

from ping_pong.core.entities import Ball
from ping_pong.core.entities import Paddle
from ping_pong.core.entities import PlayerId
from ping_pong.core.exceptions import ResourceError
from ping_pong.core.match import MatchSnapshot
from ping_pong.core.match import RoundOver
from ping_pong.utils.config import game_config
from ping_pong.utils.constants import PADDLE_HEIGHT
from ping_pong.utils.constants import PADDLE_WIDTH

STROKE_WIDTH = 2
PADDLE_CORNER_RADIUS = 20


def build_paddle_surface(color: tuple[int, int, int]) -> pygame.Surface:
    """Builds the stroked rounded rectangle shared by both paddles"""
    surface = pygame.Surface((int(PADDLE_WIDTH), int(PADDLE_HEIGHT)), pygame.SRCALPHA)
    pygame.draw.rect(
        surface,
        color,
        surface.get_rect(),
        STROKE_WIDTH,
        border_radius=PADDLE_CORNER_RADIUS,
    )
    return surface


class PygameRenderer:
    """PyGame-based renderer for Ping Pong"""

    def __init__(self, width: int | None = None, height: int | None = None):
        """Initialize the PyGame renderer"""
        width = width or game_config.WINDOW_WIDTH
        height = height or game_config.WINDOW_HEIGHT

        pygame.init()

        # The play field follows the window size
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption(game_config.WINDOW_TITLE)

        self.clock = pygame.time.Clock()

        self.background_color = game_config.BACKGROUND_COLOR
        self.foreground_color = game_config.FOREGROUND_COLOR
        self.overlay_color = game_config.OVERLAY_COLOR

        try:
            self.font = pygame.font.Font(None, game_config.FONT_SIZE)
            self.paddle_surface = build_paddle_surface(self.foreground_color)
        except pygame.error as e:
            raise ResourceError(f"Could not build render resources: {e}") from e

        self.show_debug = False

    @property
    def width(self) -> int:
        return self.screen.get_width()

    @property
    def height(self) -> int:
        return self.screen.get_height()

    def clear_screen(self) -> None:
        """Clear the screen with background color"""
        self.screen.fill(self.background_color)

    def draw_paddle(self, paddle: Paddle) -> None:
        self.screen.blit(self.paddle_surface, (int(paddle.position.x), int(paddle.position.y)))

    def draw_ball(self, ball: Ball) -> None:
        center = ball.center
        pygame.draw.circle(
            self.screen,
            self.foreground_color,
            (int(center.x), int(center.y)),
            int(ball.radius),
            STROKE_WIDTH,
        )

    def draw_score(self, score: tuple[int, int]) -> None:
        """Draw the current score"""
        text_surface = self.font.render(f"{score[0]} | {score[1]}", True, self.foreground_color)
        text_rect = text_surface.get_rect()
        text_rect.centerx = self.width // 2
        text_rect.top = 0
        self.screen.blit(text_surface, text_rect)

    def draw_round_over(self, winner: PlayerId) -> None:
        """Draw the translucent overlay and the winner banner"""
        overlay = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
        overlay.fill(self.overlay_color)
        self.screen.blit(overlay, (0, 0))

        banner = self.font.render(f"Player {winner.value} Won!", True, self.foreground_color)
        banner_rect = banner.get_rect()
        banner_rect.center = (self.width // 2, self.height // 2)
        self.screen.blit(banner, banner_rect)

    def draw_debug_info(self, snapshot: MatchSnapshot) -> None:
        lines = [
            f"FPS: {self.clock.get_fps():.0f}",
            f"Ball speed: {snapshot.ball.velocity.magnitude():.1f}",
        ]
        y_offset = 10
        for line in lines:
            surface = self.font.render(line, True, self.foreground_color)
            self.screen.blit(surface, (10, y_offset))
            y_offset += surface.get_height() + 4

    def render_frame(self, snapshot: MatchSnapshot) -> None:
        """Render a single frame of the game"""
        self.clear_screen()

        self.draw_paddle(snapshot.player_one)
        self.draw_paddle(snapshot.player_two)
        self.draw_ball(snapshot.ball)
        self.draw_score(snapshot.score)

        if isinstance(snapshot.state, RoundOver):
            self.draw_round_over(snapshot.state.winner)

        if self.show_debug:
            self.draw_debug_info(snapshot)

    def present(self) -> None:
        """Present the rendered frame"""
        pygame.display.flip()

    def toggle_debug(self) -> None:
        self.show_debug = not self.show_debug

    def cleanup(self) -> None:
        """Clean up PyGame resources"""
        pygame.quit()
