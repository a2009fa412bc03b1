"""
Main game application with PyGame GUI
"""

import argparse
import logging
import sys
import time

import pygame

from ping_pong.core.exceptions import PingPongError
from ping_pong.core.interfaces.host import HostContext
from ping_pong.core.interfaces.renderer import RendererProtocol
from ping_pong.core.match import FrameContext
from ping_pong.core.match import Match
from ping_pong.core.match import SoundCue
from ping_pong.gui.audio import SilentSoundBank
from ping_pong.gui.audio import SoundBank
from ping_pong.gui.pygame_renderer import PygameRenderer
from ping_pong.utils.config import KEYBOARD_LAYOUTS
from ping_pong.utils.config import LOG_LEVELS
from ping_pong.utils.config import game_config
from ping_pong.utils.config import load_config_from_file
from ping_pong.utils.keyboard_layout import auto_configure_layout
from ping_pong.utils.keyboard_layout import show_layout_help

logger = logging.getLogger(__name__)


def frame_context_from(host: HostContext) -> FrameContext:
    """Polls the host once for everything the match needs this frame"""
    width, height = host.drawable_size()
    return FrameContext(
        width=float(width),
        height=float(height),
        delta_time=host.elapsed_since_last_frame(),
        now=host.now(),
    )


def advance(match: Match, host: HostContext) -> list[SoundCue]:
    """Runs one simulation frame and plays the sounds it raised"""
    cues = match.update(frame_context_from(host))
    for cue in cues:
        host.play_sound(cue)
    return cues


def draw(match: Match, renderer: RendererProtocol) -> None:
    """Hands the renderer a snapshot, never the live match"""
    renderer.render_frame(match.snapshot())
    renderer.present()


class PingPongApp:
    """Owns the window, the sounds and the match, and drives the frame loop"""

    def __init__(self, sound_enabled: bool | None = None) -> None:
        if sound_enabled is None:
            sound_enabled = game_config.SOUND_ENABLED

        self.renderer = PygameRenderer()
        self.sounds: SoundBank | SilentSoundBank = (
            SoundBank.from_config() if sound_enabled else SilentSoundBank()
        )

        width, height = self.drawable_size()
        self.match = Match(width, height)

        self.running = True
        self._last_delta = 0.0

    # HostContext

    def drawable_size(self) -> tuple[float, float]:
        width, height = self.renderer.screen.get_size()
        return float(width), float(height)

    def elapsed_since_last_frame(self) -> float:
        return self._last_delta

    def now(self) -> float:
        return time.monotonic()

    def play_sound(self, cue: SoundCue) -> None:
        self.sounds.play(cue)

    # Frame loop

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.running = False
            elif event.key == pygame.K_F2:
                self.renderer.toggle_debug()
            else:
                self.match.on_key_down(event.key)
        elif event.type == pygame.KEYUP:
            self.match.on_key_up(event.key)

    def run(self) -> None:
        """Runs until the window is closed. Errors raised by a frame end the loop."""
        logger.info("Game started")
        try:
            while self.running:
                self._last_delta = self.renderer.clock.tick(game_config.FPS) / 1000.0

                for event in pygame.event.get():
                    self.handle_event(event)

                advance(self.match, self)

                draw(self.match, self.renderer)
        finally:
            self.renderer.cleanup()
            logger.info("Game closed, final score %d | %d", *self.match.score)


def configure_logging(level: str) -> None:
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger().setLevel(level)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Two-player Ping Pong")
    parser.add_argument("--config", help="JSON configuration file")
    parser.add_argument(
        "--layout", choices=sorted(KEYBOARD_LAYOUTS), help="Keyboard layout for player 1"
    )
    parser.add_argument("--no-sound", action="store_true", help="Disable sound effects")
    parser.add_argument("--log-level", choices=LOG_LEVELS, help="Logging level")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    configure_logging(args.log_level or game_config.LOG_LEVEL)
    if args.config:
        load_config_from_file(args.config)
    if args.log_level:
        game_config.LOG_LEVEL = args.log_level
    # The file may pick a different level
    configure_logging(game_config.LOG_LEVEL)

    if args.layout:
        game_config.KEYBOARD_LAYOUT = args.layout
    elif not args.config:
        auto_configure_layout()
    logger.info("Controls\n%s", show_layout_help())

    try:
        app = PingPongApp(sound_enabled=False if args.no_sound else None)
        app.run()
    except PingPongError:
        logger.exception("Fatal error")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
