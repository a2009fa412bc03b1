"""
Match state machine for Ping Pong
"""

import logging
from dataclasses import dataclass
from enum import Enum

from ping_pong.core.entities import Ball
from ping_pong.core.entities import Paddle
from ping_pong.core.entities import PlayerId
from ping_pong.core.input import InputRouter
from ping_pong.utils.constants import BALL_SPEED
from ping_pong.utils.constants import FIXED_STEP_RATE
from ping_pong.utils.constants import PADDLE_MARGIN
from ping_pong.utils.constants import ROUND_DWELL

logger = logging.getLogger(__name__)


class SoundCue(Enum):
    """Sound effects raised by the simulation"""

    HIT = "hit"
    WALL = "wall"
    LOSE = "lose"


@dataclass(frozen=True)
class Playing:
    """The ball is in play"""


@dataclass(frozen=True)
class RoundOver:
    """A point was scored, play resumes after the dwell"""

    winner: PlayerId
    ended_at: float


MatchState = Playing | RoundOver


@dataclass(frozen=True)
class FrameContext:
    """What the host knows about the current frame"""

    width: float
    height: float
    delta_time: float  # seconds since the previous frame
    now: float  # monotonic seconds


@dataclass(frozen=True)
class MatchSnapshot:
    """Read-only copy of the match for rendering"""

    ball: Ball
    player_one: Paddle
    player_two: Paddle
    state: MatchState

    @property
    def score(self) -> tuple[int, int]:
        return (self.player_one.score, self.player_two.score)


class Match:
    """Owns both paddles and the ball and advances them one frame at a time"""

    def __init__(self, field_width: float, field_height: float, router: InputRouter | None = None):
        self.field_width = field_width
        self.field_height = field_height
        self.router = router if router is not None else InputRouter()
        self.reset()

    def reset(self) -> None:
        """Starts a fresh match: scores to zero, paddles at the top, ball in the middle"""
        self.player_one = Paddle(PADDLE_MARGIN, PlayerId.ONE)
        self.player_two = Paddle(self.field_width - PADDLE_MARGIN, PlayerId.TWO)
        self.ball = Ball(self.field_width / 2, self.field_height / 2, BALL_SPEED, 0.0)
        self.state: MatchState = Playing()

    @property
    def paddles(self) -> tuple[Paddle, Paddle]:
        return (self.player_one, self.player_two)

    def get_paddle(self, player_id: PlayerId) -> Paddle:
        for paddle in self.paddles:
            if paddle.player_id == player_id:
                return paddle
        raise ValueError(f"No paddle for {player_id}")

    @property
    def score(self) -> tuple[int, int]:
        return (self.player_one.score, self.player_two.score)

    def update(self, frame: FrameContext) -> list[SoundCue]:
        """
        Advances the match by one frame.

        Args:
            frame: Field size and timing for this frame

        Returns:
            Sound cues raised during the frame, in order
        """
        self.field_width = frame.width
        self.field_height = frame.height

        if isinstance(self.state, RoundOver):
            self._round_over_update(self.state, frame)
            return []
        return self._play_update(frame)

    def _play_update(self, frame: FrameContext) -> list[SoundCue]:
        cues: list[SoundCue] = []
        ball = self.ball

        ball.integrate(FIXED_STEP_RATE)

        # Each paddle sees the velocity left by the previous one
        for paddle in self.paddles:
            ball.velocity, hit = paddle.update_collision(ball.position, ball.velocity)
            if hit:
                cues.append(SoundCue.HIT)
                logger.debug("Ball hit by player %d", paddle.player_id.value)

        if ball.position.y <= 0.0 or ball.position.y >= frame.height:
            ball.bounce_vertical()
            cues.append(SoundCue.WALL)

        # Independent checks, not an else-branch
        if ball.position.x >= frame.width:
            self._end_round(PlayerId.ONE, frame.now)
            cues.append(SoundCue.LOSE)
        if ball.position.x <= 0.0:
            self._end_round(PlayerId.TWO, frame.now)
            cues.append(SoundCue.LOSE)

        for paddle in self.paddles:
            paddle.move_to_velocity(frame.delta_time, frame.height)

        return cues

    def _end_round(self, winner: PlayerId, now: float) -> None:
        self.get_paddle(winner).score += 1
        self.state = RoundOver(winner=winner, ended_at=now)
        logger.debug("Round won by player %d, score %s", winner.value, self.score)

    def _round_over_update(self, state: RoundOver, frame: FrameContext) -> None:
        if frame.now - state.ended_at <= ROUND_DWELL:
            return

        self.state = Playing()
        self.ball.reset_to_center(frame.width, frame.height)
        # Paddles keep their position between rounds
        for paddle in self.paddles:
            paddle.stop()
        logger.debug("New round started")

    def on_key_down(self, key: int) -> None:
        """Key press (repeats included) sets the player's target velocity"""
        if not isinstance(self.state, Playing):
            return
        intent = self.router.route(key)
        if intent is not None:
            self.get_paddle(intent.player_id).handle_input_down(intent.direction)

    def on_key_up(self, key: int) -> None:
        """Key release stops the player's paddle"""
        if not isinstance(self.state, Playing):
            return
        intent = self.router.route(key)
        if intent is not None:
            self.get_paddle(intent.player_id).handle_input_up()

    def snapshot(self) -> MatchSnapshot:
        """Returns a copy of the match state that rendering cannot mutate"""
        return MatchSnapshot(
            ball=self.ball.copy(),
            player_one=self.player_one.copy(),
            player_two=self.player_two.copy(),
            state=self.state,
        )
