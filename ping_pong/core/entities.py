"""
Ping Pong game entities: ball and paddles
"""

import math
from dataclasses import dataclass
from enum import Enum

import numpy as np

from ping_pong.core.collision import intersects
from ping_pong.utils.constants import BALL_RADIUS
from ping_pong.utils.constants import BALL_SPEED
from ping_pong.utils.constants import BALL_SPEED_INCREASE
from ping_pong.utils.constants import PADDLE_HEIGHT
from ping_pong.utils.constants import PADDLE_SMOOTHING
from ping_pong.utils.constants import PADDLE_SPEED
from ping_pong.utils.constants import PADDLE_WIDTH


class Direction(Enum):
    """Vertical direction requested by a player"""

    UP = "up"
    DOWN = "down"


class PlayerId(Enum):
    """Player seats"""

    ONE = 1
    TWO = 2


@dataclass
class Vector2D:
    """Simple 2D vector for positions and velocities"""

    x: float
    y: float

    def __add__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x + other.x, self.y + other.y)

    def __iadd__(self, other: "Vector2D") -> "Vector2D":
        self.x += other.x
        self.y += other.y
        return self

    def __truediv__(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x / scalar, self.y / scalar)

    def magnitude(self) -> float:
        return float(np.linalg.norm([self.x, self.y]))

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def copy(self) -> "Vector2D":
        return Vector2D(self.x, self.y)


class Ball:
    """Game ball.

    ``position`` is the top-left corner of the ball's bounding square, the
    center sits ``radius`` units further along both axes.
    """

    def __init__(self, x: float, y: float, vx: float, vy: float):
        self.position = Vector2D(x, y)
        self.velocity = Vector2D(vx, vy)
        self.radius = BALL_RADIUS

    @property
    def center(self) -> Vector2D:
        return self.position + Vector2D(self.radius, self.radius)

    def integrate(self, step_rate: float) -> None:
        """Advances the ball by one fixed step of ``1 / step_rate`` seconds"""
        self.position += self.velocity / step_rate

    def bounce_vertical(self) -> None:
        """Vertical bounce (top/bottom walls), magnitude is kept"""
        self.velocity.y = -self.velocity.y

    def reset_to_center(self, field_width: float, field_height: float) -> None:
        """Puts the ball back in the middle of the field, heading right"""
        self.position = Vector2D(field_width / 2, field_height / 2)
        self.velocity = Vector2D(BALL_SPEED, 0.0)

    def copy(self) -> "Ball":
        return Ball(self.position.x, self.position.y, self.velocity.x, self.velocity.y)


class Paddle:
    """Player paddle, moved vertically towards a smoothed target velocity"""

    def __init__(self, x: float, player_id: PlayerId, y: float = 0.0):
        self.position = Vector2D(x, y)
        self.player_id = player_id
        self.width = PADDLE_WIDTH
        self.height = PADDLE_HEIGHT
        self.velocity = 0.0
        self.target_velocity = 0.0
        self.score = 0

    def handle_input_down(self, direction: Direction) -> None:
        """Starts accelerating towards full speed in the given direction"""
        if direction == Direction.UP:
            self.target_velocity = -PADDLE_SPEED
        else:
            self.target_velocity = PADDLE_SPEED

    def handle_input_up(self) -> None:
        """Starts decelerating to a stop"""
        self.target_velocity = 0.0

    def stop(self) -> None:
        self.velocity = 0.0
        self.target_velocity = 0.0

    def move_to_velocity(self, delta_time: float, field_height: float) -> None:
        """
        Smooths the velocity towards the target and moves the paddle.

        Hitting the top or bottom of the field stops the paddle dead: both the
        current and the target velocity drop to zero.

        Args:
            delta_time: Real time elapsed since the previous frame, in seconds
            field_height: Current height of the play field
        """
        self.velocity += (self.target_velocity - self.velocity) * PADDLE_SMOOTHING * delta_time
        self.position.y += self.velocity

        if self.position.y < 0.0:
            self.position.y = 0.0
            self.stop()
        if self.position.y > field_height - self.height:
            self.position.y = field_height - self.height
            self.stop()

    def get_center(self) -> Vector2D:
        return Vector2D(self.position.x + self.width / 2, self.position.y + self.height / 2)

    def intersects_ball(self, ball_position: Vector2D) -> bool:
        """Checks the ball (given by its top-left corner) against the paddle box"""
        return intersects(
            ball_position + Vector2D(BALL_RADIUS, BALL_RADIUS),
            BALL_RADIUS,
            self.get_center(),
            Vector2D(self.width, self.height),
        )

    def update_collision(
        self, ball_position: Vector2D, ball_velocity: Vector2D
    ) -> tuple[Vector2D, bool]:
        """
        Bounces the ball off the paddle if they touch.

        The horizontal speed is reversed and amplified, the vertical speed is
        replaced by the contact offset from the paddle midpoint, mirrored
        against the incoming vertical direction.

        Returns:
            The (possibly new) ball velocity and whether the paddle was hit
        """
        if not self.intersects_ball(ball_position):
            return ball_velocity, False

        y_sign = math.copysign(1.0, ball_velocity.y)
        diff = ball_position.y - (self.position.y + self.height / 2)
        new_velocity = Vector2D(ball_velocity.x * -BALL_SPEED_INCREASE, diff * -y_sign)
        return new_velocity, True

    def copy(self) -> "Paddle":
        paddle = Paddle(self.position.x, self.player_id, self.position.y)
        paddle.velocity = self.velocity
        paddle.target_velocity = self.target_velocity
        paddle.score = self.score
        return paddle
