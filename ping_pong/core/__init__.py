"""
Core module of Ping Pong game
"""

from ping_pong.core.collision import intersects
from ping_pong.core.entities import Ball
from ping_pong.core.entities import Direction
from ping_pong.core.entities import Paddle
from ping_pong.core.entities import PlayerId
from ping_pong.core.entities import Vector2D
from ping_pong.core.match import FrameContext
from ping_pong.core.match import Match
from ping_pong.core.match import MatchSnapshot
from ping_pong.core.match import Playing
from ping_pong.core.match import RoundOver
from ping_pong.core.match import SoundCue

__all__ = [
    "Ball",
    "Paddle",
    "Direction",
    "PlayerId",
    "Vector2D",
    "intersects",
    "Match",
    "MatchSnapshot",
    "FrameContext",
    "Playing",
    "RoundOver",
    "SoundCue",
]
