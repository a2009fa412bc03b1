"""
Ping Pong exceptions
"""


class PingPongError(Exception):
    """Base class for all game errors"""


class ResourceError(PingPongError):
    """A sound, font or surface could not be built. Raised during setup."""


class AudioPlaybackError(PingPongError):
    """A sound failed to play mid-game. Not recoverable."""
