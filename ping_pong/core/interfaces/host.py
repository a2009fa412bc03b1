"""
Host protocol - what the windowing/audio backend provides to the match
"""

from typing import Protocol

from ping_pong.core.match import SoundCue


class HostContext(Protocol):
    """
    Protocol for the backend that drives the frame loop.

    The match never talks to it directly: the host adapter queries it once
    per frame to build a FrameContext, and plays the cues the match returns.
    """

    def drawable_size(self) -> tuple[float, float]:
        """Current size of the play field, queried every frame"""
        ...

    def elapsed_since_last_frame(self) -> float:
        """Real time since the previous frame, in seconds"""
        ...

    def now(self) -> float:
        """Monotonic timestamp in seconds"""
        ...

    def play_sound(self, cue: SoundCue) -> None:
        """
        Fire-and-forget sound playback.

        Raises:
            AudioPlaybackError: if the sound cannot be played
        """
        ...
