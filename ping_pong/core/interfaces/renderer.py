"""
Renderer protocol - defines interface for rendering backends
"""

from typing import Protocol

from ping_pong.core.match import MatchSnapshot


class RendererProtocol(Protocol):
    """
    Protocol for renderer implementations.

    Renderers only ever see snapshots, never the live match.
    """

    def render_frame(self, snapshot: MatchSnapshot) -> None:
        """
        Render a single frame of the game.

        Args:
            snapshot: Read-only copy of the ball, paddles, scores and state
        """
        ...

    def present(self) -> None:
        """Show the rendered frame"""
        ...

    def cleanup(self) -> None:
        """Clean up renderer resources"""
        ...
