"""
Keyboard routing: maps raw key codes to per-player directional intents
"""

from dataclasses import dataclass

from ping_pong.core.entities import Direction
from ping_pong.core.entities import PlayerId
from ping_pong.utils.config import KeyboardLayout
from ping_pong.utils.config import game_config


@dataclass(frozen=True)
class Intent:
    """A player wanting to move in a direction"""

    player_id: PlayerId
    direction: Direction


class InputRouter:
    """Fixed key table for two players sharing one keyboard"""

    def __init__(self, layout: KeyboardLayout | None = None):
        if layout is None:
            layout = game_config.get_keyboard_layout()
        self.layout = layout

        self.key_table: dict[int, Intent] = {}
        for player_id, keys in (
            (PlayerId.ONE, layout.player_one_keys),
            (PlayerId.TWO, layout.player_two_keys),
        ):
            self.key_table[keys["up"]] = Intent(player_id, Direction.UP)
            self.key_table[keys["down"]] = Intent(player_id, Direction.DOWN)

    def route(self, key: int) -> Intent | None:
        """Returns the intent bound to ``key``, or None for unbound keys"""
        return self.key_table.get(key)
