"""
Ping Pong utilities: configuration, constants and keyboard layouts
"""

from ping_pong.utils.config import GameConfig
from ping_pong.utils.config import game_config

__all__ = ["game_config", "GameConfig"]
