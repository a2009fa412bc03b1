"""
Ping Pong configuration with Pydantic validation
"""

import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pygame
from pydantic import BaseModel
from pydantic import Field
from pydantic import field_validator
from pydantic import model_validator

from ping_pong.utils.constants import PADDLE_HEIGHT
from ping_pong.utils.constants import PADDLE_MARGIN
from ping_pong.utils.constants import PADDLE_WIDTH

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "ping_pong_config.json"
DEFAULT_RESOURCE_DIR = str(Path(__file__).resolve().parent.parent / "resources")


@dataclass
class KeyboardLayout:
    """Configuration for keyboard layouts"""

    name: str
    player_one_keys: dict[str, int]
    player_two_keys: dict[str, int]
    display_names: dict[str, str]


_ARROW_KEYS = {"up": pygame.K_UP, "down": pygame.K_DOWN}

KEYBOARD_LAYOUTS = {
    "qwerty": KeyboardLayout(
        name="QWERTY",
        player_one_keys={"up": pygame.K_w, "down": pygame.K_s},
        player_two_keys=_ARROW_KEYS,
        display_names={"up": "W", "down": "S"},
    ),
    "azerty": KeyboardLayout(
        name="AZERTY",
        player_one_keys={"up": pygame.K_z, "down": pygame.K_s},  # Z instead of W
        player_two_keys=_ARROW_KEYS,
        display_names={"up": "Z", "down": "S"},
    ),
    "qwertz": KeyboardLayout(
        name="QWERTZ",
        player_one_keys={"up": pygame.K_w, "down": pygame.K_s},
        player_two_keys=_ARROW_KEYS,
        display_names={"up": "W", "down": "S"},
    ),
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class GameConfig(BaseModel):
    """Presentation and host settings. Gameplay rules are not configurable."""

    model_config = {"validate_assignment": True}

    # Window
    WINDOW_WIDTH: int = Field(default=800, gt=0, description="Initial window width in pixels")
    WINDOW_HEIGHT: int = Field(default=600, gt=0, description="Initial window height in pixels")
    WINDOW_TITLE: str = Field(default="Ping Pong", min_length=1, description="Window title")
    FPS: int = Field(default=60, gt=0, description="Frames per second")

    # Display
    BACKGROUND_COLOR: tuple[int, int, int] = Field(default=(0, 0, 0), description="RGB color")
    FOREGROUND_COLOR: tuple[int, int, int] = Field(
        default=(255, 255, 255), description="RGB color of paddles, ball and text"
    )
    OVERLAY_COLOR: tuple[int, int, int, int] = Field(
        default=(255, 0, 0, 128), description="RGBA color of the round-over overlay"
    )
    FONT_SIZE: int = Field(default=20, gt=0, description="Score and banner font size")

    # Controls
    KEYBOARD_LAYOUT: str = Field(default="qwerty", description="Keyboard layout name")

    # Audio
    SOUND_ENABLED: bool = Field(default=True, description="Play sound effects")
    RESOURCE_DIR: str = Field(
        default=DEFAULT_RESOURCE_DIR, description="Directory holding sfx/"
    )
    HIT_VOLUME: float = Field(default=0.5, ge=0, le=1, description="Paddle hit volume")
    LOSE_VOLUME: float = Field(default=0.2, ge=0, le=1, description="Point lost volume")
    WALL_VOLUME: float = Field(default=0.5, ge=0, le=1, description="Wall bounce volume")

    # Logging
    LOG_LEVEL: str = Field(default="INFO", description="Logging level name")

    @field_validator("KEYBOARD_LAYOUT")
    @classmethod
    def validate_keyboard_layout(cls, v: str) -> str:
        """Validate keyboard layout exists"""
        if v not in KEYBOARD_LAYOUTS:
            raise ValueError(
                f"Unknown keyboard layout '{v}'. Available: {list(KEYBOARD_LAYOUTS.keys())}"
            )
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level '{v}'. Available: {list(LOG_LEVELS)}")
        return level

    @model_validator(mode="after")
    def validate_window_dimensions(self) -> "GameConfig":
        """Validate the window is large enough for both paddles"""
        min_width = 2 * (PADDLE_MARGIN + PADDLE_WIDTH) + 100
        if self.WINDOW_WIDTH < min_width:
            raise ValueError(f"WINDOW_WIDTH must be at least {min_width} pixels")

        min_height = PADDLE_HEIGHT + 50
        if self.WINDOW_HEIGHT < min_height:
            raise ValueError(f"WINDOW_HEIGHT must be at least {min_height} pixels")

        return self

    def get_keyboard_layout(self) -> KeyboardLayout:
        """Get the current keyboard layout configuration"""
        return KEYBOARD_LAYOUTS[self.KEYBOARD_LAYOUT]

    def get_sound_dir(self) -> Path:
        return Path(self.RESOURCE_DIR) / "sfx"

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization"""
        return self.model_dump()

    def save_to_file(self, filepath: str = DEFAULT_CONFIG_FILE) -> None:
        """Save configuration to a JSON file"""
        with open(Path(filepath), "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str = DEFAULT_CONFIG_FILE) -> "GameConfig":
        """Load configuration from a JSON file"""
        config_path = Path(filepath)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")

        with open(config_path, encoding="utf-8") as f:
            config_dict = json.load(f)

        return cls(**config_dict)


# Global configuration instance
game_config = GameConfig()


def load_config_from_file(filepath: str = DEFAULT_CONFIG_FILE) -> None:
    """Load configuration from file into the global game_config"""
    loaded_config = GameConfig.load_from_file(filepath)
    for field_name in GameConfig.model_fields.keys():
        setattr(game_config, field_name, getattr(loaded_config, field_name))
    logger.info("Loaded configuration from %s", filepath)


def _change_values(obj: BaseModel, old_values: dict[str, Any], **kwargs: Any) -> None:
    """Sets values one at a time, recording each previous value before it is replaced"""
    for name, new_value in kwargs.items():
        old_value = getattr(obj, name)
        setattr(obj, name, new_value)
        old_values[name] = old_value


@contextmanager
def game_config_tmp(**kwargs: Any) -> Iterator[None]:
    """Temporarily modify game config (with validation)"""
    old_values: dict[str, Any] = {}
    try:
        _change_values(game_config, old_values, **kwargs)
        yield
    finally:
        _change_values(game_config, {}, **old_values)
