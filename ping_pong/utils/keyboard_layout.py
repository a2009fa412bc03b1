"""
Keyboard layout detection for Ping Pong
"""

import locale
import logging
import os

from ping_pong.utils.config import KEYBOARD_LAYOUTS
from ping_pong.utils.config import game_config

logger = logging.getLogger(__name__)


def _layout_for_language(language: str) -> str | None:
    language = language.lower()
    if language.startswith("fr"):
        return "azerty"
    if language.startswith("de"):
        return "qwertz"
    return None


def detect_system_layout() -> str:
    """
    Detect the most likely keyboard layout based on system locale

    Returns:
        Keyboard layout name (default to 'qwerty' if detection fails)
    """
    system_locale = locale.getlocale()[0]
    if system_locale:
        return _layout_for_language(system_locale) or "qwerty"

    # Fallback to environment variables
    lang = os.environ.get("LANG", "")
    return _layout_for_language(lang) or "qwerty"


def list_available_layouts() -> dict[str, str]:
    """Get all available keyboard layouts"""
    return {name: layout.name for name, layout in KEYBOARD_LAYOUTS.items()}


def auto_configure_layout() -> str:
    """
    Automatically configure the best keyboard layout

    Returns:
        The selected layout name
    """
    detected = detect_system_layout()
    game_config.KEYBOARD_LAYOUT = detected
    logger.info("Using %s keyboard layout", KEYBOARD_LAYOUTS[detected].name)
    return detected


def show_layout_help() -> str:
    """Generate help text showing current key mappings"""
    layout = game_config.get_keyboard_layout()

    help_text = f"Keyboard layout: {layout.name}\n\n"
    help_text += "Player 1 (left):\n"
    for action, key_name in layout.display_names.items():
        help_text += f"  {action}: {key_name}\n"

    help_text += "\nPlayer 2 (right):\n"
    help_text += "  up: ↑\n"
    help_text += "  down: ↓\n"

    help_text += f"\nAvailable layouts: {', '.join(list_available_layouts().values())}\n"

    return help_text
