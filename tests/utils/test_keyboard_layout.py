"""
Unit tests for keyboard layout detection
"""

import locale

import pytest

from ping_pong.utils.config import game_config, game_config_tmp
from ping_pong.utils.keyboard_layout import (
    auto_configure_layout,
    detect_system_layout,
    list_available_layouts,
    show_layout_help,
)


@pytest.fixture
def system_locale(monkeypatch):
    def set_locale(language, lang_env=""):
        monkeypatch.setattr(locale, "getlocale", lambda *args: (language, "UTF-8"))
        monkeypatch.setenv("LANG", lang_env)

    return set_locale


class TestDetection:
    """Test locale based layout detection"""

    @pytest.mark.parametrize(
        "language,expected",
        [
            ("fr_FR", "azerty"),
            ("fr_BE", "azerty"),
            ("de_DE", "qwertz"),
            ("en_US", "qwerty"),
            ("es_ES", "qwerty"),
        ],
    )
    def test_from_locale(self, system_locale, language, expected):
        system_locale(language)
        assert detect_system_layout() == expected

    def test_falls_back_to_lang_variable(self, system_locale):
        system_locale(None, "de_AT.UTF-8")
        assert detect_system_layout() == "qwertz"

    def test_defaults_to_qwerty(self, system_locale):
        system_locale(None, "")
        assert detect_system_layout() == "qwerty"

    def test_auto_configure_updates_config(self, system_locale):
        system_locale("fr_FR")
        with game_config_tmp(KEYBOARD_LAYOUT="qwerty"):
            assert auto_configure_layout() == "azerty"
            assert game_config.KEYBOARD_LAYOUT == "azerty"


class TestHelp:
    """Test the controls help text"""

    def test_lists_layouts(self):
        assert list_available_layouts() == {
            "qwerty": "QWERTY",
            "azerty": "AZERTY",
            "qwertz": "QWERTZ",
        }

    def test_help_shows_current_keys(self):
        with game_config_tmp(KEYBOARD_LAYOUT="azerty"):
            help_text = show_layout_help()
        assert "AZERTY" in help_text
        assert "up: Z" in help_text
        assert "down: S" in help_text
