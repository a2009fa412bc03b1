"""
Unit tests for configuration validation

Tests the configuration system including:
- Field and model validation
- JSON save / load
- Context manager for temporary config changes
"""

import pytest
from pydantic import ValidationError

from ping_pong.utils.config import (
    GameConfig,
    game_config,
    game_config_tmp,
    load_config_from_file,
)


class TestGameConfigValidation:
    """Test game configuration validation"""

    def test_valid_default_config(self):
        config = GameConfig()
        assert config.WINDOW_WIDTH == 800
        assert config.WINDOW_HEIGHT == 600
        assert config.KEYBOARD_LAYOUT == "qwerty"
        assert config.get_keyboard_layout().name == "QWERTY"

    def test_unknown_keyboard_layout(self):
        with pytest.raises(ValidationError, match="Unknown keyboard layout"):
            GameConfig(KEYBOARD_LAYOUT="dvorak")

    def test_unknown_layout_rejected_on_assignment(self):
        config = GameConfig()
        with pytest.raises(ValidationError):
            config.KEYBOARD_LAYOUT = "dvorak"
        assert config.KEYBOARD_LAYOUT == "qwerty"

    def test_window_too_narrow(self):
        with pytest.raises(ValidationError, match="WINDOW_WIDTH"):
            GameConfig(WINDOW_WIDTH=100)

    def test_window_too_short_for_paddle(self):
        with pytest.raises(ValidationError, match="WINDOW_HEIGHT"):
            GameConfig(WINDOW_HEIGHT=220)

    @pytest.mark.parametrize("field", ["WINDOW_WIDTH", "WINDOW_HEIGHT", "FPS", "FONT_SIZE"])
    def test_non_positive_values(self, field):
        with pytest.raises(ValidationError):
            GameConfig(**{field: 0})

    @pytest.mark.parametrize("volume", [-0.1, 1.5])
    def test_volume_out_of_range(self, volume):
        with pytest.raises(ValidationError):
            GameConfig(HIT_VOLUME=volume)

    def test_log_level_is_normalized(self):
        assert GameConfig(LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"

    def test_unknown_log_level(self):
        with pytest.raises(ValidationError, match="Unknown log level"):
            GameConfig(LOG_LEVEL="chatty")

    def test_sound_dir(self):
        config = GameConfig(RESOURCE_DIR="assets")
        assert config.get_sound_dir().as_posix() == "assets/sfx"

    def test_default_sound_dir_ships_with_package(self):
        sound_dir = GameConfig().get_sound_dir()
        assert sound_dir.is_absolute()
        for name in ("hit.wav", "lose.wav", "wall.wav"):
            assert (sound_dir / name).is_file()


class TestConfigFiles:
    """Test JSON persistence of the configuration"""

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "config.json"
        GameConfig(WINDOW_WIDTH=1024, KEYBOARD_LAYOUT="azerty", SOUND_ENABLED=False).save_to_file(
            str(path)
        )

        loaded = GameConfig.load_from_file(str(path))

        assert loaded.WINDOW_WIDTH == 1024
        assert loaded.KEYBOARD_LAYOUT == "azerty"
        assert loaded.SOUND_ENABLED is False
        assert loaded.OVERLAY_COLOR == (255, 0, 0, 128)

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            GameConfig.load_from_file(str(tmp_path / "nope.json"))

    def test_load_invalid_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text('{"FPS": -5}')
        with pytest.raises(ValidationError):
            GameConfig.load_from_file(str(path))

    def test_load_into_global_config(self, tmp_path):
        path = tmp_path / "config.json"
        GameConfig(WINDOW_TITLE="Pong Night").save_to_file(str(path))

        with game_config_tmp(WINDOW_TITLE=game_config.WINDOW_TITLE):
            load_config_from_file(str(path))
            assert game_config.WINDOW_TITLE == "Pong Night"

        assert game_config.WINDOW_TITLE == "Ping Pong"


class TestConfigContextManager:
    """Test temporary config changes"""

    def test_values_restored(self):
        original = game_config.FPS
        with game_config_tmp(FPS=30):
            assert game_config.FPS == 30
        assert game_config.FPS == original

    def test_values_restored_after_error(self):
        original = game_config.KEYBOARD_LAYOUT
        with pytest.raises(RuntimeError):
            with game_config_tmp(KEYBOARD_LAYOUT="azerty"):
                raise RuntimeError("boom")
        assert game_config.KEYBOARD_LAYOUT == original

    def test_invalid_temporary_value(self):
        with pytest.raises(ValidationError):
            with game_config_tmp(KEYBOARD_LAYOUT="dvorak"):
                pass
        assert game_config.KEYBOARD_LAYOUT == "qwerty"

    def test_partial_change_is_rolled_back(self):
        with pytest.raises(ValidationError):
            with game_config_tmp(FPS=30, LOG_LEVEL="chatty"):
                pass
        assert game_config.FPS == 60
        assert game_config.LOG_LEVEL == "INFO"
