"""
Sound effects for Ping Pong
"""

import logging
from pathlib import Path

import pygame

from ping_pong.core.exceptions import AudioPlaybackError
from ping_pong.core.exceptions import ResourceError
from ping_pong.core.match import SoundCue
from ping_pong.utils.config import GameConfig
from ping_pong.utils.config import game_config

logger = logging.getLogger(__name__)

SOUND_FILES = {
    SoundCue.HIT: "hit.wav",
    SoundCue.LOSE: "lose.wav",
    SoundCue.WALL: "wall.wav",
}


def load_sound(path: Path, volume: float) -> pygame.mixer.Sound:
    """Loads a sound file and sets its volume, failing loudly"""
    try:
        sound = pygame.mixer.Sound(str(path))
    except (pygame.error, FileNotFoundError) as e:
        raise ResourceError(f"Could not load sound {path}: {e}") from e
    sound.set_volume(volume)
    return sound


class SoundBank:
    """The three game sounds, loaded once at startup"""

    def __init__(self, sounds: dict[SoundCue, pygame.mixer.Sound]):
        self.sounds = sounds

    @classmethod
    def from_config(cls, config: GameConfig | None = None) -> "SoundBank":
        config = config or game_config
        volumes = {
            SoundCue.HIT: config.HIT_VOLUME,
            SoundCue.LOSE: config.LOSE_VOLUME,
            SoundCue.WALL: config.WALL_VOLUME,
        }
        sound_dir = config.get_sound_dir()
        sounds = {
            cue: load_sound(sound_dir / filename, volumes[cue])
            for cue, filename in SOUND_FILES.items()
        }
        logger.info("Loaded %d sounds from %s", len(sounds), sound_dir)
        return cls(sounds)

    def play(self, cue: SoundCue) -> None:
        try:
            self.sounds[cue].play()
        except pygame.error as e:
            raise AudioPlaybackError(f"Could not play {cue.value} sound: {e}") from e


class SilentSoundBank:
    """Stand-in used when sound is disabled"""

    def play(self, cue: SoundCue) -> None:
        logger.debug("Sound %s (muted)", cue.value)
