
"""Sound cues and background music"""
import logging
import os
from enum import Enum
from typing import Dict
import pygame
from tetris_config import CONFIG

log = logging.getLogger(__name__)


class Cue(Enum):
    ROTATE = "rotate"
    CLEAR = "clear"


class SilentAudio:
    """Cue sink that plays nothing. Used when muted or when no device is available."""
    def play(self, cue: Cue):
        pass

    def close(self):
        pass


class MixerAudio:
    """One-shot cues and looping music through pygame.mixer."""
    def __init__(self, sound_dir: str, music: bool = True):
        self.sounds: Dict[Cue, pygame.mixer.Sound] = {}
        for cue in Cue:
            path = os.path.join(sound_dir, f"{cue.value}.mp3")
            self.sounds[cue] = pygame.mixer.Sound(path)
        self.music = False
        if music:
            pygame.mixer.music.load(os.path.join(sound_dir, "music.mp3"))
            pygame.mixer.music.play(-1)
            self.music = True

    def play(self, cue: Cue):
        self.sounds[cue].play()

    def close(self):
        if self.music:
            pygame.mixer.music.stop()
        pygame.mixer.quit()


def open_audio():
    """Mixer-backed audio from CONFIG, or SilentAudio if muted or loading fails."""
    if CONFIG["MUTE"]:
        return SilentAudio()
    try:
        pygame.mixer.init()
        return MixerAudio(CONFIG["SOUND_DIR"], CONFIG["MUSIC"])
    except (pygame.error, FileNotFoundError) as e:
        log.warning("audio disabled: %s", e)
        pygame.mixer.quit()
        return SilentAudio()
