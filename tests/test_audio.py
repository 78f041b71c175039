from tetris_audio import Cue, SilentAudio, open_audio
from tetris_config import CONFIG


def test_muted_config_gives_silent_sink(monkeypatch):
    monkeypatch.setitem(CONFIG, "MUTE", True)
    audio = open_audio()
    assert isinstance(audio, SilentAudio)
    audio.play(Cue.ROTATE)
    audio.close()


def test_missing_sound_files_fall_back_to_silent(monkeypatch, tmp_path):
    monkeypatch.setitem(CONFIG, "MUTE", False)
    monkeypatch.setitem(CONFIG, "SOUND_DIR", str(tmp_path))
    assert isinstance(open_audio(), SilentAudio)


def test_failed_load_shuts_mixer_down(monkeypatch):
    import pygame
    import tetris_audio

    calls = []

    def broken(sound_dir, music):
        raise FileNotFoundError("music.mp3")

    monkeypatch.setitem(CONFIG, "MUTE", False)
    monkeypatch.setattr(pygame.mixer, "init", lambda: calls.append("init"))
    monkeypatch.setattr(pygame.mixer, "quit", lambda: calls.append("quit"))
    monkeypatch.setattr(tetris_audio, "MixerAudio", broken)
    assert isinstance(open_audio(), SilentAudio)
    assert calls == ["init", "quit"]
