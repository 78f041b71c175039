
CONFIG = {
    "CELL_SIZE": 30,
    "DROP_INTERVAL": 0.2,
    "FPS": 60,
    "BAG_SEED": None,
    "SOUND_DIR": "assets/sounds",
    "MUSIC": True,
    "MUTE": False,
    "FONT_PATH": "assets/font/monogram.ttf",
    "FONT_SIZE": 38,
    "LOG_LEVEL": "INFO",
}
