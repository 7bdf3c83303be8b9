"""Game constants: window geometry, asset locations and gameplay tuning."""

from __future__ import annotations

WINDOW_SIZE = (1920, 1080)
WINDOW_WIDTH, WINDOW_HEIGHT = WINDOW_SIZE
WINDOW_TITLE = "My Hunter"
COLOR_DEPTH = 32
FRAMERATE_LIMIT = 20

IMAGE_DIR = "img"
SOUND_DIR = "sound"


def _image(name: str) -> str:
    return f"{IMAGE_DIR}/{name}.png"


BG_IMAGE_PATH = _image("background")
CROSSHAIR_IMAGE_PATH = _image("crosshair")
DUCK_IMAGE_PATH = _image("duck")
EXPLOSION_IMAGE_PATH = _image("explosion")

DEATH_SOUND_COUNT = 5
SOUND_PATHS = tuple(
    f"{SOUND_DIR}/duckdeath{number}.ogg"
    for number in range(1, DEATH_SOUND_COUNT + 1)
)

# Side length of one square frame of the duck sprite sheet.
FRAME_SIZE = 110
# The sprite sheet holds three frames side by side.
FRAME_COUNT = 3
SHEET_WIDTH = FRAME_SIZE * FRAME_COUNT
ANIMATION_INTERVAL = 0.1

DUCK_VELOCITY = (150.0, 30.0)
RESPAWN_DELAY = 2.0
EXPLOSION_DURATION = 0.5

CROSSHAIR_SCALE = 0.1
EXPLOSION_SCALE = 0.15

SUCCESS_STATUS = 0
ERROR_STATUS = 84