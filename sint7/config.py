"""Screen, world and game-wide constants."""

NUM_FRAGMENTS = 4
PHASE_COUNT = 4

SCREEN_WIDTH = 900
SCREEN_HEIGHT = 512

SECTOR_COUNT = 6
SECTOR_WIDTH = 900
SECTOR_HEIGHT = 512

WINDOW_TITLE = "SINT-7"
TARGET_FPS = 60

ASSETS_DIR = "assets"