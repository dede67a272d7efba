"""
Colors, font sizes and file paths for the pygame client. Gameplay numbers
live on goldsky.config.GameConfig.
"""

import os

TEXT_COLOR = (40, 40, 60)
LIGHT_TEXT_COLOR = (245, 245, 245)
OVERLAY_COLOR = (0, 0, 0, 150)
HUD_PADDING = 12
FONT_NAME = None                   # pygame default font

# Font Size Constants
FONT_SIZE_SMALL = 18
FONT_SIZE_MEDIUM = 24
FONT_SIZE_LARGE = 48

# Sky and scenery
SKY_TOP = (135, 206, 235)
SKY_MID = (224, 246, 255)
SKY_BOTTOM = (240, 248, 255)
CLOUD_COLOR = (255, 255, 255, 204)
CLOUDS = [
    (100, 80, 40),
    (300, 120, 30),
    (600, 60, 35),
    (750, 140, 25),
]

# Gold and basket
GOLD_LIGHT = (255, 236, 140)
GOLD_MID = (255, 204, 51)
GOLD_DARK = (184, 134, 11)
PARTICLE_COLOR = (255, 215, 0)
BASKET_BODY = (139, 69, 19)
BASKET_WEAVE = (160, 82, 45)
BASKET_RIM = (101, 67, 33)
FLASH_COLOR = (255, 215, 0)
DEBUG_COLOR = (255, 0, 0)

# Touch pad
TOUCH_BUTTON_SIZE = 48
TOUCH_BUTTON_COLOR = (255, 255, 255, 90)

# Loading sequence shown before the menu
LOADING_STEPS = ["Audio", "Graphics", "Game Data", "UI"]
LOADING_STEP_MS = 300

# Share text
SHARE_TEMPLATE = "I just scored {score} points in Gold Sky! Can you beat my score?"

ROOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# Log file settings
LOG_FILE = os.path.join(ROOT_DIR, "log.md")
HIGH_SCORE_FILE = os.environ.get("GOLDSKY_HIGH_SCORE_FILE", os.path.join(ROOT_DIR, "highscore.json"))
ASSETS_DIR = os.path.join(ROOT_DIR, "assets")
PICKUP_SFX_PATH = os.path.join(ASSETS_DIR, "pickup.wav")    # optional
MISS_SFX_PATH = os.path.join(ASSETS_DIR, "miss.wav")        # optional
START_SFX_PATH = os.path.join(ASSETS_DIR, "start.wav")      # optional
SOUND_PATHS = {
    "pickup": PICKUP_SFX_PATH,
    "miss": MISS_SFX_PATH,
    "start": START_SFX_PATH,
}
