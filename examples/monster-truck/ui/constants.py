"""Layout constants and color definitions."""

# Timing
FPS = 60

# Layout dimensions
SCENE_W = 800
SCENE_H = 500
HUD_H = 130
SCREEN_W = SCENE_W
SCREEN_H = HUD_H + SCENE_H

# Ramp (scene coordinates)
RAMP_X = 300
RAMP_Y = 350
RAMP_W = 100

# Power meter
METER_W = 400
METER_H = 28

# Colors
SKY_TOP = (135, 206, 235)
SKY_BOTTOM = (224, 246, 255)
GRASS = (34, 139, 34)
DIRT = (139, 69, 19)
RAMP_FILL = (102, 102, 102)
RAMP_EDGE = (51, 51, 51)
RAMP_STRIPE = (255, 215, 0)
TARGET_RED = (255, 0, 0)
TARGET_WHITE = (255, 255, 255)
TARGET_DOT = (204, 0, 0)
TRUCK_BODY = (255, 0, 0)
TRUCK_CAB = (255, 68, 68)
TRUCK_EDGE = (139, 0, 0)
WINDOW = (135, 206, 235)
TIRE = (51, 51, 51)
HUB = (102, 102, 102)
FLAME = (255, 165, 0)
TITLE_COLOR = (255, 107, 107)
TEXT_COLOR = (51, 51, 51)
PANEL_BG = (255, 255, 255)
METER_BG = (221, 221, 221)
METER_LOW = (76, 175, 80)
METER_MID = (255, 193, 7)
METER_HIGH = (255, 87, 34)

STATUS_MESSAGES = {
    "ready": "Hold SPACEBAR to build power, then RELEASE to jump!",
    "charging": "Hold SPACEBAR to build power, then RELEASE to jump!",
    "jumping": "GO GO GO!",
    "success": "AMAZING! Moving to next level...",
    "try_again": "Try again! Hold longer or shorter!",
}

LEARN_LINES = [
    "Learn:",
    "- More power = faster speed",
    "- Faster speed = longer jump",
    "- Find the right power!",
]
