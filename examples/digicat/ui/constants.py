"""Layout constants and color definitions."""

# Timing
FPS = 60

# Layout dimensions
SCREEN_W = 520
SCREEN_H = 500
PAD = 16
TITLE_H = 28
LINE_H = 20
BAR_LABEL_W = 110

# Colors (green-phosphor terminal)
BG_COLOR = (12, 16, 12)
TITLE_BG = (40, 70, 40)
TEXT_COLOR = (120, 230, 120)
TEXT_DIM = (60, 120, 60)
MESSAGE_COLOR = (220, 230, 140)
GAME_OVER_COLOR = (240, 90, 80)
