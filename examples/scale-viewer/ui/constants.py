"""Layout constants and color definitions."""

# Timing
FPS = 60
TPS = 60

# Layout dimensions
SCREEN_W = 1100
SCREEN_H = 700
STATUS_H = 36

# Puzzle tiles
TILE_W = 250
TILE_H = 30
TILE_GAP = 8
PANEL_PAD = 20
PLACED_TOP = 80
PLACED_H = 190
UNPLACED_TOP = PLACED_TOP + PLACED_H + 30
UNPLACED_H = 190
DRAG_THRESHOLD = 5  # pixels before a press counts as a drag

# Colors
BG_COLOR = (0, 0, 5)
PANEL_BG = (12, 12, 20)
PANEL_BORDER = (80, 80, 90)
TILE_BG = (40, 40, 48)
TILE_PLACED = (0, 90, 30)
TILE_BORDER = (180, 180, 190)
TILE_HIGHLIGHT = (0, 170, 255)
STATUS_BG = (20, 20, 30)
TEXT_COLOR = (230, 230, 235)
TEXT_DIM = (120, 120, 140)
PROMPT_COLOR = (255, 204, 0)
SUCCESS_COLOR = (100, 255, 100)
FAIL_COLOR = (255, 90, 90)
