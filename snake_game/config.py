"""Game-wide constants. CLI flags in ``__main__`` override a few of these at startup."""

# ---------------------------- Grid ------------------------------------

CELL_SIZE = 25           # pixel size of one cell
START_LENGTH = 3         # starting snake length

# ---------------------------- Timing ----------------------------------

BASE_SPEED = 100         # base tick interval in ms
LEVEL_STEP_MS = 5        # interval shaved off per level
MIN_TICK_MS = 30         # never schedule ticks faster than this
DEBOUNCE_MS = 100        # direction keys closer than this are dropped
FPS = 60

DIFFICULTY_EASY = 1
DIFFICULTY_MEDIUM = 2
DIFFICULTY_HARD = 3
DIFFICULTY_MODIFIERS = {
    DIFFICULTY_EASY: 20,     # slower
    DIFFICULTY_MEDIUM: 0,
    DIFFICULTY_HARD: -20,    # faster
}
DIFFICULTY_NAMES = {
    DIFFICULTY_EASY: "Easy",
    DIFFICULTY_MEDIUM: "Medium",
    DIFFICULTY_HARD: "Hard",
}

# ---------------------------- Scoring ---------------------------------

LEVEL_POINTS = 50        # a new level every N points
FOOD_VALUE = 10
SPECIAL_FOOD_VALUE = 30
SPECIAL_FOOD_ODDS = 10   # 1-in-N chance of special food
FOOD_MAX_ATTEMPTS = 100

# ---------------------------- Window ----------------------------------

WINDOW_W = 830
WINDOW_H = 650
MENU_BAR_H = 28

# ---------------------------- Colors ----------------------------------

# Colors (R, G, B)
BG_COLOR    = (15, 15, 40)
GRID_COLOR  = (30, 30, 50)
MENU_BAR_BG = (30, 30, 60)
MENU_HOVER  = (60, 60, 100)
WHITE       = (240, 240, 240)
GRAY        = (130, 136, 148)
BLACK       = (12, 12, 12)
SNAKE_GREEN = (0, 128, 0)
LIME_GREEN  = (50, 205, 50)
FOOD_RED    = (220, 20, 60)
FOOD_GOLD   = (255, 215, 0)
TITLE_GREEN = (50, 205, 50)
GAME_OVER_RED = (233, 69, 96)

# Snake colors selectable from the settings panel
SNAKE_PALETTE = [
    ("Green", SNAKE_GREEN),
    ("Blue", (30, 110, 220)),
    ("Purple", (128, 0, 160)),
    ("Orange", (230, 120, 0)),
    ("Teal", (0, 150, 150)),
    ("Pink", (200, 60, 140)),
]
