"""Global constants and default settings."""

WINDOW_WIDTH = 600
WINDOW_HEIGHT = 800
FPS = 60
WINDOW_TITLE = "RhythmFall"

# Game timer
TICK_INTERVAL_MS = 30
SPAWN_INTERVAL_MS = 500
TOTAL_SPAWNS = 100
SPEED_FACTOR = 5  # fall per tick = TICK_INTERVAL_MS // SPEED_FACTOR pixels

# Symbols
SYMBOL_SIZE = 100
ONLY_VALID_KEYS = True

# Judging lines (pixels from the top of the playfield)
PERFECT_LINE_HEIGHT = WINDOW_HEIGHT - SYMBOL_SIZE - 50
JUDGE_MARGIN = 50  # presses ignore symbols this close to the bottom edge

# Feedback text
FEEDBACK_LIFETIME_MS = 1000

# Scoring
BASE_POINTS = 10
PERFECT_MULTIPLIER = 2

# Keys, as reported by pygame.key.name()
QUIT_KEY = "escape"
START_KEY = "space"

# Overlay panel
OVERLAY_HEIGHT = 70
OVERLAY_TOP = WINDOW_HEIGHT // 2 - 50
SCORE_TOP = 40
