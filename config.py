import builtins as _builtins
import pygame

# --- Constants ---
WIDTH, HEIGHT = 1280, 900   # initial window size; the window is resizable
FPS = 60
TITLE = "breakout"

# Paddle
PLAYER_SIZE = (150, 40)
PLAYER_INCREASED_WIDTH = PLAYER_SIZE[0] + 50
PLAYER_INITIAL_SPEED = 700     # pixels per second
PLAYER_SPEED_POWERUP = 1000
PLAYER_BOTTOM_OFFSET = 100     # distance from paddle top to screen bottom

# Ball
BALL_SIZE = 50
BALL_SPEED = 400               # pixels per second, direction comes from ball.vel
BALL_START = (0.5, 0.7)        # fraction of screen size for the first ball of a round
BALL_RESPAWN_OFFSET = (0, -50) # relative to paddle position after a life is lost

# Blocks
BLOCK_SIZE = (100, 40)
BLOCK_LIVES = 2
BLOCK_GRID = (6, 6)            # columns, rows
BLOCK_PADDING = 5
BOARD_TOP = 50
SPECIAL_BLOCK_PICKS = 3        # random picks per special block type

# Power-ups
POWERUP_DURATION = 10.0        # seconds

# Rounds
STARTING_LIVES = 3

# The horizontal push-out reuses the overlap height (as the first release of
# the game did).  Set to False to push by the overlap width instead.
LEGACY_HORIZONTAL_PUSH = True

# Colors (same palette as the first release)
WHITE     = (255, 255, 255)
BLACK     = (0, 0, 0)
RED       = (230, 41, 55)
ORANGE    = (255, 161, 0)
DARKGREEN = (0, 117, 44)
GREEN     = (0, 228, 48)
DARKBLUE  = (0, 82, 172)
BLUE      = (0, 121, 241)
PURPLE    = (200, 122, 255)
PINK      = (255, 109, 194)
DARKGRAY  = (80, 80, 80)

BG = WHITE
PADDLE_COLOR = BLUE
BALL_COLOR = DARKGRAY
TEXT_COLOR = BLACK

# Block type -> (full, damaged) colour pair
BLOCK_COLORS = {
    'regular':        (RED, ORANGE),
    'spawn_ball':     (DARKGREEN, GREEN),
    'size_increase':  (DARKBLUE, BLUE),
    'speed_increase': (PURPLE, PINK),
}

# Fonts
FONT_NAME = "Roboto-Medium.ttf"
TITLE_FONT_SIZE = 50
HUD_FONT_SIZE = 30
HUD_TOP = 40
HUD_LIVES_X = 30

# --- Control Settings ---
DEFAULT_CONTROLS = {
    'paddle_left': pygame.K_LEFT,
    'paddle_right': pygame.K_RIGHT,
    'start': pygame.K_SPACE,
}

def get_key_name(key_code):
    """Get a readable name for a pygame key code."""
    return pygame.key.name(key_code).upper()

def get_control_key(action):
    """Get the current key mapping for a control action."""
    return DEFAULT_CONTROLS.get(action)

def is_control_pressed(action, keys):
    """Check if the key for a specific action is currently held."""
    key = get_control_key(action)
    return bool(keys[key]) if key else False

DEBUG = False  # Set to True to see [DEBUG] console logs

_original_print = _builtins.print

def _debug_filter_print(*args, **kwargs):
    """Custom print that omits messages starting with '[DEBUG]' when DEBUG is False."""
    if not DEBUG:
        if args and isinstance(args[0], str) and args[0].startswith("[DEBUG]"):
            return
    _original_print(*args, **kwargs)

_builtins.print = _debug_filter_print
