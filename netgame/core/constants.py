# netgame/core/constants.py

# --- Board Dimensions ---
BOARD_SIZE = 8
LAST_INDEX = BOARD_SIZE - 1

# --- Cell Values ---
EMPTY = 0
BLACK = 1
WHITE = 2

# Goal edges per color, as the axis (0 = x, 1 = y) whose index 0 and 7 they occupy.
# BLACK connects the top and bottom rows, WHITE the left and right columns.
# Each color is barred from the other color's goal edges.
GOAL_AXIS = {BLACK: 1, WHITE: 0}

# --- Move Phases ---
# The first ADD_MOVES moves of each side place new pieces; later moves relocate one.
ADD_MOVES = 10

# --- Networks ---
MIN_NETWORK_LENGTH = 6

# --- Scoring System ---
# WHITE maximizes, BLACK minimizes.
# A won position scores MAX_SCORE + remaining depth (or MIN_SCORE - depth),
# so a faster win is worth slightly more than a slower one.
MAX_SCORE = 1000
MIN_SCORE = -1000

DEFAULT_SEARCH_DEPTH = 3

# --- Text Rendering ---
SYMBOLS = {EMPTY: "0", BLACK: "B", WHITE: "W"}


def opposite(color: int) -> int:
    return WHITE if color == BLACK else BLACK
