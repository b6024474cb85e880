GRID_ROWS = 4
GRID_COLS = 5
# Placement order runs row by row; only the index order matters to the rules.
GRID_SIZE = GRID_ROWS * GRID_COLS

# Inclusive range the next number is drawn from.
MIN_NUMBER = 1
MAX_NUMBER = 1000

# Sessions auto-played by the command line entry point when --games is omitted.
DEFAULT_AUTOPLAY_GAMES = 10
