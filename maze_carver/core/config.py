import logging

# Grid geometry
CELL_SIZE = 20
COLS = 30
ROWS = 30

WIDTH = COLS * CELL_SIZE
HEIGHT = ROWS * CELL_SIZE
CHANNELS = 4 # RGBA8

# Colors (RGBA)
CELL_COLOR    = (0x99, 0x99, 0xFF, 0xFF) # Unvisited cell
VISITED_COLOR = (0xFF, 0x99, 0x99, 0xFF) # Visited cell or carved wall
WALL_COLOR    = (0xFF, 0xFF, 0xFF, 0xFF) # Intact wall

# Harness defaults
WINDOW_TITLE = f"Maze Carver - {COLS}x{ROWS}"
DEFAULT_FPS = 60
RECORDING_DIR = "recordings"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATEFMT = '%H:%M:%S'


def setup_logging(verbose: bool = False):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT
    )
