import numpy as np
from maze_carver.core.config import CELL_SIZE, CHANNELS, CELL_COLOR, VISITED_COLOR, WALL_COLOR
from maze_carver.core.grid import MazeState, Wall, WallOrientation


def pixel_color(state: MazeState, x: int, y: int, cell_size: int = CELL_SIZE):
    """
    Color of a single pixel. Column 0 and row 0 are never grid lines,
    and vertical lines win where they cross horizontal ones.
    """
    col, row = x // cell_size, y // cell_size

    if x > 0 and x % cell_size == 0:
        wall = Wall(WallOrientation.VERTICAL, col - 1, row)
        return VISITED_COLOR if state.is_removed(wall) else WALL_COLOR
    if y > 0 and y % cell_size == 0:
        wall = Wall(WallOrientation.HORIZONTAL, col, row - 1)
        return VISITED_COLOR if state.is_removed(wall) else WALL_COLOR
    return VISITED_COLOR if state.is_visited(col, row) else CELL_COLOR


class Renderer:
    """
    Paints a MazeState into a caller-owned RGBA8 raster, one full frame per call.
    Holds no drawing state, so render() is safe to call at any point of the generation.
    """

    def __init__(self, state: MazeState, cell_size: int = CELL_SIZE):
        self.state = state
        self.cell_size = cell_size
        self.width = state.cols * cell_size
        self.height = state.rows * cell_size

        self.c_cell = np.array(CELL_COLOR, dtype=np.uint8)
        self.c_visited = np.array(VISITED_COLOR, dtype=np.uint8)
        self.c_wall = np.array(WALL_COLOR, dtype=np.uint8)

        # Per-axis geometry never changes, only the state maps do
        xs = np.arange(self.width)
        ys = np.arange(self.height)
        self.cols = xs // cell_size
        self.rows = ys // cell_size
        self.v_line = (xs > 0) & (xs % cell_size == 0)
        self.h_line = (ys > 0) & (ys % cell_size == 0)
        # Clamped to 0 off the grid lines, where the lookup is masked out anyway
        self.v_anchor = np.maximum(self.cols - 1, 0)
        self.h_anchor = np.maximum(self.rows - 1, 0)

    def new_frame(self) -> np.ndarray:
        return np.zeros((self.height, self.width, CHANNELS), dtype=np.uint8)

    def _as_frame(self, buffer) -> np.ndarray:
        expected = self.width * self.height * CHANNELS
        if isinstance(buffer, np.ndarray):
            if buffer.dtype != np.uint8 or buffer.size != expected:
                raise ValueError(f"Expected a uint8 buffer of {expected} bytes, "
                                 f"got {buffer.dtype} with {buffer.size} elements")
            if buffer.shape == (self.height, self.width, CHANNELS):
                return buffer
            if not buffer.flags.c_contiguous:
                raise ValueError("Flat buffers must be C-contiguous")
            return buffer.reshape((self.height, self.width, CHANNELS))

        frame = np.frombuffer(buffer, dtype=np.uint8)
        if frame.size != expected:
            raise ValueError(f"Expected a buffer of {expected} bytes, got {frame.size}")
        return frame.reshape((self.height, self.width, CHANNELS))

    def _state_maps(self):
        # Zero-copy views of the byte maps, (rows, cols) row-major
        shape = (self.state.rows, self.state.cols)
        visited = np.frombuffer(self.state.visited_cells, dtype=np.uint8).reshape(shape)
        vertical = np.frombuffer(self.state.vertical_removed, dtype=np.uint8).reshape(shape)
        horizontal = np.frombuffer(self.state.horizontal_removed, dtype=np.uint8).reshape(shape)
        return visited != 0, vertical != 0, horizontal != 0

    def render(self, buffer):
        """
        Overwrites every pixel of buffer.
        buffer: (height, width, 4) uint8 array, or any writable flat buffer of
        width * height * 4 bytes.
        """
        frame = self._as_frame(buffer)
        visited, vertical, horizontal = self._state_maps()

        rows = self.rows[:, None]
        cols = self.cols[None, :]

        # 1. Cell interiors
        frame[:] = self.c_cell
        frame[visited[rows, cols]] = self.c_visited

        # 2. Horizontal lines (pixels on a vertical line are painted by pass 3)
        on_h = self.h_line[:, None] & ~self.v_line[None, :]
        h_open = horizontal[self.h_anchor[:, None], cols]
        frame[on_h & h_open] = self.c_visited
        frame[on_h & ~h_open] = self.c_wall

        # 3. Vertical lines
        on_v = self.v_line[None, :]
        v_open = vertical[rows, self.v_anchor[None, :]]
        frame[on_v & v_open] = self.c_visited
        frame[on_v & ~v_open] = self.c_wall

        return frame
