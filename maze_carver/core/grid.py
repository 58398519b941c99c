from array import array
from enum import Enum
from typing import Iterator, NamedTuple, Tuple

from maze_carver.core.config import COLS, ROWS

Cell = Tuple[int, int]


class WallOrientation(Enum):
    VERTICAL = 0   # Between horizontally adjacent cells
    HORIZONTAL = 1 # Between vertically adjacent cells


class Wall(NamedTuple):
    """
    One potential partition between two axis-adjacent cells.
    (x, y) is the coordinate-wise minimum of the two cells, so both
    cells name the same wall.
    """
    orientation: WallOrientation
    x: int
    y: int

    @classmethod
    def between(cls, a: Cell, b: Cell) -> "Wall":
        (ax, ay), (bx, by) = a, b
        dx, dy = abs(ax - bx), abs(ay - by)
        if dx == 1 and dy == 0:
            orientation = WallOrientation.VERTICAL
        elif dx == 0 and dy == 1:
            orientation = WallOrientation.HORIZONTAL
        else:
            raise ValueError(f"Cells {a} and {b} are not adjacent")
        return cls(orientation, min(ax, bx), min(ay, by))

    def cells(self) -> Tuple[Cell, Cell]:
        if self.orientation is WallOrientation.VERTICAL:
            return (self.x, self.y), (self.x + 1, self.y)
        return (self.x, self.y), (self.x, self.y + 1)


class MazeState:
    """
    Visited cells, the DFS frontier stack and the carved walls.

    Visited cells and removed walls are dense byte maps indexed y * cols + x
    (one map per wall orientation). Everything only ever grows, except the
    frontier.
    """

    __slots__ = ('cols', 'rows', 'visited_cells', 'vertical_removed',
                 'horizontal_removed', 'stack', '_visited_count', '_removed_count')

    def __init__(self, cols: int = COLS, rows: int = ROWS):
        if cols < 1 or rows < 1:
            raise ValueError(f"Grid must be at least 1x1, got {cols}x{rows}")
        self.cols = cols
        self.rows = rows
        # 'B' (unsigned char) -> 1 byte per cell
        self.visited_cells = array('B', bytes(cols * rows))
        self.vertical_removed = array('B', bytes(cols * rows))
        self.horizontal_removed = array('B', bytes(cols * rows))
        self.stack = []
        self._visited_count = 0
        self._removed_count = 0

        # Seed cell
        self.mark_visited(0, 0)
        self.push(0, 0)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.cols and 0 <= y < self.rows

    def get_index(self, x: int, y: int) -> int:
        if self.in_bounds(x, y):
            return y * self.cols + x
        raise IndexError(f"Coordinate ({x}, {y}) out of bounds")

    # Visited

    def mark_visited(self, x: int, y: int):
        idx = self.get_index(x, y)
        if not self.visited_cells[idx]:
            self.visited_cells[idx] = 1
            self._visited_count += 1

    def is_visited(self, x: int, y: int) -> bool:
        return self.visited_cells[self.get_index(x, y)] != 0

    @property
    def visited_count(self) -> int:
        return self._visited_count

    def iter_visited(self) -> Iterator[Cell]:
        for idx, flag in enumerate(self.visited_cells):
            if flag:
                yield (idx % self.cols, idx // self.cols)

    @property
    def visited(self) -> frozenset:
        return frozenset(self.iter_visited())

    # Frontier

    def push(self, x: int, y: int):
        self.stack.append((x, y))

    def pop(self) -> Cell:
        return self.stack.pop()

    @property
    def frontier(self) -> Tuple[Cell, ...]:
        return tuple(self.stack)

    @property
    def active_cell(self):
        return self.stack[-1] if self.stack else None

    @property
    def is_complete(self) -> bool:
        return not self.stack

    # Walls

    def _wall_map(self, orientation: WallOrientation) -> array:
        if orientation is WallOrientation.VERTICAL:
            return self.vertical_removed
        return self.horizontal_removed

    def remove_wall(self, wall: Wall):
        a, b = wall.cells()
        if not (self.in_bounds(*a) and self.in_bounds(*b)):
            raise IndexError(f"{wall} is not inside a {self.cols}x{self.rows} grid")
        walls = self._wall_map(wall.orientation)
        idx = wall.y * self.cols + wall.x
        if not walls[idx]:
            walls[idx] = 1
            self._removed_count += 1

    def is_removed(self, wall: Wall) -> bool:
        if not self.in_bounds(wall.x, wall.y):
            return False
        return self._wall_map(wall.orientation)[wall.y * self.cols + wall.x] != 0

    @property
    def removed_count(self) -> int:
        return self._removed_count

    def iter_removed(self) -> Iterator[Wall]:
        for orientation in WallOrientation:
            for idx, flag in enumerate(self._wall_map(orientation)):
                if flag:
                    yield Wall(orientation, idx % self.cols, idx // self.cols)

    @property
    def removed_walls(self) -> frozenset:
        return frozenset(self.iter_removed())

    def __repr__(self):
        return (f"MazeState({self.cols}x{self.rows}, visited={self._visited_count}, "
                f"removed={self._removed_count}, frontier={len(self.stack)})")
