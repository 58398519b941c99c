import logging
import random
from typing import List, Tuple
from maze_carver.core.grid import MazeState, Wall, WallOrientation
from maze_carver.algo.base import Generator

logger = logging.getLogger(__name__)

# Neighbor offsets in enumeration order: Left, Right, Up, Down
NEIGHBOR_OFFSETS = (
    (-1, 0, WallOrientation.VERTICAL),
    (1, 0, WallOrientation.VERTICAL),
    (0, -1, WallOrientation.HORIZONTAL),
    (0, 1, WallOrientation.HORIZONTAL),
)

class RecursiveBacktracker(Generator):
    """
    Randomized depth-first search, one transition per step().

    rng only needs randrange(n); pass a scripted object to force choices.
    Without rng or seed the choices come from OS entropy.
    """

    def __init__(self, state: MazeState, rng=None, seed: int = None):
        super().__init__(state)
        self.seed = seed
        self.rng = rng if rng is not None else random.Random(seed)
        self.carve_count = 0
        self.backtrack_count = 0

    def unvisited_neighbors(self, x: int, y: int) -> List[Tuple[int, int, WallOrientation]]:
        neighbors = []
        for dx, dy, orientation in NEIGHBOR_OFFSETS:
            nx, ny = x + dx, y + dy
            if self.state.in_bounds(nx, ny) and not self.state.is_visited(nx, ny):
                neighbors.append((nx, ny, orientation))
        return neighbors

    def step(self) -> bool:
        stack = self.state.stack
        if not stack:
            return False

        cx, cy = stack[-1]
        neighbors = self.unvisited_neighbors(cx, cy)
        self.step_count += 1

        if not neighbors:
            # Backtrack. The active cell moves but nothing visible changes.
            self.state.pop()
            self.backtrack_count += 1
            if not stack:
                logger.info(f"Maze complete: {self.carve_count} walls carved, "
                            f"{self.backtrack_count} backtracks, {self.step_count} steps")
            return False

        nx, ny, orientation = neighbors[self.rng.randrange(len(neighbors))]

        self.state.mark_visited(nx, ny)
        self.state.push(nx, ny)
        self.state.remove_wall(Wall(orientation, min(cx, nx), min(cy, ny)))
        self.carve_count += 1
        logger.debug(f"Carved ({cx}, {cy}) -> ({nx}, {ny})")
        return True
