from abc import ABC, abstractmethod
from typing import Iterator
from maze_carver.core.grid import MazeState

class Generator(ABC):
    def __init__(self, state: MazeState):
        self.state = state
        self.step_count = 0

    @abstractmethod
    def step(self) -> bool:
        """
        Advances the generation by one transition, in place on self.state.
        Returns True when the change is visible and a redraw is warranted.
        """
        pass

    @property
    def finished(self) -> bool:
        return self.state.is_complete

    def run(self) -> Iterator[str]:
        """Yields status strings until the generation is finished."""
        while not self.finished:
            self.step()
            if self.step_count % 100 == 0:
                yield f"Steps: {self.step_count}, Frontier: {len(self.state.stack)}"
        yield "Done"

    def run_all(self):
        """Helper to run the generator to completion."""
        for _ in self.run():
            pass
