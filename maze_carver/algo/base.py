from abc import ABC, abstractmethod
from typing import Callable, Iterator, Optional
from maze_carver.core.cell import Cell
from maze_carver.core.grid import Grid
from maze_carver.core.rng import CryptoRandom

class Generator(ABC):
    def __init__(self, grid: Grid, rng=None):
        self.grid = grid
        self.rng = rng if rng is not None else CryptoRandom()
        self.step_count = 0
        self.done = False
        self.status = "Idle"

    @abstractmethod
    def step(self, highlight: Optional[Callable[[Cell], None]] = None) -> bool:
        """
        Advances the state machine by one step, mutating self.grid in place.
        Returns False once generation is finished.
        """
        pass

    def run(self) -> Iterator[str]:
        """Yields a status string after every step, then "Done"."""
        while self.step():
            yield self.status
        yield "Done"

    def run_all(self):
        """Helper to run the generator to completion."""
        for _ in self.run():
            pass
