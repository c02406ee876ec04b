import logging
from typing import Callable, Optional
from maze_carver.core.cell import Cell
from maze_carver.core.grid import Grid
from maze_carver.core.stack import BacktrackStack
from maze_carver.algo.base import Generator

logger = logging.getLogger(__name__)

class RecursiveBacktracker(Generator):
    """
    Iterative randomized DFS. One call to step() is one frame of animation:
    either carve into a random unvisited neighbor, backtrack one cell, or
    finish.
    """

    def __init__(self, grid: Grid, rng=None, stack_capacity: int = BacktrackStack.DEFAULT_CAPACITY):
        super().__init__(grid, rng)
        self.stack = BacktrackStack(stack_capacity)
        # Start at (0,0)
        self.current: Cell = grid.cells[0]

    def choose(self, candidates):
        # The RNG is consulted even for a single candidate
        return candidates[self.rng.uniform_int(len(candidates))]

    def step(self, highlight: Optional[Callable[[Cell], None]] = None) -> bool:
        if self.done:
            return False

        current = self.current
        current.visited = True
        if highlight:
            highlight(current)

        neighbors = self.grid.unvisited_neighbors(current)

        if neighbors:
            chosen = self.choose(neighbors)

            self.stack.push(current)
            self.grid.remove_walls(current, chosen)
            chosen.visited = True
            self.current = chosen
            self.status = f"Carving... Stack: {len(self.stack)}"
        elif len(self.stack) > 0:
            # Backtrack, walls stay as they are
            self.current = self.stack.pop()
            self.status = f"Backtracking... Stack: {len(self.stack)}"
        else:
            self.done = True
            self.status = "Done"
            logger.debug(f"Generation finished after {self.step_count + 1} steps")

        self.step_count += 1
        return not self.done
