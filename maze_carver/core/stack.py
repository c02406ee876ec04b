from typing import List
from maze_carver.core.cell import Cell

class BacktrackStack:
    """
    LIFO of non-owning Cell references. Capacity is only a sizing hint;
    the backing list grows on demand.
    """
    DEFAULT_CAPACITY = 50

    __slots__ = ('capacity', '_items')

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        self.capacity = capacity
        self._items: List[Cell] = []

    def push(self, cell: Cell):
        self._items.append(cell)
        if len(self._items) > self.capacity:
            self.capacity *= 2

    def pop(self) -> Cell:
        if not self._items:
            raise IndexError("pop from empty backtrack stack")
        return self._items.pop()

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        # Bottom to top
        return iter(self._items)
