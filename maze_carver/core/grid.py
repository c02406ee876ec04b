from typing import Iterator, List, Optional, Tuple
from maze_carver.core.cell import Cell, TOP, RIGHT, BOTTOM, LEFT
from maze_carver.core.errors import OutOfBounds

class Grid:
    # Sentinel returned by index() for coordinates outside the grid
    OUT_OF_BOUNDS = -1

    # Neighbor lookup order matters: candidates are filtered in this order
    # before the random pick.
    DIRECTIONS = (TOP, RIGHT, BOTTOM, LEFT)

    # Direction Helpers (row grows downward in cell space)
    DX = {TOP: 0, RIGHT: 1, BOTTOM: 0, LEFT: -1}
    DY = {TOP: -1, RIGHT: 0, BOTTOM: 1, LEFT: 0}
    OPPOSITE = {TOP: BOTTOM, BOTTOM: TOP, RIGHT: LEFT, LEFT: RIGHT}

    __slots__ = ('cols', 'rows', 'cells')

    def __init__(self, cols: int, rows: int):
        if cols <= 0 or rows <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {cols}x{rows}")
        self.cols = cols
        self.rows = rows
        # Row-major: cell (i, j) lives at i + j * cols
        self.cells: List[Cell] = [Cell(i, j) for j in range(rows) for i in range(cols)]

    def __len__(self):
        return len(self.cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def index(self, i: int, j: int) -> int:
        if 0 <= i < self.cols and 0 <= j < self.rows:
            return i + j * self.cols
        return self.OUT_OF_BOUNDS

    def cell_at(self, i: int, j: int) -> Optional[Cell]:
        idx = self.index(i, j)
        if idx == self.OUT_OF_BOUNDS:
            return None
        return self.cells[idx]

    def get_cell(self, i: int, j: int) -> Cell:
        cell = self.cell_at(i, j)
        if cell is None:
            raise OutOfBounds(i, j)
        return cell

    def get_neighbors(self, cell: Cell) -> Iterator[Tuple[Cell, int]]:
        """
        Yields (neighbor, direction_to_neighbor) for in-bounds neighbors,
        in top, right, bottom, left order. Does NOT check walls.
        """
        for direction in self.DIRECTIONS:
            neighbor = self.cell_at(cell.col + self.DX[direction], cell.row + self.DY[direction])
            if neighbor is not None:
                yield neighbor, direction

    def unvisited_neighbors(self, cell: Cell) -> List[Cell]:
        return [n for n, _ in self.get_neighbors(cell) if not n.visited]

    def get_open_neighbors(self, cell: Cell) -> Iterator[Cell]:
        """Yields neighbors that are NOT blocked by a wall."""
        for neighbor, direction in self.get_neighbors(cell):
            if not cell.walls[direction]:
                yield neighbor

    @staticmethod
    def remove_walls(a: Cell, b: Cell):
        """
        Clears the shared wall between two grid-adjacent cells on both sides.
        """
        dx = a.col - b.col
        dy = a.row - b.row

        if abs(dx) + abs(dy) != 1:
            raise ValueError(f"{a!r} and {b!r} are not adjacent")

        if dx == 1:
            a.walls[LEFT] = False
            b.walls[RIGHT] = False
        elif dx == -1:
            a.walls[RIGHT] = False
            b.walls[LEFT] = False
        elif dy == 1:
            a.walls[TOP] = False
            b.walls[BOTTOM] = False
        elif dy == -1:
            a.walls[BOTTOM] = False
            b.walls[TOP] = False
