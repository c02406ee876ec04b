from typing import List

# Wall order: top, right, bottom, left
TOP = 0
RIGHT = 1
BOTTOM = 2
LEFT = 3

WHITE = (255, 255, 255, 255)
VISITED_COLOR = (128, 0, 255, 89)     # Purple, ~35% alpha
HIGHLIGHT_COLOR = (77, 0, 0, 115)     # Dark red, ~45% alpha

WALL_THICKNESS = 3


class Cell:
    __slots__ = ('walls', 'col', 'row', 'visited')

    def __init__(self, col: int, row: int):
        self.col = col
        self.row = row
        self.walls: List[bool] = [True, True, True, True]
        self.visited = False

    def __repr__(self):
        return f"Cell({self.col}, {self.row})"

    def bounds(self, wall_size: int):
        x = self.col * wall_size
        y = self.row * wall_size
        return x, y, x + wall_size, y + wall_size

    def draw(self, drawer, wall_size: int):
        """
        Pushes the present walls and, for visited cells, the overlay fill.
        Coordinates are in drawer space (origin bottom-left, y = row * size).
        """
        x0, y0, x1, y1 = self.bounds(wall_size)

        drawer.set_end_cap_style(drawer.SHARP)
        drawer.set_color(WHITE)
        if self.walls[TOP]:
            drawer.push((x0, y0), (x1, y0))
            drawer.line(WALL_THICKNESS)
        if self.walls[RIGHT]:
            drawer.push((x1, y0), (x1, y1))
            drawer.line(WALL_THICKNESS)
        if self.walls[BOTTOM]:
            drawer.push((x1, y1), (x0, y1))
            drawer.line(WALL_THICKNESS)
        if self.walls[LEFT]:
            drawer.push((x0, y1), (x0, y0))
            drawer.line(WALL_THICKNESS)

        if self.visited:
            drawer.set_color(VISITED_COLOR)
            drawer.push((x0, y0), (x1, y1))
            drawer.rectangle(0)

    def highlight(self, drawer, wall_size: int):
        x0, y0, x1, y1 = self.bounds(wall_size)
        drawer.set_color(HIGHLIGHT_COLOR)
        drawer.push((x0, y0), (x1, y1))
        drawer.rectangle(0)
