from collections import namedtuple
from typing import List, Tuple

Shape = namedtuple('Shape', ['kind', 'color', 'points', 'thickness', 'end_cap'])

class ImmediateDrawer:
    """
    Immediate-mode shape buffer. Vertices are pushed, then consumed by
    line() or rectangle() using the current color and end cap style.
    Nothing is rasterized here; flush_to() hands the buffered shapes to a
    window, which keeps this class usable without a display.

    Coordinates have their origin at the bottom-left of the surface.
    """
    SHARP = "sharp"
    NO_END = "none"

    def __init__(self):
        self.color = (255, 255, 255, 255)
        self.end_cap = self.NO_END
        self.shapes: List[Shape] = []
        self._pending: List[Tuple[float, float]] = []

    def clear(self):
        self.shapes.clear()
        self._pending.clear()

    def set_color(self, rgba):
        if len(rgba) == 3:
            rgba = (*rgba, 255)
        self.color = tuple(rgba)

    def set_end_cap_style(self, style: str):
        if style not in (self.SHARP, self.NO_END):
            raise ValueError(f"Unknown end cap style: {style}")
        self.end_cap = style

    def push(self, *points):
        self._pending.extend((float(x), float(y)) for x, y in points)

    def line(self, thickness: float):
        """Polyline through all pushed vertices."""
        points = self._take()
        if len(points) >= 2:
            self.shapes.append(Shape('line', self.color, points, thickness, self.end_cap))

    def rectangle(self, thickness: float = 0):
        """
        Axis-aligned rectangle between each two subsequent pushed vertices.
        thickness 0 means filled.
        """
        points = self._take()
        for a, b in zip(points, points[1:]):
            self.shapes.append(Shape('rect', self.color, (a, b), thickness, self.end_cap))

    def flush_to(self, window):
        window.render(self.shapes)

    def _take(self):
        points = tuple(self._pending)
        self._pending.clear()
        return points
