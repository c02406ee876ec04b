import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_carver.core.cell import Cell, TOP, LEFT, WHITE, VISITED_COLOR, HIGHLIGHT_COLOR
from maze_carver.viz.drawer import ImmediateDrawer

class TestCellDrawing(unittest.TestCase):
    def test_fresh_cell_draws_four_walls(self):
        drawer = ImmediateDrawer()
        Cell(1, 2).draw(drawer, 40)

        self.assertEqual(len(drawer.shapes), 4)
        for shape in drawer.shapes:
            self.assertEqual(shape.kind, 'line')
            self.assertEqual(shape.color, WHITE)
            self.assertEqual(shape.thickness, 3)
            self.assertEqual(shape.end_cap, ImmediateDrawer.SHARP)

        top, right, bottom, left = (s.points for s in drawer.shapes)
        self.assertEqual(top, ((40.0, 80.0), (80.0, 80.0)))
        self.assertEqual(right, ((80.0, 80.0), (80.0, 120.0)))
        self.assertEqual(bottom, ((80.0, 120.0), (40.0, 120.0)))
        self.assertEqual(left, ((40.0, 120.0), (40.0, 80.0)))

    def test_removed_walls_are_skipped(self):
        drawer = ImmediateDrawer()
        cell = Cell(0, 0)
        cell.walls[TOP] = False
        cell.walls[LEFT] = False
        cell.draw(drawer, 10)
        self.assertEqual(len(drawer.shapes), 2)

    def test_visited_overlay(self):
        drawer = ImmediateDrawer()
        cell = Cell(2, 0)
        cell.walls = [False] * 4
        cell.visited = True
        cell.draw(drawer, 40)

        self.assertEqual(len(drawer.shapes), 1)
        shape = drawer.shapes[0]
        self.assertEqual(shape.kind, 'rect')
        self.assertEqual(shape.thickness, 0)
        self.assertEqual(shape.color, VISITED_COLOR)
        self.assertEqual(shape.points, ((80.0, 0.0), (120.0, 40.0)))

    def test_highlight(self):
        drawer = ImmediateDrawer()
        Cell(0, 1).highlight(drawer, 40)
        shape, = drawer.shapes
        self.assertEqual(shape.color, HIGHLIGHT_COLOR)
        self.assertEqual(shape.points, ((0.0, 40.0), (40.0, 80.0)))


class TestImmediateDrawer(unittest.TestCase):
    def test_rectangle_between_subsequent_points(self):
        drawer = ImmediateDrawer()
        drawer.push((0, 0), (1, 1), (2, 3))
        drawer.rectangle(2)
        self.assertEqual([s.points for s in drawer.shapes], [((0.0, 0.0), (1.0, 1.0)), ((1.0, 1.0), (2.0, 3.0))])
        self.assertTrue(all(s.thickness == 2 for s in drawer.shapes))

    def test_line_needs_two_points(self):
        drawer = ImmediateDrawer()
        drawer.push((0, 0))
        drawer.line(3)
        self.assertEqual(drawer.shapes, [])
        # Pending vertices were consumed
        drawer.push((1, 1), (2, 2))
        drawer.line(3)
        self.assertEqual(drawer.shapes[0].points, ((1.0, 1.0), (2.0, 2.0)))

    def test_set_color_rgb(self):
        drawer = ImmediateDrawer()
        drawer.set_color((1, 2, 3))
        self.assertEqual(drawer.color, (1, 2, 3, 255))

    def test_bad_end_cap(self):
        with self.assertRaises(ValueError):
            ImmediateDrawer().set_end_cap_style("round")

    def test_clear_and_flush(self):
        class Sink:
            def __init__(self):
                self.got = None
            def render(self, shapes):
                self.got = list(shapes)

        drawer = ImmediateDrawer()
        drawer.push((0, 0), (5, 5))
        drawer.rectangle(0)
        sink = Sink()
        drawer.flush_to(sink)
        self.assertEqual(len(sink.got), 1)

        drawer.clear()
        drawer.flush_to(sink)
        self.assertEqual(sink.got, [])

if __name__ == '__main__':
    unittest.main()
