import logging
import math
import pygame
from maze_carver.core.errors import InitializationError
from maze_carver.viz.drawer import ImmediateDrawer

logger = logging.getLogger(__name__)

class PygameWindow:
    """
    Window backed by pygame.display. Rasterizes ImmediateDrawer shapes,
    flipping the drawer's bottom-left origin onto pygame's top-left one.
    """

    def __init__(self, title: str, width: int = 800, height: int = 800):
        self.title = title
        self.width = width
        self.height = height
        self._closed = False
        self._alpha_cache = {}

        try:
            pygame.init()
            pygame.display.set_caption(title)
            self.surface = pygame.display.set_mode((width, height))
        except pygame.error as e:
            pygame.quit()
            raise InitializationError(f"Could not open {width}x{height} window: {e}") from e
        logger.info(f"Opened window {width}x{height}")

    def closed(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._closed = True
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self._closed = True
        return self._closed

    def clear(self, color):
        self.surface.fill(color)

    def set_title(self, title: str):
        pygame.display.set_caption(title)

    def present(self):
        pygame.display.flip()

    def close(self):
        pygame.quit()
        logger.info("Window closed")

    def to_screen(self, x, y):
        return x, self.height - y

    def render(self, shapes):
        for shape in shapes:
            if shape.kind == 'line':
                self._draw_line(shape)
            elif shape.kind == 'rect':
                self._draw_rect(shape)

    def _draw_line(self, shape):
        half = shape.thickness / 2
        for (x1, y1), (x2, y2) in zip(shape.points, shape.points[1:]):
            length = math.hypot(x2 - x1, y2 - y1)
            if length == 0:
                continue
            ux, uy = (x2 - x1) / length, (y2 - y1) / length

            # Sharp caps extend the segment by half its thickness
            if shape.end_cap == ImmediateDrawer.SHARP:
                x1, y1 = x1 - ux * half, y1 - uy * half
                x2, y2 = x2 + ux * half, y2 + uy * half

            nx, ny = -uy * half, ux * half
            corners = [
                self.to_screen(x1 + nx, y1 + ny),
                self.to_screen(x2 + nx, y2 + ny),
                self.to_screen(x2 - nx, y2 - ny),
                self.to_screen(x1 - nx, y1 - ny),
            ]
            if shape.color[3] == 255:
                pygame.draw.polygon(self.surface, shape.color[:3], corners)
            else:
                overlay = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
                pygame.draw.polygon(overlay, shape.color, corners)
                self.surface.blit(overlay, (0, 0))

    def _draw_rect(self, shape):
        (x1, y1), (x2, y2) = shape.points
        left, top = self.to_screen(min(x1, x2), max(y1, y2))
        w, h = int(abs(x2 - x1)), int(abs(y2 - y1))
        rect = pygame.Rect(int(left), int(top), w, h)

        if shape.thickness > 0:
            pygame.draw.rect(self.surface, shape.color[:3], rect, int(shape.thickness))
        elif shape.color[3] == 255:
            self.surface.fill(shape.color[:3], rect)
        else:
            # Translucent fill: blend a cached SRCALPHA tile
            key = (w, h, shape.color)
            tile = self._alpha_cache.get(key)
            if tile is None:
                tile = pygame.Surface((w, h), pygame.SRCALPHA)
                tile.fill(shape.color)
                self._alpha_cache[key] = tile
            self.surface.blit(tile, rect.topleft)
