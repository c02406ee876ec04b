import logging
from maze_carver.core.grid import Grid
from maze_carver.core.stats import calculate_stats, is_perfect
from maze_carver.settings import Settings
from maze_carver.viz.drawer import ImmediateDrawer
from maze_carver.viz.fps import FpsCounter

logger = logging.getLogger(__name__)

class Renderer:
    COLOR_BG = (128, 128, 128) # Gray

    def __init__(self, grid: Grid, generator=None, settings: Settings = None,
                 window=None, clock=None, fps_counter: FpsCounter = None, drawer: ImmediateDrawer = None):
        self.grid = grid
        self.generator = generator
        self.settings = settings or Settings()
        self.window = window
        self.clock = clock
        self.fps_counter = fps_counter or FpsCounter()
        self.drawer = drawer or ImmediateDrawer()
        self.frame_count = 0
        self.gen_finished = False

    def init_window(self):
        """Opens the pygame window unless one was injected. Raises InitializationError."""
        if self.window is None:
            from maze_carver.viz.window import PygameWindow
            self.window = PygameWindow(self.settings.title, self.settings.width, self.settings.height)
        if self.clock is None:
            import pygame
            self.clock = pygame.time.Clock()

    def highlight(self, cell):
        cell.highlight(self.drawer, self.settings.wall_size)

    def step_generator(self):
        if not self.generator or self.gen_finished:
            return

        last = self.settings.steps_per_frame - 1
        for i in range(self.settings.steps_per_frame):
            # One highlight per frame, on the cell the frame ends at
            highlight = self.highlight if i == last else None
            if not self.generator.step(highlight):
                self.gen_finished = True
                self.on_finished()
                break

    def on_finished(self):
        stats = calculate_stats(self.grid)
        logger.info(f"Generation complete in {self.generator.step_count} steps ({self.frame_count + 1} frames)")
        logger.info(f"Stats: {stats}")
        if not is_perfect(self.grid):
            logger.warning("Carved passages do not form a spanning tree")

    def draw_frame(self):
        # Previous state first, then advance, then present
        self.window.clear(self.COLOR_BG)
        self.drawer.clear()

        for cell in self.grid:
            cell.draw(self.drawer, self.settings.wall_size)

        self.step_generator()

        self.drawer.flush_to(self.window)
        self.window.present()

    def update_title(self):
        fps = self.fps_counter.frame()
        if fps is not None:
            self.window.set_title(f"{self.settings.title} | FPS: {fps}")

    def run_loop(self):
        # Runs until the window is closed, not until generation ends
        try:
            while not self.window.closed():
                self.draw_frame()
                self.clock.tick(self.settings.fps)
                self.frame_count += 1
                self.update_title()
        finally:
            self.window.close()
