import time
from typing import Callable, Optional

class FpsCounter:
    """Counts frames and reports the total once per interval."""

    def __init__(self, interval: float = 1.0, clock: Callable[[], float] = time.monotonic):
        self.interval = interval
        self.clock = clock
        self.frames = 0
        self.fps = 0
        self._last = clock()

    def frame(self) -> Optional[int]:
        """Registers a frame. Returns the FPS when an interval has elapsed."""
        self.frames += 1
        now = self.clock()
        if now - self._last >= self.interval:
            self.fps = self.frames
            self.frames = 0
            self._last = now
            return self.fps
        return None
