class FixedRandom:
    """Always picks the same candidate index (clamped to the bound)."""
    def __init__(self, value=0):
        self.value = value
        self.calls = []

    def uniform_int(self, n):
        self.calls.append(n)
        return min(self.value, n - 1)


class FakeWindow:
    """Records window calls; reports closed after `frames` polls."""
    def __init__(self, frames=None, close_when=None):
        self.frames = frames
        self.close_when = close_when
        self.polls = 0
        self.calls = []
        self.titles = []
        self.rendered = []
        self.is_closed = False

    def closed(self):
        if self.close_when is not None and self.close_when():
            return True
        if self.frames is not None and self.polls >= self.frames:
            return True
        self.polls += 1
        return False

    def clear(self, color):
        self.calls.append(("clear", color))

    def render(self, shapes):
        self.calls.append(("render", len(shapes)))
        self.rendered.append(list(shapes))

    def present(self):
        self.calls.append(("present",))

    def set_title(self, title):
        self.titles.append(title)

    def close(self):
        self.is_closed = True


class FakeClock:
    def __init__(self):
        self.ticks = []

    def tick(self, fps):
        self.ticks.append(fps)
        return 0


def carved_pairs(grid):
    from maze_carver.core.stats import passages
    return set(passages(grid))
