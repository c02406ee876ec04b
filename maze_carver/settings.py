from dataclasses import dataclass
from typing import Optional

@dataclass
class Settings:
    wall_size: int = 40
    width: int = 800
    height: int = 800
    fps: int = 60
    stack_capacity: int = 50
    steps_per_frame: int = 1
    seed: Optional[int] = None # None -> cryptographic RNG
    title: str = "Maze Carver"

    @property
    def cols(self) -> int:
        return self.width // self.wall_size

    @property
    def rows(self) -> int:
        return self.height // self.wall_size

    def validate(self):
        if self.wall_size <= 0:
            raise ValueError("wall size must be positive")
        if self.cols < 1 or self.rows < 1:
            raise ValueError(f"{self.width}x{self.height} window cannot hold a {self.wall_size}px cell")
        if self.fps <= 0:
            raise ValueError("fps must be positive")
        if self.steps_per_frame <= 0:
            raise ValueError("steps per frame must be positive")
        if self.stack_capacity <= 0:
            raise ValueError("stack capacity must be positive")
