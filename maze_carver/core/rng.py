import random
import secrets
from maze_carver.core.errors import EntropyError

class CryptoRandom:
    """Default source: uniform integers from the OS entropy pool."""

    def uniform_int(self, n: int) -> int:
        if n <= 0:
            raise ValueError(f"uniform_int needs a positive bound, got {n}")
        try:
            return secrets.randbelow(n)
        except OSError as e:
            raise EntropyError(f"Entropy source failed: {e}") from e


class SeededRandom:
    """Deterministic source for tests and --seed runs."""

    def __init__(self, seed: int = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def uniform_int(self, n: int) -> int:
        if n <= 0:
            raise ValueError(f"uniform_int needs a positive bound, got {n}")
        return self._rng.randrange(n)


def make_rng(seed: int = None):
    if seed is None:
        return CryptoRandom()
    return SeededRandom(seed)
