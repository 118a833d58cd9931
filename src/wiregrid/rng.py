import random
import time
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, TypeVar

T = TypeVar("T")


def default_seed() -> int:
    # Wall-clock milliseconds; levels seeded this way are not reproducible
    # unless the caller reads the seed back off the instance.
    return time.time_ns() // 1_000_000


@dataclass
class SeededRandom:
    """One reproducible stream per generation call.

    Every random decision the generator makes goes through one instance, so
    a fixed seed replays the same level.
    """
    seed: Optional[int] = None
    _stream: random.Random = field(init=False, repr=False)

    def __post_init__(self):
        if self.seed is None:
            self.seed = default_seed()
        self._stream = random.Random(self.seed)

    def next_float(self) -> float:
        """Uniform in [0, 1)."""
        return self._stream.random()

    def next_int(self, lo: int, hi: int) -> int:
        """Uniform integer, both bounds inclusive."""
        return self._stream.randint(lo, hi)

    def float(self, lo: float, hi: float) -> float:
        return lo + (hi - lo) * self._stream.random()

    def shuffle(self, seq: Sequence[T]) -> List[T]:
        """Return a shuffled copy; the input is left alone."""
        out = list(seq)
        self._stream.shuffle(out)
        return out

    def pick(self, seq: Sequence[T]) -> T:
        return seq[self.next_int(0, len(seq) - 1)]
