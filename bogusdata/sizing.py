from random import Random

from bogusdata.config import Configuration, SizeMode
from bogusdata.constants import CONF_SIZE_BAND, RANDOM_FRACTION_BAND


class Budget(object):
    """Running byte total for one run, bounded by ``maximum``."""

    def __init__(self, maximum: int):
        self.maximum = maximum
        self.total = 0

    @property
    def remaining(self) -> int:
        return self.maximum - self.total

    @property
    def exhausted(self) -> bool:
        return self.remaining <= 0

    def clamp(self, size: int) -> int:
        return min(size, self.remaining)

    def consume(self, size: int) -> None:
        if size > self.remaining:
            raise ValueError(f"size {size} exceeds remaining budget {self.remaining}")
        self.total += size


def _conf_size(remaining: int, rng: Random) -> int:
    low, high = CONF_SIZE_BAND
    if remaining < high:
        high = remaining
    if high <= low:
        return remaining
    return rng.randrange(low, high)


def _random_size(remaining: int, ceiling: int, rng: Random) -> int:
    low = max(1, int(remaining * RANDOM_FRACTION_BAND[0]))
    high = max(low + 1, int(remaining * RANDOM_FRACTION_BAND[1]))
    return min(rng.randrange(low, high), remaining, ceiling)


def choose_size(extension: str, budget: Budget, config: Configuration, rng: Random) -> int:
    """Size in bytes for the next file, never more than the remaining budget.

    A result of 0 means nothing more can be written in this run.
    """
    remaining = budget.remaining
    if remaining <= 0:
        return 0
    if extension == "conf":
        size = _conf_size(remaining, rng)
    elif config.size_mode is SizeMode.EXACT:
        size = config.exact_file_size
    else:
        size = _random_size(remaining, config.max_file_size, rng)
    return max(0, budget.clamp(size))
