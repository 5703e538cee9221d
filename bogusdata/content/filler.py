import os
from random import Random
from typing import Iterator, Optional

from bogusdata.constants import CHUNK_SIZE
from bogusdata.content.keystream import KeystreamFiller


class UrandomFiller:
    def chunks(self, size: int, chunk_size: int = CHUNK_SIZE) -> Iterator[bytes]:
        remaining = size
        while remaining > 0:
            chunk_len = min(chunk_size, remaining)
            yield os.urandom(chunk_len)
            remaining -= chunk_len


class RepeatFiller:
    """One random byte value repeated to the requested length."""

    def __init__(self, rng: Optional[Random] = None):
        self.rng = rng or Random()

    def chunks(self, size: int, chunk_size: int = CHUNK_SIZE) -> Iterator[bytes]:
        block = bytes([self.rng.randrange(256)]) * min(chunk_size, max(size, 0))
        remaining = size
        while remaining > 0:
            chunk_len = min(chunk_size, remaining)
            yield block[:chunk_len]
            remaining -= chunk_len


def make_filler(name: str, rng: Optional[Random] = None):
    if name == "urandom":
        return UrandomFiller()
    if name == "keystream":
        return KeystreamFiller(rng)
    if name == "repeat":
        return RepeatFiller(rng)
    raise ValueError(f"Unknown filler: {name}")
