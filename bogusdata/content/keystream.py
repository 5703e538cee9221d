from random import Random
from typing import Iterator, Optional

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.backends import default_backend

from bogusdata.constants import CHUNK_SIZE


class KeystreamFiller:
    """Incompressible filler from an AES-256-CTR keystream.

    Encrypting zero blocks in CTR mode yields the raw keystream, which is far
    cheaper per byte than asking the OS for random data on multi-GB files.
    """

    def __init__(self, rng: Optional[Random] = None):
        self.backend = default_backend()
        self.rng = rng or Random()

    def _encryptor(self):
        key = self.rng.getrandbits(256).to_bytes(32, "big")  # AES-256
        nonce = self.rng.getrandbits(128).to_bytes(16, "big")
        cipher = Cipher(algorithms.AES(key), modes.CTR(nonce), backend=self.backend)
        return cipher.encryptor()

    def chunks(self, size: int, chunk_size: int = CHUNK_SIZE) -> Iterator[bytes]:
        encryptor = self._encryptor()
        zeros = bytes(chunk_size)
        remaining = size
        while remaining > 0:
            chunk_len = min(chunk_size, remaining)
            yield encryptor.update(zeros[:chunk_len])
            remaining -= chunk_len
