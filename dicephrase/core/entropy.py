"""
Dicephrase Entropy - Random sources used to roll the virtual dice.

Every source answers a single question: "give me an integer in [0, bound)".
The default source is the operating system CSPRNG; a finite pre-captured
buffer (e.g. hardware noise saved to a file) can be used instead.
"""

import hashlib
import os
import secrets
import threading
from abc import ABC, abstractmethod
from typing import Literal, Union

import numpy as np

from dicephrase.core.errors import RandomnessFailure
from dicephrase.core.log import get_logger
from dicephrase.core.security import secure_zero

logger = get_logger('entropy')


class RandomSource(ABC):
    """Interface for bounded random draws."""

    @abstractmethod
    def randbelow(self, bound: int) -> int:
        """
        Return a uniformly distributed integer in [0, bound).

        Raises:
            ValueError: If bound is not positive
            RandomnessFailure: If the source cannot produce a value
        """


class SecureRandom(RandomSource):
    """
    Default source backed by the system CSPRNG (``secrets``).

    Holds no state, so a single instance may be shared across threads.
    """

    def randbelow(self, bound: int) -> int:
        if bound <= 0:
            raise ValueError(f"bound must be positive, got {bound}")
        try:
            return secrets.randbelow(bound)
        except (OSError, NotImplementedError) as e:
            raise RandomnessFailure(f"failed to get random value: {e}") from e

    def __repr__(self) -> str:
        return "SecureRandom()"


class EntropyPool(RandomSource):
    """
    Random source that consumes a finite buffer of random bytes.

    Draws use rejection sampling over the smallest number of bytes that can
    represent ``bound - 1``, so the result is uniform. Once the buffer runs
    out every further draw raises RandomnessFailure; there is no fallback to
    another source.
    """

    def __init__(self, random_bytes: Union[np.ndarray, bytes, bytearray]):
        if isinstance(random_bytes, np.ndarray):
            self._buffer = np.ascontiguousarray(random_bytes, dtype=np.uint8).ravel()
        else:
            self._buffer = np.frombuffer(bytes(random_bytes), dtype=np.uint8).copy()
        self._offset = 0
        self._lock = threading.Lock()

    @property
    def bytes_used(self) -> int:
        return self._offset

    @property
    def bytes_remaining(self) -> int:
        return len(self._buffer) - self._offset

    def randbelow(self, bound: int) -> int:
        if bound <= 0:
            raise ValueError(f"bound must be positive, got {bound}")
        if bound == 1:
            return 0

        width = ((bound - 1).bit_length() + 7) // 8
        span = 1 << (8 * width)
        threshold = (span // bound) * bound

        with self._lock:
            while True:
                if self._offset + width > len(self._buffer):
                    logger.debug("Entropy pool exhausted after %d bytes", self._offset)
                    raise RandomnessFailure(
                        f"entropy pool exhausted: {self.bytes_remaining} bytes left, "
                        f"{width} needed"
                    )
                chunk = self._buffer[self._offset:self._offset + width]
                self._offset += width
                value = int.from_bytes(chunk.tobytes(), 'big')
                if value < threshold:
                    return value % bound

    def wipe(self) -> None:
        """Zero the buffer and mark it as fully consumed."""
        with self._lock:
            secure_zero(self._buffer)
            self._offset = len(self._buffer)

    def __repr__(self) -> str:
        return f"EntropyPool(remaining={self.bytes_remaining})"


def hash_entropy(
    raw_entropy: np.ndarray,
    hash_algo: Literal['sha256', 'sha512'] = 'sha512'
) -> np.ndarray:
    """
    Whiten raw entropy with a counter-mode hash.

    Each digest-sized chunk is hashed together with its 4-byte big-endian
    index; the output has the same length as the input.

    Args:
        raw_entropy: Raw entropy as numpy uint8 array
        hash_algo: 'sha256' or 'sha512'

    Returns:
        Whitened entropy as a writable numpy uint8 array
    """
    if hash_algo == 'sha256':
        h = hashlib.sha256
    elif hash_algo == 'sha512':
        h = hashlib.sha512
    else:
        raise ValueError(f"Unsupported hash: {hash_algo}")

    hash_size = h().digest_size
    output = bytearray()

    for chunk_index, offset in enumerate(range(0, len(raw_entropy), hash_size)):
        chunk = raw_entropy[offset:offset + hash_size]
        ctx = h()
        ctx.update(chunk_index.to_bytes(4, 'big'))
        ctx.update(chunk.tobytes())
        output.extend(ctx.digest()[:len(chunk)])

    result = np.frombuffer(bytes(output), dtype=np.uint8).copy()
    secure_zero(output)
    return result


def load_entropy_from_file(filepath: str, apply_hash: bool = True) -> np.ndarray:
    """
    Load captured entropy from a file.

    Args:
        filepath: Path to the raw entropy file
        apply_hash: Apply hash whitening (recommended for unprocessed captures)

    Returns:
        Entropy as numpy uint8 array
    """
    if not os.path.exists(filepath):
        raise FileNotFoundError(f"File not found: {filepath}")

    data = np.fromfile(filepath, dtype=np.uint8)
    logger.debug("Loaded %d entropy bytes from %s", len(data), filepath)

    if apply_hash:
        hashed = hash_entropy(data)
        secure_zero(data)
        return hashed

    return data
