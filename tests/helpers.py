from typing import Iterable, List

from dicephrase.core.entropy import RandomSource
from dicephrase.core.errors import RandomnessFailure


class FixedRandom(RandomSource):
    """Always returns the same value."""

    def __init__(self, value: int = 0):
        self.value = value
        self.bounds: List[int] = []

    def randbelow(self, bound: int) -> int:
        self.bounds.append(bound)
        return self.value


class ScriptedRandom(RandomSource):
    """Returns a fixed sequence of draws, then fails."""

    def __init__(self, values: Iterable[int]):
        self.values = list(values)
        self.bounds: List[int] = []

    def randbelow(self, bound: int) -> int:
        self.bounds.append(bound)
        if not self.values:
            raise RandomnessFailure("script exhausted")
        value = self.values.pop(0)
        assert 0 <= value < bound, f"scripted value {value} out of range for bound {bound}"
        return value


class FailingRandom(RandomSource):
    """Behaves like an unavailable entropy device."""

    def randbelow(self, bound: int) -> int:
        try:
            raise OSError("entropy device unavailable")
        except OSError as e:
            raise RandomnessFailure(f"failed to get random value: {e}") from e
