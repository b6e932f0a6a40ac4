"""
Dicephrase Errors - Exception hierarchy for passphrase generation.
"""

from typing import Optional


class DicewareError(Exception):
    """
    Base error for passphrase generation.

    When raised from inside a multi-word generation the failing word's
    1-based position is stored on ``word_index``, or the enhancement phase
    that failed on ``context``. The exception class itself is never changed,
    so callers can still tell configuration errors from entropy failures.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
        self.word_index: Optional[int] = None
        self.context: Optional[str] = None

    def __str__(self) -> str:
        if self.word_index is not None:
            return f"failed to generate word {self.word_index}: {self.message}"
        if self.context is not None:
            return f"failed to generate {self.context}: {self.message}"
        return self.message


class InvalidWordlist(DicewareError):
    """No wordlist was provided."""

    def __init__(self, message: str = "invalid wordlist: none provided"):
        super().__init__(message)


class InvalidWordCount(DicewareError):
    """Requested word count is zero or negative."""

    def __init__(self, word_count: int):
        super().__init__(f"invalid word count {word_count}: must be positive")
        self.word_count = word_count


class InvalidWordFetched(DicewareError):
    """A roll-code resolved to no word (malformed or sparse wordlist)."""

    def __init__(self, roll_code: int):
        super().__init__(f"invalid empty word fetched for roll code {roll_code}")
        self.roll_code = roll_code


class RandomnessFailure(DicewareError):
    """The entropy source could not produce a value."""
