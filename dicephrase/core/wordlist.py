"""
Dicephrase Wordlists - Roll-code to word lookup tables.

A roll-code is the decimal concatenation of ``rolls_required`` die faces,
first roll first: rolling 3 then 5 gives code 35. The EFF tables are read
from the word files shipped with xkcdpass, which list the words in the same
ascending dice order as the published EFF lists.
"""

import itertools
import os
import re
import threading
from abc import ABC, abstractmethod
from typing import Dict, Iterator, Mapping, Optional

from xkcdpass import xkcd_password

from dicephrase.core.log import get_logger

logger = get_logger('wordlist')


class Wordlist(ABC):
    """
    A table addressed by simulated dice rolls.

    Subclasses provide ``fetch``; an unknown roll-code must return an empty
    string, never raise.
    """

    def __init__(self, rolls_required: int, dice_sides: int):
        if rolls_required < 1:
            raise ValueError(f"rolls_required must be >= 1, got {rolls_required}")
        if dice_sides < 1:
            raise ValueError(f"dice_sides must be >= 1, got {dice_sides}")
        self.rolls_required = rolls_required
        self.dice_sides = dice_sides

    @abstractmethod
    def fetch(self, roll_code: int) -> str:
        """Return the word for roll_code, or '' if there is none."""

    @property
    def size(self) -> int:
        """Number of distinct roll-codes the dice can produce."""
        return self.dice_sides ** self.rolls_required


class MapWordlist(Wordlist):
    """Wordlist backed by a read-only mapping of roll-code -> word."""

    def __init__(self, rolls_required: int, dice_sides: int, words: Mapping[int, str]):
        super().__init__(rolls_required, dice_sides)
        self._words = dict(words)

    def fetch(self, roll_code: int) -> str:
        return self._words.get(roll_code, "")

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(rolls_required={self.rolls_required}, "
                f"dice_sides={self.dice_sides}, words={len(self._words)})")


def roll_codes(rolls_required: int, dice_sides: int) -> Iterator[int]:
    """
    Yield every valid roll-code in ascending dice order.

    >>> list(roll_codes(2, 2))
    [11, 12, 21, 22]
    """
    faces = range(1, dice_sides + 1)
    for rolls in itertools.product(faces, repeat=rolls_required):
        code = 0
        for face in rolls:
            code = code * 10 + face
        yield code


class PackagedWordlist(MapWordlist):
    """
    One of the word files distributed with xkcdpass.

    The file is read on first lookup. Its i-th word is bound to the i-th
    roll-code, so the file must contain exactly ``dice_sides ** rolls_required``
    words.
    """

    def __init__(self, name: str, rolls_required: int, dice_sides: int):
        super().__init__(rolls_required, dice_sides, {})
        self.name = name
        self._loaded = False
        self._load_lock = threading.Lock()

    def _locate(self) -> str:
        path = xkcd_password.locate_wordfile(self.name)
        # locate_wordfile falls back to other dictionaries when the name is unknown
        if path is None or os.path.basename(path) != os.path.basename(self.name):
            raise FileNotFoundError(f"Word file not found in xkcdpass: {self.name}")
        return path

    def _load(self) -> None:
        with self._load_lock:
            if self._loaded:
                return
            path = self._locate()
            with open(path, 'r', encoding='utf-8') as f:
                words = [line.strip() for line in f if line.strip()]

            if len(words) != self.size:
                raise ValueError(
                    f"Word file {self.name} has {len(words)} words, "
                    f"expected {self.size} for {self.rolls_required} x d{self.dice_sides}"
                )

            self._words = dict(zip(roll_codes(self.rolls_required, self.dice_sides), words))
            self._loaded = True
            logger.debug("Loaded %d words from %s", len(words), path)

    def fetch(self, roll_code: int) -> str:
        if not self._loaded:
            self._load()
        return super().fetch(roll_code)

    def __len__(self) -> int:
        if not self._loaded:
            self._load()
        return super().__len__()


_CODE_LINE = re.compile(r'^([1-9]+)\s+(\S+)\s*$')


def load_wordlist_file(filepath: str) -> MapWordlist:
    """
    Load a diceware-format wordlist file.

    Reads lines of the form ``<roll-code><whitespace><word>`` (e.g. the
    original diceware.wordlist.asc) and ignores everything else, including
    PGP armor. The number of rolls comes from the code width and the die
    size from the largest face seen.

    Args:
        filepath: Path to the wordlist file

    Returns:
        MapWordlist holding the parsed table

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If no roll-code lines are found or code widths differ
    """
    words: Dict[int, str] = {}
    width: Optional[int] = None
    sides = 0

    with open(filepath, 'r', encoding='utf-8') as f:
        for line in f:
            match = _CODE_LINE.match(line)
            if not match:
                continue
            code, word = match.groups()
            if width is None:
                width = len(code)
            elif len(code) != width:
                raise ValueError(
                    f"Inconsistent roll-code width in {filepath}: {code} (expected {width} digits)"
                )
            sides = max(sides, max(int(d) for d in code))
            words[int(code)] = word

    if width is None:
        raise ValueError(f"No roll-code lines found in wordlist: {filepath}")

    logger.debug("Loaded %d words (%d x d%d) from %s", len(words), width, sides, filepath)
    return MapWordlist(width, sides, words)


EFF_LONG = PackagedWordlist('eff-long', 5, 6)
EFF_SHORT = PackagedWordlist('eff-short', 4, 6)
# EFF short list 2: every word has a unique three-letter prefix
EFF_SHORT_PREFIX = PackagedWordlist('eff-special', 4, 6)

EXTRA_ENTROPY = MapWordlist(
    2,
    6,
    dict(zip(roll_codes(2, 6), "~!@#$%^&*()-_=+{}[]|.:;/?><123456789")),
)

WORDLISTS: Dict[str, Wordlist] = {
    'eff-long': EFF_LONG,
    'eff-short': EFF_SHORT,
    'eff-short-prefix': EFF_SHORT_PREFIX,
}
