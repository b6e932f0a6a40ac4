# -*- coding: utf-8 -*-
"""
Dicephrase Generator - Diceware passphrase generation.
"""

import dataclasses
from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np

from dicephrase.core.entropy import RandomSource, SecureRandom
from dicephrase.core.errors import (
    DicewareError,
    InvalidWordCount,
    InvalidWordFetched,
    InvalidWordlist,
)
from dicephrase.core.log import get_logger
from dicephrase.core.wordlist import EFF_LONG, EXTRA_ENTROPY, Wordlist, roll_codes

logger = get_logger('generator')


@dataclass
class PassphraseOptions:
    """
    Settings for a single roll_words() call.

    Attributes:
        word_count: Number of words in the passphrase (must be positive)
        separator: String placed between words
        wordlist: Table the words are drawn from
        enhance_entropy: Insert one random symbol or digit into a prefix of
            the words (default False)
        random_source: Source of dice rolls; None means the system CSPRNG
    """
    word_count: int = 6
    separator: str = " "
    wordlist: Optional[Wordlist] = None
    enhance_entropy: bool = False
    random_source: Optional[RandomSource] = field(default_factory=SecureRandom)


def default_options() -> PassphraseOptions:
    """
    Six space-separated words from the EFF long list, no enhancement,
    system CSPRNG (about 77.5 bits).
    """
    return PassphraseOptions(
        word_count=6,
        separator=" ",
        wordlist=EFF_LONG,
        enhance_entropy=False,
        random_source=SecureRandom(),
    )


def roll_word(wordlist: Wordlist, random_source: Optional[RandomSource] = None) -> str:
    """
    Roll the dice once per required roll and look the result up.

    The first roll is the most significant decimal digit of the roll-code,
    matching how physical diceware rolls are read.

    Args:
        wordlist: Table to draw from
        random_source: Source of die rolls (default: system CSPRNG)

    Returns:
        The word found at the rolled code

    Raises:
        InvalidWordlist: If wordlist is None
        InvalidWordFetched: If the rolled code has no word
        RandomnessFailure: If the random source fails
    """
    if wordlist is None:
        raise InvalidWordlist()
    if random_source is None:
        random_source = SecureRandom()

    roll_code = 0
    for place in range(wordlist.rolls_required - 1, -1, -1):
        face = random_source.randbelow(wordlist.dice_sides) + 1
        roll_code += face * 10 ** place

    word = wordlist.fetch(roll_code)
    if not word:
        raise InvalidWordFetched(roll_code)

    return word


def _usable_enhancers(separator: str) -> List[str]:
    codes = roll_codes(EXTRA_ENTROPY.rolls_required, EXTRA_ENTROPY.dice_sides)
    return [c for c in map(EXTRA_ENTROPY.fetch, codes) if c not in separator]


def _enhance_entropy(words: List[str], separator: str, random_source: RandomSource) -> None:
    """
    Insert one extra character into each of the first 1..len(words) words.

    Characters that occur in the separator are re-rolled so the passphrase
    still splits into the same number of words. The character always lands
    after at least one original character of the word.
    """
    try:
        num_to_enhance = random_source.randbelow(len(words)) + 1
    except DicewareError as e:
        e.context = "words to enhance"
        raise

    logger.debug("Enhancing %d of %d words", num_to_enhance, len(words))

    i = 0
    while i < num_to_enhance:
        try:
            enhancer = roll_word(EXTRA_ENTROPY, random_source)
        except DicewareError as e:
            e.context = "entropy enhancer"
            raise

        if enhancer in separator:
            continue

        word = words[i]
        try:
            pos = random_source.randbelow(len(word)) + 1
        except DicewareError as e:
            e.context = "enhancer position"
            raise

        words[i] = word[:pos] + enhancer + word[pos:]
        i += 1


def roll_words(options: PassphraseOptions) -> str:
    """
    Generate a diceware passphrase.

    Args:
        options: Generation settings (see PassphraseOptions)

    Returns:
        The words joined by options.separator

    Raises:
        InvalidWordlist: If options.wordlist is None
        InvalidWordCount: If options.word_count is not positive
        InvalidWordFetched: If a roll produced no word (word_index is set)
        RandomnessFailure: If the random source fails (word_index or context is set)
    """
    if options.wordlist is None:
        raise InvalidWordlist()
    if options.word_count <= 0:
        raise InvalidWordCount(options.word_count)
    if options.enhance_entropy and not _usable_enhancers(options.separator):
        raise ValueError(
            f"separator {options.separator!r} contains every entropy enhancer character"
        )

    random_source = options.random_source
    if random_source is None:
        random_source = SecureRandom()

    words: List[str] = []
    for index in range(1, options.word_count + 1):
        try:
            words.append(roll_word(options.wordlist, random_source))
        except DicewareError as e:
            e.word_index = index
            raise

    if options.enhance_entropy:
        _enhance_entropy(words, options.separator, random_source)

    return options.separator.join(words)


def simple_roll_words(
    word_count: int,
    separator: str,
    wordlist: Wordlist,
    enhance_entropy: bool = False
) -> str:
    """Generate a passphrase with the system CSPRNG."""
    return roll_words(dataclasses.replace(
        default_options(),
        word_count=word_count,
        separator=separator,
        wordlist=wordlist,
        enhance_entropy=enhance_entropy,
    ))


def calculate_passphrase_entropy(wordlist: Wordlist, word_count: int) -> float:
    """
    Calculate the theoretical entropy of the generation scheme.

    This is a property of the dice and word count, not a strength estimate
    of any particular passphrase; entropy enhancement is not counted.

    Args:
        wordlist: Wordlist the words are drawn from
        word_count: Number of words

    Returns:
        Entropy in bits (EFF long list: ~12.925 bits/word)
    """
    return float(word_count * wordlist.rolls_required * np.log2(wordlist.dice_sides))
