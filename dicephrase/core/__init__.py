"""
Dicephrase Core - Random sources, wordlists, and passphrase generation.
"""

from dicephrase.core.errors import (
    DicewareError,
    InvalidWordlist,
    InvalidWordCount,
    InvalidWordFetched,
    RandomnessFailure,
)

from dicephrase.core.entropy import (
    RandomSource,
    SecureRandom,
    EntropyPool,
    hash_entropy,
    load_entropy_from_file,
)

from dicephrase.core.wordlist import (
    Wordlist,
    MapWordlist,
    PackagedWordlist,
    load_wordlist_file,
    roll_codes,
    EFF_LONG,
    EFF_SHORT,
    EFF_SHORT_PREFIX,
    EXTRA_ENTROPY,
    WORDLISTS,
)

from dicephrase.core.generator import (
    PassphraseOptions,
    default_options,
    roll_word,
    roll_words,
    simple_roll_words,
    calculate_passphrase_entropy,
)

from dicephrase.core.security import secure_zero

__all__ = [
    "DicewareError",
    "InvalidWordlist",
    "InvalidWordCount",
    "InvalidWordFetched",
    "RandomnessFailure",
    "RandomSource",
    "SecureRandom",
    "EntropyPool",
    "hash_entropy",
    "load_entropy_from_file",
    "Wordlist",
    "MapWordlist",
    "PackagedWordlist",
    "load_wordlist_file",
    "roll_codes",
    "EFF_LONG",
    "EFF_SHORT",
    "EFF_SHORT_PREFIX",
    "EXTRA_ENTROPY",
    "WORDLISTS",
    "PassphraseOptions",
    "default_options",
    "roll_word",
    "roll_words",
    "simple_roll_words",
    "calculate_passphrase_entropy",
    "secure_zero",
]
