"""
Dicephrase - Diceware passphrase generator.

Words are chosen by simulated dice rolls drawn from a cryptographically
secure source, with optional insertion of random symbols and digits.
"""

__version__ = "2.0.0"

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
    load_entropy_from_file,
)

from dicephrase.core.wordlist import (
    Wordlist,
    MapWordlist,
    load_wordlist_file,
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

__all__ = [
    # Version
    "__version__",
    # Errors
    "DicewareError",
    "InvalidWordlist",
    "InvalidWordCount",
    "InvalidWordFetched",
    "RandomnessFailure",
    # Entropy
    "RandomSource",
    "SecureRandom",
    "EntropyPool",
    "load_entropy_from_file",
    # Wordlists
    "Wordlist",
    "MapWordlist",
    "load_wordlist_file",
    "EFF_LONG",
    "EFF_SHORT",
    "EFF_SHORT_PREFIX",
    "EXTRA_ENTROPY",
    "WORDLISTS",
    # Generator
    "PassphraseOptions",
    "default_options",
    "roll_word",
    "roll_words",
    "simple_roll_words",
    "calculate_passphrase_entropy",
]
