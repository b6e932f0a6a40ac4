#!/usr/bin/env python3
"""
Dicephrase CLI - Command-line interface for diceware passphrase generation.
"""

import argparse
import logging
import sys

from dicephrase.config import Config
from dicephrase.core.entropy import EntropyPool, load_entropy_from_file
from dicephrase.core.errors import DicewareError
from dicephrase.core.generator import calculate_passphrase_entropy, roll_words
from dicephrase.core.log import setup_logging
from dicephrase.core.wordlist import WORDLISTS, load_wordlist_file


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dicephrase",
        description="Dicephrase - diceware passphrase generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                            # 6 words from the EFF long list
  %(prog)s -w 8 -s - -e               # 8 words, hyphens, extra symbols
  %(prog)s -l eff-short -n 5          # 5 passphrases from the EFF short list
  %(prog)s --wordlist-file diceware.wordlist.asc
  %(prog)s -f capture.bin             # Roll dice from captured entropy
        """
    )

    # Defaults of None mean "use the config file"
    gen_group = parser.add_argument_group('Generation')
    gen_group.add_argument("-w", "--words", type=int, default=None,
                           help="Words per passphrase (default: 6)")
    gen_group.add_argument("-s", "--separator", default=None,
                           help="Word separator (default: space)")
    gen_group.add_argument("-l", "--wordlist", choices=sorted(WORDLISTS), default=None,
                           help="Built-in wordlist (default: eff-long)")
    gen_group.add_argument("--wordlist-file", metavar="FILE",
                           help="Diceware-format wordlist file (overrides --wordlist)")
    gen_group.add_argument("-e", "--enhance-entropy", action="store_true", default=None,
                           help="Insert random symbols/digits into some words")
    gen_group.add_argument("--no-enhance-entropy", dest="enhance_entropy", action="store_false",
                           default=None, help="Turn off --enhance-entropy saved in the config")
    gen_group.add_argument("-n", "--count", type=int, default=None,
                           help="Number of passphrases (default: 1)")

    ent_group = parser.add_argument_group('Entropy')
    ent_group.add_argument("-f", "--entropy-file", metavar="FILE",
                           help="Roll dice from a captured entropy file instead of the OS CSPRNG")
    ent_group.add_argument("--no-hash", action="store_true",
                           help="Use the entropy file as-is, without hash whitening")

    cfg_group = parser.add_argument_group('Configuration')
    cfg_group.add_argument("--config", metavar="FILE",
                           help="Config file (default: ~/.dicephrase/config.json)")
    cfg_group.add_argument("--save-config", action="store_true",
                           help="Store the given generation options as new defaults")

    out_group = parser.add_argument_group('Output')
    out_group.add_argument("-q", "--quiet", action="store_true",
                           help="Print passphrases only")
    out_group.add_argument("-v", "--verbose", action="store_true",
                           help="Debug logging")

    return parser


def _apply_overrides(config: Config, args) -> None:
    overrides = {
        "word_count": args.words,
        "separator": args.separator,
        "wordlist": args.wordlist,
        "enhance_entropy": args.enhance_entropy,
        "count": args.count,
    }
    for key, value in overrides.items():
        if value is not None:
            config.set("generator", key, value)


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    pool = None
    try:
        config = Config(args.config)
        level = logging.DEBUG if args.verbose else config.get("logging", "level")
        setup_logging(level)

        _apply_overrides(config, args)

        count = config.get("generator", "count")
        if count < 1:
            print(f"Error: count must be positive, got {count}", file=sys.stderr)
            return 1

        if args.save_config:
            config.save()
            if not args.quiet:
                print(f"Saved defaults to {config.path}")

        if args.entropy_file:
            pool = EntropyPool(load_entropy_from_file(args.entropy_file,
                                                      apply_hash=not args.no_hash))
            if not args.quiet:
                print(f"Entropy available: {pool.bytes_remaining:,} bytes")

        options = config.options(random_source=pool)
        if args.wordlist_file:
            options.wordlist = load_wordlist_file(args.wordlist_file)

        entropy_bits = calculate_passphrase_entropy(options.wordlist, options.word_count)

        for _ in range(count):
            passphrase = roll_words(options)
            if args.quiet:
                print(passphrase)
            else:
                print(f"  {passphrase}")
                print(f"    Entropy: ~{entropy_bits:.1f} bits")

        if pool is not None and not args.quiet:
            print(f"Entropy used: {pool.bytes_used:,} bytes")

        return 0

    except KeyboardInterrupt:
        print("\n\nUser interrupt", file=sys.stderr)
        return 130
    except (DicewareError, ValueError, TypeError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        if pool is not None:
            pool.wipe()


if __name__ == "__main__":
    sys.exit(main())
