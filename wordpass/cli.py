"""
Command-line entry point
Prints one passphrase; newline only when writing to a terminal
"""

import argparse
import logging
import random
import sys
from typing import List, Optional

from wordpass import __version__
from wordpass.config import get_settings, validate_settings
from wordpass.exceptions import PassphraseError
from wordpass.logging_config import setup_logging
from wordpass.services.generator import generate
from wordpass.wordlist import load_dictionary


def build_parser(default_count: int, default_separator: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordpass",
        description="Generate a passphrase of random, distinct dictionary words",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("-n", "--count", type=int, default=None,
                      help=f"Number of words in the passphrase (default: {default_count})")
    mode.add_argument("-l", "--length", type=int, default=None,
                      help="Minimum length of the passphrase; adds words until reached")

    parser.add_argument("-s", "--separator", type=str, default=default_separator,
                        help='Separator between words: a literal string, "digit" for '
                             'random digits or "special" for random special characters')
    parser.add_argument("-w", "--wordlist", type=str,
                        help="Path to a custom wordlist, one word per line")
    parser.add_argument("--language", type=str,
                        help="BIP39 wordlist language (default: WORDLIST_LANGUAGE)")
    parser.add_argument("--seed", type=int,
                        help="Seed for reproducible output (not for real passphrases)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log debug information to stderr")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Handle command-line arguments and print a passphrase."""
    settings = get_settings()
    parser = build_parser(settings.DEFAULT_COUNT, settings.DEFAULT_SEPARATOR)
    args = parser.parse_args(argv)

    # Only the passphrase on a quiet run
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    count = args.count if args.count is not None else settings.DEFAULT_COUNT
    if args.length is None and count < 1:
        parser.error("count must be a positive integer")
    if args.length is not None and args.length < 0:
        parser.error("length must not be negative")

    try:
        if not args.wordlist and not args.language:
            validate_settings(settings)
        dictionary = load_dictionary(settings, path=args.wordlist, language=args.language)

        rng = random.Random(args.seed) if args.seed is not None else None
        passphrase = generate(dictionary, args.length, count, args.separator, rng)
    except (PassphraseError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    sys.stdout.write(passphrase)
    if sys.stdout.isatty():
        sys.stdout.write("\n")
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
