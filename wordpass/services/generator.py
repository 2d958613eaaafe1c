"""
Passphrase generation
Dictionary -> shuffled cursor -> picked words -> assembled string
"""

import secrets
from typing import List, Optional, Tuple, Union

from wordpass.exceptions import InvalidConfigurationError
from wordpass.logging_config import log_generated
from wordpass.services.assembler import SeparatorSpec, assemble, parse_separator
from wordpass.services.sampler import shuffle
from wordpass.services.selector import pick, pick_by_length
from wordpass.wordlist import Dictionary


def generate_words(
    dictionary: Dictionary,
    min_length: Optional[int],
    count: int,
    separator: Union[str, SeparatorSpec],
    rng=None,
) -> Tuple[List[str], str]:
    """Like generate(), also returning the picked words in output order"""
    spec = parse_separator(separator)
    if rng is None:
        rng = secrets.SystemRandom()

    if min_length is None and count < 0:
        raise InvalidConfigurationError("count must be >= 0")

    cursor = shuffle(dictionary, rng)

    if min_length is not None:
        words = pick_by_length(cursor, spec.width, min_length)
        policy = "length"
    else:
        words = pick(cursor, count)
        policy = "count"

    passphrase = assemble(words, spec, rng)
    log_generated(policy, len(words), spec.kind.value)
    return words, passphrase


def generate(
    dictionary: Dictionary,
    min_length: Optional[int],
    count: int,
    separator: Union[str, SeparatorSpec],
    rng=None,
) -> str:
    """
    Generate one passphrase

    With min_length set the length policy applies and count is ignored.
    A single rng is consumed in order: the shuffle first, then one draw
    per gap for random separators. Defaults to the system CSPRNG.
    """
    _, passphrase = generate_words(dictionary, min_length, count, separator, rng)
    return passphrase
