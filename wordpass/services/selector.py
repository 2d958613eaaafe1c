"""
Word selection policies
Count policy draws a fixed number; length policy draws until long enough
"""

from typing import List, Sequence

from wordpass.exceptions import InsufficientWordsError, InvalidConfigurationError
from wordpass.logging_config import log_insufficient_words
from wordpass.services.sampler import WordCursor


def assembled_length(words: Sequence[str], separator_width: int) -> int:
    """Characters in the joined output: all words plus one separator per gap"""
    if not words:
        return 0
    return sum(len(word) for word in words) + (len(words) - 1) * separator_width


def pick(cursor: WordCursor, count: int) -> List[str]:
    """
    Draw count words in cursor order

    Best effort: returns whatever is left if the cursor holds fewer.
    """
    if count < 0:
        raise InvalidConfigurationError("count must be >= 0")
    return cursor.take(count)


def pick_by_length(cursor: WordCursor, separator_width: int, min_length: int) -> List[str]:
    """
    Draw words until their assembled length is at least min_length

    Always draws at least one word before checking, so min_length 0 still
    yields a word unless the cursor started empty. Running out of words
    first raises InsufficientWordsError.
    """
    if min_length < 0:
        raise InvalidConfigurationError("min_length must be >= 0")
    if separator_width < 0:
        raise InvalidConfigurationError("separator_width must be >= 0")

    picked: List[str] = []
    total = 0

    while True:
        if cursor.exhausted:
            # Empty dictionary: nothing to draw and nothing required
            if not picked and min_length == 0:
                return picked
            log_insufficient_words(min_length, total, len(picked))
            raise InsufficientWordsError(min_length, total, len(picked))

        word = cursor.draw()
        if picked:
            total += separator_width
        total += len(word)
        picked.append(word)

        if total >= min_length:
            return picked
