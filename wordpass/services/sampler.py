"""
Sampling without replacement
A shuffled copy of the dictionary read through a forward-only cursor
"""

from typing import List, Sequence, Tuple

from wordpass.exceptions import CursorExhaustedError, InvalidConfigurationError


class WordCursor:
    """
    One-shot view over an owned, already shuffled list of words

    The position only moves forward, so no word is yielded twice.
    """

    def __init__(self, words: List[str]):
        self._words = words
        self._position = 0

    @property
    def position(self) -> int:
        return self._position

    @property
    def remaining(self) -> int:
        return len(self._words) - self._position

    @property
    def exhausted(self) -> bool:
        return self._position >= len(self._words)

    @property
    def permutation(self) -> Tuple[str, ...]:
        """Full shuffled order, including words already drawn"""
        return tuple(self._words)

    def draw(self) -> str:
        """Yield the next word or raise CursorExhaustedError"""
        if self.exhausted:
            raise CursorExhaustedError(
                f"cursor exhausted after {len(self._words)} words"
            )
        word = self._words[self._position]
        self._position += 1
        return word

    def take(self, count: int) -> List[str]:
        """Draw up to count words; fewer when the cursor runs out"""
        if count < 0:
            raise InvalidConfigurationError("count must be >= 0")
        end = min(self._position + count, len(self._words))
        taken = self._words[self._position:end]
        self._position = end
        return taken

    def __len__(self) -> int:
        return self.remaining


def shuffle(dictionary: Sequence[str], rng) -> WordCursor:
    """
    Uniformly permute a private copy of the dictionary

    rng needs a random.Random compatible shuffle(); the same seed
    gives the same order.
    """
    words = list(dictionary)
    rng.shuffle(words)
    return WordCursor(words)
