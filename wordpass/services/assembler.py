"""
Passphrase assembly
Joins picked words with a literal separator or random characters
"""

from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Union

from wordpass.exceptions import InvalidSeparatorError

DIGITS = "0123456789"
SPECIAL = "~`!@#$%^&*()_-+={}[]|:;<,>.?/"

DIGIT_TOKEN = "digit"
SPECIAL_TOKEN = "special"


class SeparatorKind(str, Enum):
    LITERAL = "literal"
    DIGIT = "digit"
    SPECIAL = "special"


@dataclass(frozen=True)
class SeparatorSpec:
    """Literal separator string, or a random alphabet drawn per gap"""
    kind: SeparatorKind
    literal: str = ""

    @property
    def randomized(self) -> bool:
        return self.kind is not SeparatorKind.LITERAL

    @property
    def width(self) -> int:
        """Characters one separator occupies; random kinds always count as 1"""
        if self.randomized:
            return 1
        return len(self.literal)

    @property
    def alphabet(self) -> str:
        if self.kind is SeparatorKind.DIGIT:
            return DIGITS
        if self.kind is SeparatorKind.SPECIAL:
            return SPECIAL
        return ""


def parse_separator(value: Union[str, SeparatorSpec]) -> SeparatorSpec:
    """Map "digit" and "special" to random alphabets; anything else is literal"""
    if isinstance(value, SeparatorSpec):
        if value.kind is SeparatorKind.LITERAL and not value.literal:
            raise InvalidSeparatorError("literal separator must not be empty")
        return value
    if not isinstance(value, str):
        raise InvalidSeparatorError(f"unrecognized separator: {value!r}")
    if value == DIGIT_TOKEN:
        return SeparatorSpec(SeparatorKind.DIGIT)
    if value == SPECIAL_TOKEN:
        return SeparatorSpec(SeparatorKind.SPECIAL)
    if not value:
        raise InvalidSeparatorError("literal separator must not be empty")
    return SeparatorSpec(SeparatorKind.LITERAL, value)


def join_random(words: Sequence[str], alphabet: str, rng) -> str:
    """Join words, drawing an independent separator from alphabet for every gap"""
    if not words:
        return ""

    parts = [words[0]]
    for word in words[1:]:
        parts.append(rng.choice(alphabet))
        parts.append(word)
    return "".join(parts)


def assemble(words: Sequence[str], separator: Union[str, SeparatorSpec], rng) -> str:
    """
    Build the final passphrase from words in draw order

    No leading or trailing separator. Zero words give "" and a single
    word comes back unchanged without touching rng.
    """
    spec = parse_separator(separator)
    if spec.randomized:
        return join_random(words, spec.alphabet, rng)
    return spec.literal.join(words)
