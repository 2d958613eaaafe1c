import random
import string

import pytest

from wordpass.exceptions import InvalidSeparatorError
from wordpass.services.assembler import (
    DIGITS,
    SPECIAL,
    SeparatorKind,
    SeparatorSpec,
    assemble,
    join_random,
    parse_separator,
)

WORDS = ["Shroomish", "Venusaur", "Froakie", "Tyranitar"]


def test_assemble_literal_separator(scripted_rng):
    rng = scripted_rng()

    assert assemble(WORDS, "-", rng) == "Shroomish-Venusaur-Froakie-Tyranitar"
    assert assemble(WORDS, ", ", rng) == "Shroomish, Venusaur, Froakie, Tyranitar"
    assert rng.calls == []


@pytest.mark.parametrize("separator", [" ", "digit", "special"])
def test_assemble_empty_and_single_word(scripted_rng, separator):
    rng = scripted_rng()

    assert assemble([], separator, rng) == ""
    assert assemble(["Pikachu"], separator, rng) == "Pikachu"
    assert rng.calls == []


def test_assemble_digit_draws_once_per_gap(scripted_rng):
    rng = scripted_rng(picks=[7, 0, 2])

    result = assemble(WORDS, "digit", rng)

    assert result == "Shroomish7Venusaur0Froakie2Tyranitar"
    assert rng.choices == [DIGITS, DIGITS, DIGITS]


def test_assemble_special_draws_once_per_gap(scripted_rng):
    rng = scripted_rng(picks=[SPECIAL.index("#"), SPECIAL.index("`"), SPECIAL.index("/")])

    result = assemble(WORDS, "special", rng)

    assert result == "Shroomish#Venusaur`Froakie/Tyranitar"
    assert rng.choices == [SPECIAL, SPECIAL, SPECIAL]


def test_random_gaps_are_independent(scripted_rng):
    rng = scripted_rng(picks=[1, 2, 3])

    result = join_random(["a", "b", "c", "d"], DIGITS, rng)

    assert result == "a1b2c3d"


def test_random_separators_come_from_alphabet():
    words = ["w"] * 50
    result = assemble(words, "special", random.Random(5))
    separators = result.replace("w", "")

    assert len(separators) == 49
    assert set(separators) <= set(SPECIAL)


def test_special_alphabet():
    assert len(SPECIAL) == 29
    assert len(set(SPECIAL)) == 29
    assert not any(ch.isalnum() or ch.isspace() for ch in SPECIAL)
    assert set(SPECIAL) <= set(string.punctuation)


def test_digit_alphabet():
    assert DIGITS == string.digits


def test_parse_separator_tokens():
    assert parse_separator("digit") == SeparatorSpec(SeparatorKind.DIGIT)
    assert parse_separator("special") == SeparatorSpec(SeparatorKind.SPECIAL)
    assert parse_separator("--") == SeparatorSpec(SeparatorKind.LITERAL, "--")


def test_separator_width():
    assert parse_separator("digit").width == 1
    assert parse_separator("special").width == 1
    assert parse_separator(" ").width == 1
    assert parse_separator(" :: ").width == 4


def test_parse_separator_accepts_spec():
    spec = SeparatorSpec(SeparatorKind.LITERAL, "+")

    assert parse_separator(spec) is spec


@pytest.mark.parametrize("value", ["", SeparatorSpec(SeparatorKind.LITERAL, ""), None])
def test_parse_separator_rejects_unusable_values(value):
    with pytest.raises(InvalidSeparatorError):
        parse_separator(value)


def test_invalid_separator_is_a_value_error():
    with pytest.raises(ValueError):
        assemble(WORDS, "", None)
