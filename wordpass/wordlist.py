"""
Word dictionaries
Default source is the BIP39 wordlist from the official mnemonic package
"""

from pathlib import Path
from typing import FrozenSet, Iterable, Iterator, Optional, Tuple, Union

from mnemonic import Mnemonic

from wordpass.config import Settings
from wordpass.logging_config import log_dictionary_loaded, log_duplicates_dropped


class Dictionary:
    """
    Immutable ordered pool of unique, non-empty words

    Built once and shared read-only; the sampler copies it before shuffling.
    """

    def __init__(self, words: Iterable[str], source: str = "memory"):
        words = tuple(words)

        if any(not isinstance(word, str) or not word for word in words):
            raise ValueError("Dictionary entries must be non-empty strings")
        lookup = frozenset(words)
        if len(lookup) != len(words):
            raise ValueError("Dictionary entries must be unique")

        self._words: Tuple[str, ...] = words
        self._lookup: FrozenSet[str] = lookup
        self.source = source

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    def __len__(self) -> int:
        return len(self._words)

    def __getitem__(self, index: int) -> str:
        return self._words[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._lookup

    def __repr__(self) -> str:
        return f"Dictionary(source={self.source!r}, size={len(self)})"

    @classmethod
    def from_language(cls, language: str = "english") -> "Dictionary":
        """BIP39 wordlist for the given language"""
        if language not in Mnemonic.list_languages():
            raise ValueError(f"Unknown wordlist language: {language}")
        wordlist = Mnemonic(language).wordlist
        dictionary = cls(wordlist, source=f"bip39:{language}")
        log_dictionary_loaded(dictionary.source, len(dictionary))
        return dictionary

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "Dictionary":
        """
        Load a word file: UTF-8 (BOM tolerated), one word per line
        Blank lines are skipped; repeated words keep their first position.
        """
        path = Path(path)
        seen = set()
        words = []
        dropped = 0

        with open(path, encoding="utf-8-sig") as wordfile:
            for line in wordfile:
                word = line.strip()
                if not word:
                    continue
                if word in seen:
                    dropped += 1
                    continue
                seen.add(word)
                words.append(word)

        if not words:
            raise ValueError(f"No words loaded from wordlist: {path}")

        if dropped:
            log_duplicates_dropped(str(path), dropped)

        dictionary = cls(words, source=str(path))
        log_dictionary_loaded(dictionary.source, len(dictionary))
        return dictionary


def load_dictionary(
    active_settings: Settings,
    path: Optional[str] = None,
    language: Optional[str] = None,
) -> Dictionary:
    """
    Build the dictionary named by explicit arguments, falling back to settings
    A path wins over a language at the same level.
    """
    if path:
        return Dictionary.from_file(path)
    if language:
        return Dictionary.from_language(language)
    if active_settings.WORDLIST_PATH:
        return Dictionary.from_file(active_settings.WORDLIST_PATH)
    return Dictionary.from_language(active_settings.WORDLIST_LANGUAGE)
