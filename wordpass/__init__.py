"""
wordpass - memorable passphrases from distinct dictionary words
"""

from wordpass.exceptions import (
    CursorExhaustedError,
    InsufficientWordsError,
    InvalidConfigurationError,
    InvalidSeparatorError,
    PassphraseError,
)
from wordpass.services.generator import generate
from wordpass.wordlist import Dictionary

__version__ = "1.0.0"

__all__ = [
    "CursorExhaustedError",
    "Dictionary",
    "InsufficientWordsError",
    "InvalidConfigurationError",
    "InvalidSeparatorError",
    "PassphraseError",
    "generate",
]
