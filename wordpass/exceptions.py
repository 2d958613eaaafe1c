"""
Passphrase engine errors
Raised to the caller, never retried inside the engine
"""


class PassphraseError(Exception):
    """Base class for all passphrase generation failures"""


class InvalidConfigurationError(PassphraseError, ValueError):
    """Request parameters the engine cannot act on"""


class InvalidSeparatorError(InvalidConfigurationError):
    """Separator is neither a known token nor a usable literal"""


class CursorExhaustedError(PassphraseError, IndexError):
    """Draw attempted on a cursor with no words left"""


class InsufficientWordsError(PassphraseError):
    """
    Dictionary ran out of unique words before the minimum length was reached
    Words are never reused to make up the difference
    """

    def __init__(self, min_length: int, reached: int, available: int):
        self.min_length = min_length
        self.reached = reached
        self.available = available
        super().__init__(
            f"insufficient unique words: {available} words reach length "
            f"{reached}, {min_length} required"
        )
