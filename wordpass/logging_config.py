"""
Logging configuration
Generation events are logged but never include the generated passphrase
"""

import logging
import sys
from typing import Set


class PassphraseFilter(logging.Filter):
    """Filter that redacts anything resembling generated output"""

    SENSITIVE_KEYS: Set[str] = {
        "passphrase",
        "password",
        "words",
        "secret",
        "seed",
    }

    def filter(self, record: logging.LogRecord) -> bool:
        msg = str(record.msg).lower()
        for key in self.SENSITIVE_KEYS:
            if key in msg and "=" in msg:
                # Likely contains a value assignment
                record.msg = "[REDACTED - Sensitive data filtered]"
                record.args = ()
                break
        return True


def setup_logging(level: int = logging.INFO):
    """Configure application logging"""
    # stdout is reserved for the passphrase itself
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    handler.addFilter(PassphraseFilter())

    root = logging.getLogger()
    root.setLevel(level)

    # Clear existing handlers to avoid duplicates
    root.handlers = []
    root.addHandler(handler)

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# Engine event logger
engine_logger = logging.getLogger("wordpass.engine")


def log_dictionary_loaded(source: str, size: int):
    """Log dictionary load (size only)"""
    engine_logger.info(f"Dictionary loaded from {source}: {size} unique entries")


def log_duplicates_dropped(source: str, dropped: int):
    """Log duplicate entries removed while loading"""
    engine_logger.warning(f"Dictionary {source}: dropped {dropped} duplicate entries")


def log_generated(policy: str, word_count: int, separator_kind: str):
    """Log a successful generation (shape only, no content)"""
    engine_logger.debug(
        f"Generated passphrase via {policy} policy: {word_count} entries, "
        f"{separator_kind} separator"
    )


def log_insufficient_words(min_length: int, reached: int, available: int):
    """Log a length request the dictionary could not satisfy"""
    engine_logger.warning(
        f"Minimum length {min_length} unreachable: {available} unique entries "
        f"reach {reached}"
    )


def log_rate_limited(client: str):
    """Log rate limit event"""
    engine_logger.warning(f"Rate limit exceeded for {client}")
