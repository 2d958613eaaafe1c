"""
Pytest fixtures for wordpass tests
"""

import logging
import os
from typing import AsyncGenerator

import pytest

# Set test environment before imports
os.environ.setdefault("WORDLIST_LANGUAGE", "english")
os.environ.setdefault("LOG_LEVEL", "INFO")

from httpx import AsyncClient, ASGITransport

from wordpass.config import Settings
from wordpass.main import create_app
from wordpass.wordlist import Dictionary

GREEK = ["Alpha", "Beta", "Gamma", "Delta", "Epsilon"]
GREEK_PERMUTATION = ["Beta", "Delta", "Alpha", "Gamma", "Epsilon"]


class ScriptedRandom:
    """
    Randomness source with a fixed shuffle result

    choice() walks through `picks` (indices into the alphabet) and records
    every alphabet it was asked to draw from, plus the call order.
    """

    def __init__(self, order=None, picks=None):
        self.order = list(order) if order is not None else None
        self.picks = list(picks or [])
        self.choices = []
        self.calls = []

    def shuffle(self, items):
        self.calls.append("shuffle")
        if self.order is not None:
            assert sorted(self.order) == sorted(items)
            items[:] = self.order

    def choice(self, seq):
        self.calls.append("choice")
        draw = len(self.choices)
        self.choices.append(seq)
        index = self.picks[draw] if draw < len(self.picks) else draw
        return seq[index % len(seq)]


@pytest.fixture
def scripted_rng():
    """Factory for ScriptedRandom instances."""
    return ScriptedRandom


@pytest.fixture
def greek() -> Dictionary:
    """Five-word dictionary."""
    return Dictionary(GREEK, source="greek")


@pytest.fixture
def greek_rng() -> ScriptedRandom:
    """Shuffles GREEK into GREEK_PERMUTATION."""
    return ScriptedRandom(order=GREEK_PERMUTATION)


@pytest.fixture(scope="session")
def english() -> Dictionary:
    """Full BIP39 English dictionary."""
    return Dictionary.from_language("english")


@pytest.fixture(autouse=True)
def restore_root_logging():
    """setup_logging() replaces root handlers; put them back after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


def make_settings(**overrides) -> Settings:
    values = {
        "WORDLIST_LANGUAGE": "english",
        "WORDLIST_PATH": None,
        "DEFAULT_COUNT": 4,
        "DEFAULT_SEPARATOR": " ",
        "LOG_LEVEL": "INFO",
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def app(greek):
    """Application with a preloaded dictionary (ASGITransport skips lifespan)."""
    application = create_app(make_settings(RATE_LIMIT_BURST=5, RATE_LIMIT_PER_MINUTE=1))
    application.state.dictionary = greek
    return application


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client for testing endpoints."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac


@pytest.fixture
def settings_factory():
    """Build Settings with test defaults and overrides."""
    return make_settings
