import os
import tempfile

# Keep test logs out of the working tree; must happen before wordle_round is imported
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="wordle_round_logs_"))

import pytest

from wordle_round import create_app
from wordle_round.config import TestingConfig
from wordle_round.services.dictionary import WordDictionary
from wordle_round.services.game_service import GameService
from wordle_round.services.session_store import initialize_session_store

TEST_WORDS = [
    "crane", "crate", "react", "trace", "eerie",
    "lucky", "kulcy", "plant", "stone", "moist",
    "ghost", "fjord",
]


class FixedChoice:
    """Random source that always picks the same answer."""

    def __init__(self, answer: str):
        self.answer = answer

    def choice(self, words):
        assert self.answer in words
        return self.answer


@pytest.fixture
def dictionary() -> WordDictionary:
    return WordDictionary(TEST_WORDS)


@pytest.fixture
def game(dictionary) -> GameService:
    return GameService(dictionary, rng=FixedChoice("crane"))


def type_word(game: GameService, word: str) -> None:
    assert game.set_current_guess(word)


def play(game: GameService, word: str):
    type_word(game, word)
    return game.submit_guess()


@pytest.fixture
def app_and_socketio(dictionary):
    initialize_session_store(dictionary, rng=FixedChoice("crane"))
    return create_app(TestingConfig)


@pytest.fixture
def client(app_and_socketio):
    app, _ = app_and_socketio
    return app.test_client()
