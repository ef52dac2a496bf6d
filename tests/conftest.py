import os
import random
import tempfile

# Keep test logs out of the working tree; Config reads this at import time
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="word_scramble_logs_"))

import pytest

from word_scramble import create_app
from word_scramble.config import TestingConfig
from word_scramble.models import GameState
from word_scramble.services import GameService, WordSetOracle, WordValidator
from word_scramble.services import game_service as game_service_module

DICTIONARY = [
    "silk", "silkworm", "worm", "milk", "work", "works", "swirl", "slim",
    "mils", "owl", "so", "is", "hi", "his", "whistle", "this",
]


@pytest.fixture
def oracle():
    return WordSetOracle(DICTIONARY)


@pytest.fixture
def validator(oracle):
    return WordValidator(oracle, "en")


@pytest.fixture
def silkworm_game():
    return GameState(game_id="g1", root_word="silkworm")


@pytest.fixture
def service(oracle):
    return GameService(["silkworm"], oracle, language="en", rng=random.Random(42))


@pytest.fixture
def client(service, monkeypatch):
    monkeypatch.setattr(game_service_module, "_game_service", service)
    app = create_app(TestingConfig)
    return app.test_client()
