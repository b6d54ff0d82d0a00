import os
import sys
import pytest

# Ensure the backend root (containing the `numguess` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from numguess import create_app


class FixedRandom:
    """Stands in for random.Random; randint always returns `value`."""

    def __init__(self, value):
        self.value = value

    def randint(self, a, b):
        return self.value


def make_test_config(db_path, secret=None):
    class TestConfig:
        TESTING = True
        GAMES_DB_PATH = str(db_path)
        CORS_ORIGINS = [r'http://localhost.*', 'null']
        CORS_MAX_AGE = 3600
        GAME_RNG = FixedRandom(secret) if secret is not None else None
    return TestConfig


@pytest.fixture()
def fixed_random():
    return FixedRandom


@pytest.fixture()
def make_config():
    return make_test_config


@pytest.fixture()
def db_path(tmp_path):
    return tmp_path / 'database.json'


@pytest.fixture()
def flask_app(db_path):
    # Every game created through this app gets secret 42
    application = create_app(make_test_config(db_path, secret=42))
    yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def store(flask_app):
    return flask_app.extensions['game_store']
