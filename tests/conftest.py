import os
import tempfile

import pytest

# Keep test logs out of the working tree; must be set before the package is imported
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='unscramble-logs-'))

from unscramble import create_app
from unscramble.config import TestingConfig
from unscramble.services.game_service import initialize_game_service


class TwoWordConfig(TestingConfig):
    MAX_NO_OF_WORDS = 2


TWO_WORDS = ["cat", "dog"]


@pytest.fixture()
def game_service():
    return initialize_game_service(TestingConfig)


@pytest.fixture()
def two_word_service():
    return initialize_game_service(TwoWordConfig, word_list=TWO_WORDS)


@pytest.fixture()
def flask_app(game_service):
    application, _socketio = create_app(TestingConfig)
    yield application


@pytest.fixture()
def two_word_app(two_word_service):
    application, _socketio = create_app(TwoWordConfig)
    yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def two_word_client(two_word_app):
    return two_word_app.test_client()


@pytest.fixture()
def sio_client(two_word_app):
    test_client = two_word_app.socketio.test_client(
        two_word_app,
        flask_test_client=two_word_app.test_client()
    )
    yield test_client
    if test_client.is_connected():
        test_client.disconnect()


@pytest.fixture()
def current_word():
    """Reads the unscrambled word on screen straight from the session."""
    def _read(service, game_id):
        return service.games[game_id]["session"].current_word
    return _read
