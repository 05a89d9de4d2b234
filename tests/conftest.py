import pytest

from burble import create_app
from burble.config import TestingConfig
from burble.services.word_provider import StaticWordProvider


@pytest.fixture
def word_provider():
    # One word per length keeps target selection deterministic
    return StaticWordProvider({
        "burble": ["frog", "apple", "garden"],
        "valentine": ["heart"],
    })


@pytest.fixture
def app_bundle(tmp_path, word_provider):
    class _TestConfig(TestingConfig):
        LOG_DIR = str(tmp_path / "logs")

    app, socketio = create_app(_TestConfig, word_provider=word_provider)
    return app, socketio


@pytest.fixture
def app_instance(app_bundle):
    return app_bundle[0]


@pytest.fixture
def client(app_instance):
    return app_instance.test_client()


@pytest.fixture
def socket_client(app_bundle):
    app, socketio = app_bundle
    test_client = socketio.test_client(app)
    yield test_client
    if test_client.is_connected():
        test_client.disconnect()


@pytest.fixture
def new_game(client):
    def _create(**body):
        response = client.post("/api/new_game", json=body)
        assert response.status_code == 200
        return response.get_json()["game_id"]
    return _create
