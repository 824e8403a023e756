import os
import sys
import pytest

# Ensure the project root (containing the `kings_valley` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from kings_valley import create_app, get_registry, socketio


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    CORS_ALLOWED_ORIGINS = ['http://localhost:3000']
    SOCKETIO_NAMESPACE = '/'
    STATIC_DIR = 'tests/does-not-exist'
    LOG_LEVEL = 'DEBUG'


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def registry(flask_app):
    return get_registry()


@pytest.fixture()
def sio_client(flask_app):
    """Factory for Socket.IO test clients; each one is a separate participant."""
    clients = []

    def _connect():
        test_client = socketio.test_client(flask_app, flask_test_client=flask_app.test_client())
        clients.append(test_client)
        return test_client

    yield _connect
    for test_client in clients:
        try:
            if test_client.is_connected():
                test_client.disconnect()
        except Exception:
            pass
