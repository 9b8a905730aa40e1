"""
Shared pytest fixtures for greeter tests.
"""
import threading

import pytest

from greeter import bind, create_app, serve


@pytest.fixture
def app():
    return create_app({'TESTING': True})


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def live_server(app):
    """Serve the app on an ephemeral loopback port from a background thread.

    Yields (server, announced) where announced collects the startup lines.
    """
    server = bind(app, '127.0.0.1', 0)
    announced = []
    thread = threading.Thread(target=serve, args=(server, announced.append), daemon=True)
    thread.start()
    yield server, announced
    server.shutdown()
    server.server_close()
    thread.join(timeout=5)
