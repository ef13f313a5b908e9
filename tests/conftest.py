import os
from typing import List, Tuple

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6 import QtWidgets  # noqa: E402


class RecordingSender:
    """MessageSender that remembers every call."""

    def __init__(self):
        self.calls: List[Tuple[int, str, str]] = []

    def send(self, id, topic, payload):
        self.calls.append((id, topic, payload))


class FakeIoClient:
    """Stands in for IoClient so no socket is opened."""

    def __init__(self, host, port):
        self.host = host
        self.port = port
        self.handlers = {}
        self.emitted = []
        self.started = False
        self.stopped = False

    def on(self, event, handler):
        self.handlers.setdefault(event, []).append(handler)

    def start(self):
        self.started = True

    def stop(self):
        self.stopped = True

    def emit(self, event, data=None):
        self.emitted.append((event, data))
        return True

    def fire(self, event, *args):
        for handler in self.handlers.get(event, []):
            handler(*args)


@pytest.fixture(scope="session")
def qapp():
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app


@pytest.fixture
def sender():
    return RecordingSender()


@pytest.fixture
def fake_clients():
    """Factory fixture; created clients are collected in the returned list."""
    created: List[FakeIoClient] = []

    def _factory(host, port):
        client = FakeIoClient(host, port)
        created.append(client)
        return client

    _factory.created = created
    return _factory
