from rigcontrol.io_client import IoClient


class FakeSio:
    """Socket that connects while the owning client is being stopped."""

    def __init__(self, owner):
        self.owner = owner
        self.connected = False
        self.disconnects = 0

    def connect(self, url, wait=True, wait_timeout=2.0):
        self.url = url
        self.connected = True
        self.owner._stop_flag.set()

    def sleep(self, seconds):
        pass

    def disconnect(self):
        self.disconnects += 1
        self.connected = False


def test_socket_connected_during_stop_is_closed():
    client = IoClient("relay.local", 3000)
    client._sio = FakeSio(client)

    client._run_forever()

    assert client._sio.url == "http://relay.local:3000"
    assert client._sio.disconnects == 1
    assert not client._sio.connected


def test_stop_without_connection_does_not_disconnect():
    client = IoClient("relay.local", 3000)
    fake = FakeSio(client)
    client._sio = fake

    client.stop()

    assert fake.disconnects == 0


def test_url_keeps_explicit_scheme():
    assert IoClient("https://relay", 443).url == "https://relay:443"
