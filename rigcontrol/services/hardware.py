from __future__ import annotations
import logging
from typing import Any, Callable, Optional

from PySide6 import QtCore

from .. import config
from ..io_client import IoClient

logger = logging.getLogger(__name__)

ClientFactory = Callable[[str, int], IoClient]


class HardwareService(QtCore.QObject):
    """
    Relays rig messages through the backend via IoClient.
    Outbound commands and inbound status use the same {"id", "topic", "payload"} shape.
    """
    # Signals
    connection_status_changed = QtCore.Signal(str)  # "Connected", "Disconnected", "Connecting to ..."
    message_received = QtCore.Signal(int, str, str)  # rig id, topic, payload

    def __init__(self, client_factory: Optional[ClientFactory] = None) -> None:
        super().__init__()
        self._client_factory: ClientFactory = client_factory or IoClient
        self.client: Optional[IoClient] = None
        self._connected = False

    @property
    def is_connected(self) -> bool:
        return self._connected

    def connect(self, host: str, port: int) -> None:
        self.disconnect()
        client = self._client_factory(host, int(port))
        self.client = client

        # Register listeners; events from a replaced client are ignored
        client.on("connect", lambda c=client: self._on_connect(c))
        client.on("disconnect", lambda *args, c=client: self._on_disconnect(c))
        client.on(config.MESSAGE_EVENT, lambda data, c=client: self._on_message(c, data))

        client.start()
        self.connection_status_changed.emit(f"Connecting to {host}:{port}...")

    def auto_connect(self) -> None:
        if config.AUTO_CONNECT:
            self.connect(config.SOCKET_HOST, config.SOCKET_PORT)

    def disconnect(self) -> None:
        if self.client:
            self.client.stop()
            self.client = None
        self._connected = False
        self.connection_status_changed.emit("Disconnected")

    def _on_connect(self, client: IoClient) -> None:
        if client is not self.client:
            return
        self._connected = True
        self.connection_status_changed.emit("Connected")

    def _on_disconnect(self, client: IoClient) -> None:
        if client is not self.client:
            return
        self._connected = False
        self.connection_status_changed.emit("Disconnected")

    def _on_message(self, client: IoClient, data: Any) -> None:
        if client is not self.client:
            return
        try:
            rig_id = int(data["id"])
            topic = str(data["topic"])
            payload = data.get("payload")
        except (TypeError, KeyError, ValueError):
            logger.warning(f"Dropping malformed message: {data!r}")
            return
        self.message_received.emit(rig_id, topic, "" if payload is None else str(payload))

    # --- Command Methods ---

    def send(self, id: int, topic: str, payload: str) -> None:
        """Fire-and-forget delivery of one command to a rig."""
        if not self.client or not self._connected:
            logger.warning(f"Not connected; dropping {topic!r} for rig {int(id):02d}")
            return
        self.client.emit(config.MESSAGE_EVENT, {"id": int(id), "topic": str(topic), "payload": str(payload)})
