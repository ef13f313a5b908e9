from __future__ import annotations
import logging
from typing import Optional

from PySide6 import QtCore

from ... import config
from ...services.hardware import ClientFactory, HardwareService
from ...services.registry import RigRegistry, StatusParseError

logger = logging.getLogger(__name__)


class MainController(QtCore.QObject):
    """
    Main controller for the application.
    Owns the connection and the rig registry, and is the message sender handed to detail views.
    """
    rig_updated = QtCore.Signal(object)  # RigState

    def __init__(self, client_factory: Optional[ClientFactory] = None) -> None:
        super().__init__()
        self.hardware = HardwareService(client_factory)
        self.registry = RigRegistry(config.RIG_IDS)
        self.hardware.message_received.connect(self._on_message)

    def start(self) -> None:
        """Initialize services and start background tasks."""
        self.hardware.auto_connect()

    def shutdown(self) -> None:
        """Cleanup and shutdown services."""
        self.hardware.disconnect()

    # --- MessageSender ---

    def send(self, id: int, topic: str, payload: str) -> None:
        logger.info(f"send rig={int(id):02d} topic={topic!r} payload={payload!r}")
        self.hardware.send(id, topic, payload)

    # --- Inbound status ---

    @QtCore.Slot(int, str, str)
    def _on_message(self, rig_id: int, topic: str, payload: str) -> None:
        try:
            rig = self.registry.apply(rig_id, topic, payload)
        except StatusParseError as e:
            logger.warning(str(e))
            return
        if rig is not None:
            self.rig_updated.emit(rig)
