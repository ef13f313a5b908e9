from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Optional

import socketio  # type: ignore

from . import config

logger = logging.getLogger(__name__)


class IoClient:
    """Socket.IO client that keeps reconnecting on a background thread."""

    def __init__(self, host: str | None = None, port: int | None = None) -> None:
        self.host = host or config.SOCKET_HOST
        self.port = int(port or config.SOCKET_PORT)
        self._sio = socketio.Client(reconnection=False)
        self._listeners: dict[str, list[Callable[..., None]]] = {}

        # Wire events
        self._sio.on("connect", self._on_connect)
        self._sio.on("disconnect", self._on_disconnect)

        self._stop_flag = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def url(self) -> str:
        # Ensure URL has scheme
        base = self.host
        if not base.startswith("http://") and not base.startswith("https://"):
            base = f"http://{base}"
        return f"{base}:{self.port}"

    def _on_connect(self) -> None:
        logger.info(f"Connected to {self.url}")
        self._dispatch("connect")

    def _on_disconnect(self, *args: Any) -> None:
        logger.info(f"Disconnected from {self.url}")
        self._dispatch("disconnect")

    def _dispatch(self, event: str, *args: Any) -> None:
        for handler in list(self._listeners.get(event, [])):
            try:
                handler(*args)
            except Exception:
                # Keep the socket thread alive
                logger.exception(f"Handler for {event!r} failed")

    def _close_socket(self) -> None:
        if not self._sio.connected:
            return
        try:
            self._sio.disconnect()
        except socketio.exceptions.SocketIOError as e:
            logger.warning(f"Disconnect failed: {e}")

    def _run_forever(self) -> None:
        backoff_s = config.RECONNECT_BACKOFF_S
        while not self._stop_flag.is_set():
            try:
                self._sio.connect(self.url, wait=True, wait_timeout=2.0)
                backoff_s = config.RECONNECT_BACKOFF_S
                # Block here; will return on disconnect or stop
                while not self._stop_flag.is_set() and self._sio.connected:
                    self._sio.sleep(0.05)
                if self._stop_flag.is_set():
                    break
            except Exception as e:
                logger.debug(f"Connect to {self.url} failed: {e}")
                self._stop_flag.wait(backoff_s)
                backoff_s = min(config.RECONNECT_BACKOFF_MAX_S, backoff_s * 1.7)
                continue

            # If disconnected without stop, attempt reconnect with backoff
            self._stop_flag.wait(backoff_s)
            backoff_s = min(config.RECONNECT_BACKOFF_MAX_S, backoff_s * 1.4)

        # stop() may have returned while connect() was still pending
        self._close_socket()

    def start(self) -> None:
        if self._thread and self._thread.is_alive():
            return
        self._stop_flag.clear()
        self._thread = threading.Thread(target=self._run_forever, name="IoClientThread", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        self._stop_flag.set()
        self._close_socket()
        if self._thread and self._thread.is_alive():
            self._thread.join(timeout=1.0)

    # Public emit API
    def emit(self, event: str, data: Optional[dict] = None) -> bool:
        """Emit an event; returns False when the client could not send it."""
        try:
            if data is None:
                self._sio.emit(event)
            else:
                self._sio.emit(event, data)
        except socketio.exceptions.SocketIOError as e:
            logger.warning(f"Emit {event!r} failed: {e}")
            return False
        return True

    # Event subscription helpers
    def on(self, event: str, handler: Callable[..., None]) -> None:
        if event in ("connect", "disconnect"):
            self._listeners.setdefault(event, []).append(handler)
            return

        def _wrapper(*args: Any) -> None:
            try:
                handler(*args)
            except Exception:
                logger.exception(f"Handler for {event!r} failed")

        self._sio.on(event, _wrapper)
