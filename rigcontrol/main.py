from __future__ import annotations

import sys
import logging

from . import config

# Configure logging
logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    datefmt='%H:%M:%S'
)


def run_qt() -> int:
    from PySide6 import QtWidgets  # type: ignore
    from .ui.main_window import MainWindow

    app = QtWidgets.QApplication(sys.argv)
    app.setApplicationName("Rig Control")

    win = MainWindow()
    win.show()

    # Connect application quit to controller shutdown
    app.aboutToQuit.connect(win.controller.shutdown)
    win.controller.start()

    rc = app.exec()
    return int(rc)


def main() -> int:
    # Qt is required; raise a clear error if unavailable
    try:
        import PySide6  # noqa: F401
    except ImportError as exc:
        raise RuntimeError("PySide6 is required to run Rig Control.") from exc
    return run_qt()


if __name__ == "__main__":
    raise SystemExit(main())
