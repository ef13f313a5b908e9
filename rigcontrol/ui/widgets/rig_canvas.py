from __future__ import annotations

from typing import Optional

from PySide6 import QtGui, QtWidgets

from ... import config
from ...domain.models import RigLayout, RigState
from ...services.geometry import GeometryService
from ..renderers.rig_renderer import RigRenderer


class RigCanvas(QtWidgets.QWidget):
    """Schematic of one rig. The layout follows the widget size and the rig state."""

    def __init__(self, state: RigState, parent: Optional[QtWidgets.QWidget] = None) -> None:
        super().__init__(parent)
        self.state = state
        self._renderer = RigRenderer(self)
        self.setMinimumSize(int(config.LAYOUT.floor_width), 200)
        self.setSizePolicy(QtWidgets.QSizePolicy.Expanding, QtWidgets.QSizePolicy.Expanding)
        self.setAutoFillBackground(True)
        self.rig_layout: RigLayout = self.recalculate()

    def recalculate(self) -> RigLayout:
        self.rig_layout = GeometryService.recalculate(
            self.width(), self.height(), self.state.position, self.state.distance
        )
        return self.rig_layout

    def set_state(self, state: RigState) -> None:
        self.state = state
        self.recalculate()
        self.update()

    def resizeEvent(self, event: QtGui.QResizeEvent) -> None:  # noqa: N802
        super().resizeEvent(event)
        self.recalculate()

    def paintEvent(self, event: QtGui.QPaintEvent) -> None:  # noqa: N802
        p = QtGui.QPainter(self)
        try:
            self._renderer.draw(p)
        finally:
            p.end()
