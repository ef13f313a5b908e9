from __future__ import annotations
from typing import Dict, Tuple

from PySide6 import QtCore, QtGui

from ... import config
from ...domain.models import Rect


class RigRenderer:
    """Paints the rig schematic for a RigCanvas."""

    def __init__(self, canvas):
        self.canvas = canvas

    def element_styles(self) -> Dict[str, Tuple[str, Tuple[int, int, int], int]]:
        """Map element name to (mode, color, border px); mode is "fill" or "outline"."""
        light_color = config.COLOR_LIGHT_MOTION if self.canvas.state.motion else config.COLOR_LIGHT
        return {
            "rope": ("outline", config.COLOR_ROPE, config.ROPE_BORDER_PX),
            "light": ("fill", light_color, 0),
            "floor": ("outline", config.COLOR_FLOOR, config.FLOOR_BORDER_PX),
            "object": ("fill", config.COLOR_OBJECT, 0),
        }

    def draw(self, p: QtGui.QPainter) -> None:
        p.fillRect(0, 0, self.canvas.width(), self.canvas.height(), QtGui.QColor(*config.COLOR_BG))
        styles = self.element_styles()
        # Later elements paint over earlier ones, matching the view stacking order
        for name, rect in self.canvas.rig_layout:
            mode, color, border = styles[name]
            self._draw_element(p, rect, mode, color, border)

    def _draw_element(self, p: QtGui.QPainter, rect: Rect, mode: str, color: Tuple[int, int, int], border: int) -> None:
        r = QtCore.QRectF(rect.x, rect.y, rect.width, rect.height).normalized()
        if mode == "fill":
            p.fillRect(r, QtGui.QColor(*color))
            return
        pen = QtGui.QPen(QtGui.QColor(*color), border)
        pen.setJoinStyle(QtCore.Qt.MiterJoin)
        p.setPen(pen)
        p.setBrush(QtCore.Qt.NoBrush)
        # Keep the stroke inside the rect like a layer border
        inset = border / 2.0
        p.drawRect(r.adjusted(inset, inset, -inset, -inset))
