from __future__ import annotations

import dataclasses
import logging
from typing import Dict, Optional

from PySide6 import QtCore, QtWidgets

from ... import config
from ...domain.commands import (
    ACTION_LABELS,
    LED_CHANNEL_MAX,
    Action,
    Command,
    MessageSender,
    command_for,
    flash_color_command,
    move_command,
    zero_command,
)
from ...domain.models import RigState
from ..widgets.rig_canvas import RigCanvas

logger = logging.getLogger(__name__)

# Button rows, top to bottom
_ACTION_ROWS = (
    (Action.STOP, Action.AUTOMATE_ON, Action.AUTOMATE_OFF),
    (Action.TURN_UP, Action.TURN_DOWN, Action.RESET),
    (Action.FLASH, Action.DISCO),
)


class DetailView(QtWidgets.QDialog):
    """Schematic of one rig plus buttons that send commands to it.

    The sender and the rig state are required up front, so every element
    exists as soon as the dialog is constructed.
    """

    dismissed = QtCore.Signal(int)  # rig id

    def __init__(self, sender: MessageSender, rig: RigState, parent: Optional[QtWidgets.QWidget] = None) -> None:
        super().__init__(parent)
        self._sender = sender
        self.rig = dataclasses.replace(rig)

        self.setWindowTitle(f"Rig {self.rig.label}")
        self.setMinimumSize(config.DETAIL_MIN_W_PX, config.DETAIL_MIN_H_PX)

        root = QtWidgets.QVBoxLayout(self)
        root.setContentsMargins(12, 12, 12, 12)
        root.setSpacing(8)

        header = QtWidgets.QHBoxLayout()
        self.btn_back = QtWidgets.QPushButton(ACTION_LABELS[Action.DISMISS])
        self.btn_back.clicked.connect(lambda _checked=False: self.trigger(Action.DISMISS))
        self.lbl_id = QtWidgets.QLabel(self.rig.label)
        self.lbl_id.setStyleSheet("font-size: 28px; font-weight: 600;")
        self.lbl_state = QtWidgets.QLabel(self.rig.state)
        header.addWidget(self.btn_back)
        header.addStretch(1)
        header.addWidget(self.lbl_state)
        header.addSpacing(12)
        header.addWidget(self.lbl_id)
        root.addLayout(header)

        self.canvas = RigCanvas(self.rig)
        root.addWidget(self.canvas, 1)

        self.buttons: Dict[Action, QtWidgets.QPushButton] = {Action.DISMISS: self.btn_back}
        for row in _ACTION_ROWS:
            row_layout = QtWidgets.QHBoxLayout()
            for action in row:
                btn = QtWidgets.QPushButton(ACTION_LABELS[action])
                btn.clicked.connect(lambda _checked=False, a=action: self.trigger(a))
                row_layout.addWidget(btn)
                self.buttons[action] = btn
            root.addLayout(row_layout)

        # Rig commands outside the fixed action table
        extra = QtWidgets.QHBoxLayout()
        self.btn_zero = QtWidgets.QPushButton("Zero")
        self.btn_zero.clicked.connect(lambda _checked=False: self.zero())
        self.sp_move = QtWidgets.QDoubleSpinBox()
        self.sp_move.setRange(0.0, config.MOVE_MAX_CM)
        self.sp_move.setDecimals(1)
        self.sp_move.setSuffix(" cm")
        self.sp_move.setValue(self.rig.position)
        self.btn_move = QtWidgets.QPushButton("Move")
        self.btn_move.clicked.connect(lambda _checked=False: self.move_to(self.sp_move.value()))
        self.btn_color = QtWidgets.QPushButton("Color Flash")
        self.btn_color.clicked.connect(self._on_color_clicked)
        extra.addWidget(self.btn_zero)
        extra.addWidget(self.sp_move, 1)
        extra.addWidget(self.btn_move)
        extra.addWidget(self.btn_color)
        root.addLayout(extra)

    def trigger(self, action: Action) -> None:
        """Run one user action: send its command, or close for Action.DISMISS."""
        command = command_for(action)
        logger.debug(f"Rig {self.rig.label}: {Action(action).value}")
        if command is None:
            self.dismissed.emit(self.rig.id)
            self.reject()
            return
        self._send(command)

    def _send(self, command: Command) -> None:
        self._sender.send(self.rig.id, command.topic, command.payload)

    def zero(self) -> None:
        self._send(zero_command())

    def move_to(self, height: float) -> None:
        self._send(move_command(height))

    def flash_color(self, r: int, g: int, b: int, w: int, time_ms: int = config.FLASH_COLOR_MS) -> None:
        self._send(flash_color_command(r, g, b, w, time_ms))

    def _on_color_clicked(self) -> None:
        color = QtWidgets.QColorDialog.getColor(parent=self, title="Flash Color")
        if not color.isValid():
            return
        # Dialog channels are 0..255, the rig LED takes 0..1023
        scale = LED_CHANNEL_MAX / 255.0
        self.flash_color(round(color.red() * scale), round(color.green() * scale), round(color.blue() * scale), 0)

    @QtCore.Slot(object)
    def update_state(self, rig: RigState) -> None:
        """Take new position/distance/motion for this rig; other rigs are ignored."""
        if rig.id != self.rig.id:
            return
        self.rig = dataclasses.replace(rig)
        self.lbl_state.setText(self.rig.state)
        self.canvas.set_state(self.rig)
