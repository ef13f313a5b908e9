from __future__ import annotations
from typing import Dict, Optional

from PySide6 import QtCore, QtWidgets

from .controllers.main_controller import MainController
from .dialogs.detail_view import DetailView
from .state import ViewState
from ..domain.models import RigState


class MainWindow(QtWidgets.QMainWindow):
    def __init__(self, controller: Optional[MainController] = None) -> None:
        super().__init__()
        self.setWindowTitle("Rig Control")

        self.controller = controller or MainController()
        self.state = ViewState()
        self._detail_views: Dict[int, DetailView] = {}

        self._setup_ui()
        self._connect_signals()
        self._refresh_rig_list()

    def _setup_ui(self) -> None:
        central = QtWidgets.QWidget()
        layout = QtWidgets.QVBoxLayout(central)
        layout.setContentsMargins(6, 6, 6, 6)
        layout.setSpacing(6)

        self.lbl_connection = QtWidgets.QLabel(self.state.connection_text)
        layout.addWidget(self.lbl_connection)

        self.rig_list = QtWidgets.QListWidget()
        self.rig_list.setSelectionMode(QtWidgets.QAbstractItemView.SingleSelection)
        layout.addWidget(self.rig_list, 1)

        btn_row = QtWidgets.QHBoxLayout()
        self.btn_open = QtWidgets.QPushButton("Open")
        btn_row.addStretch(1)
        btn_row.addWidget(self.btn_open)
        layout.addLayout(btn_row)

        self.setCentralWidget(central)

    def _connect_signals(self) -> None:
        self.controller.hardware.connection_status_changed.connect(self._on_connection_status)
        self.controller.rig_updated.connect(self._on_rig_updated)
        self.rig_list.itemDoubleClicked.connect(lambda item: self.open_detail(item.data(QtCore.Qt.UserRole)))
        self.rig_list.currentItemChanged.connect(self._on_selection_changed)
        self.btn_open.clicked.connect(self._on_open_clicked)

    # --- List ---

    @staticmethod
    def _item_text(rig: RigState) -> str:
        return f"{rig.label}  {rig.state}"

    def _refresh_rig_list(self) -> None:
        selected = self.state.selected_rig_id
        self.rig_list.clear()
        for rig in self.controller.registry.all():
            item = QtWidgets.QListWidgetItem(self._item_text(rig))
            item.setData(QtCore.Qt.UserRole, rig.id)
            self.rig_list.addItem(item)
            if rig.id == selected:
                self.rig_list.setCurrentItem(item)

    def _find_item(self, rig_id: int) -> Optional[QtWidgets.QListWidgetItem]:
        for row in range(self.rig_list.count()):
            item = self.rig_list.item(row)
            if item.data(QtCore.Qt.UserRole) == rig_id:
                return item
        return None

    # --- Detail views ---

    def open_detail(self, rig_id: int) -> DetailView:
        view = self._detail_views.get(rig_id)
        if view is None:
            rig = self.controller.registry.ensure(rig_id)
            view = DetailView(self.controller, rig, parent=self)
            view.finished.connect(lambda _result, rid=rig_id: self._on_detail_finished(rid))
            self._detail_views[rig_id] = view
        view.show()
        view.raise_()
        return view

    def detail_view(self, rig_id: int) -> Optional[DetailView]:
        return self._detail_views.get(rig_id)

    def _on_detail_finished(self, rig_id: int) -> None:
        # A dismissed view is discarded; reopening builds a fresh one
        view = self._detail_views.pop(rig_id, None)
        if view is not None:
            view.deleteLater()

    # --- Slots ---

    @QtCore.Slot(str)
    def _on_connection_status(self, text: str) -> None:
        self.state.connection_text = text
        self.lbl_connection.setText(text)

    @QtCore.Slot(object)
    def _on_rig_updated(self, rig: RigState) -> None:
        item = self._find_item(rig.id)
        if item is None:
            self._refresh_rig_list()
        else:
            item.setText(self._item_text(rig))
        view = self._detail_views.get(rig.id)
        if view is not None:
            view.update_state(rig)

    def _on_selection_changed(self, current: Optional[QtWidgets.QListWidgetItem], _previous) -> None:
        self.state.selected_rig_id = current.data(QtCore.Qt.UserRole) if current else None

    def _on_open_clicked(self) -> None:
        if self.state.selected_rig_id is not None:
            self.open_detail(self.state.selected_rig_id)
