"""
Surface Table Editor
Editable Height/Width table for one surface kind (walls, doors or windows).

Business Rules:
- Rows are addressed by surface id (stored on the row), never by position
- Only positive numbers are accepted; an empty cell counts as zero
- Rejected input is reverted to the previous value
- The last remaining row cannot be removed
"""
import logging
from typing import Optional

from PySide6.QtWidgets import (
    QGroupBox, QVBoxLayout, QHBoxLayout, QPushButton, QTableWidget,
    QTableWidgetItem, QHeaderView, QAbstractItemView
)
from PySide6.QtCore import Qt, Signal

from paintestimator.config import LENGTH_UNIT
from paintestimator.model.inputs import InvalidInputError, format_number, parse_dimension
from paintestimator.model.state import ProjectState
from paintestimator.model.surfaces import LastSurfaceError, SurfaceKind

logger = logging.getLogger(__name__)

COL_HEIGHT = 0
COL_WIDTH = 1
FIELDS = {COL_HEIGHT: "height", COL_WIDTH: "width"}


class SurfaceTableWidget(QGroupBox):
    dataChanged = Signal()

    def __init__(self, project_state: ProjectState, kind: SurfaceKind, parent=None) -> None:
        super().__init__(kind.plural, parent)
        self.project = project_state
        self.kind = kind

        layout = QVBoxLayout(self)

        # Table
        self.table = QTableWidget()
        self.table.setColumnCount(2)
        self.table.setHorizontalHeaderLabels([f"Height [{LENGTH_UNIT}]", f"Width [{LENGTH_UNIT}]"])
        self.table.horizontalHeader().setSectionResizeMode(QHeaderView.Stretch)
        self.table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.table.setSelectionMode(QAbstractItemView.SingleSelection)
        layout.addWidget(self.table)

        # Tools
        h_tools = QHBoxLayout()
        self.btn_add = QPushButton(f"Add {kind.label}")
        self.btn_del = QPushButton("Remove")
        h_tools.addWidget(self.btn_add)
        h_tools.addWidget(self.btn_del)
        h_tools.addStretch()
        layout.addLayout(h_tools)

        self.btn_add.clicked.connect(self._add_row)
        self.btn_del.clicked.connect(self._del_row)
        self.table.itemChanged.connect(self._on_item_changed)

        self.load_from_state()

    @property
    def surfaces(self):
        return self.project.surfaces[self.kind]

    def load_from_state(self) -> None:
        """Rebuild the table from the surface list in ProjectState."""
        self.table.blockSignals(True)
        self.table.setRowCount(0)
        self.table.setRowCount(len(self.surfaces))
        labels = []
        for row, surface in enumerate(self.surfaces):
            labels.append(f"{self.kind.label} {row + 1}")
            for col, name in FIELDS.items():
                item = QTableWidgetItem(format_number(getattr(surface, name)))
                item.setData(Qt.UserRole, surface.id)
                self.table.setItem(row, col, item)
        self.table.setVerticalHeaderLabels(labels)
        self.table.blockSignals(False)
        self._update_buttons()

    def surface_id_at(self, row: int) -> Optional[int]:
        item = self.table.item(row, COL_HEIGHT)
        if item is None:
            return None
        return item.data(Qt.UserRole)

    def _update_buttons(self) -> None:
        self.btn_del.setEnabled(self.surfaces.can_remove())

    def _on_item_changed(self, item: QTableWidgetItem) -> None:
        surface_id = item.data(Qt.UserRole)
        name = FIELDS.get(item.column())
        if surface_id is None or name is None:
            return

        surface = self.surfaces.get(surface_id)
        try:
            value = parse_dimension(item.text())
        except InvalidInputError as e:
            logger.debug(f"{self.kind.label} {surface_id} {name}: {e}")
            # Revert to the last accepted value
            self.table.blockSignals(True)
            item.setText(format_number(getattr(surface, name)))
            self.table.blockSignals(False)
            return

        self.project.update_surface(self.kind, surface_id, **{name: value})
        self.dataChanged.emit()

    def _add_row(self) -> None:
        surface = self.project.add_surface(self.kind)
        self.load_from_state()
        self.table.setCurrentCell(self.surfaces.position_of(surface.id), COL_HEIGHT)
        self.dataChanged.emit()

    def _del_row(self) -> None:
        """Delete the selected row, or the last row if none is selected."""
        row = self.table.currentRow()
        if row < 0:
            row = self.table.rowCount() - 1

        surface_id = self.surface_id_at(row)
        if surface_id is None:
            return

        try:
            self.project.remove_surface(self.kind, surface_id)
        except LastSurfaceError as e:
            logger.warning(str(e))
            return

        self.load_from_state()
        self.dataChanged.emit()
