"""
Surfaces Control Panel
"""
from typing import Dict

from PySide6.QtWidgets import QWidget, QVBoxLayout, QScrollArea, QLabel
from PySide6.QtCore import Signal

from paintestimator.model.state import ProjectState
from paintestimator.model.surfaces import SurfaceKind
from paintestimator.view.widgets.surface_table import SurfaceTableWidget


class SurfacesControlPanel(QWidget):
    data_changed = Signal()

    def __init__(self, project_state: ProjectState) -> None:
        super().__init__()
        self.project = project_state

        outer = QVBoxLayout(self)
        outer.setContentsMargins(0, 0, 0, 0)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        outer.addWidget(scroll)

        content = QWidget()
        layout = QVBoxLayout(content)

        info = QLabel("Enter the height and width of every wall, door and window.")
        info.setWordWrap(True)
        layout.addWidget(info)

        self.tables: Dict[SurfaceKind, SurfaceTableWidget] = {}
        for kind in SurfaceKind:
            table = SurfaceTableWidget(self.project, kind)
            table.dataChanged.connect(self.data_changed.emit)
            layout.addWidget(table)
            self.tables[kind] = table

        layout.addStretch()
        scroll.setWidget(content)

    def load_from_state(self) -> None:
        for table in self.tables.values():
            table.load_from_state()
