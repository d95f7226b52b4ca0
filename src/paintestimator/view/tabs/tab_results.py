import logging
from typing import Dict

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QLabel, QPushButton, QGroupBox, QMessageBox, QApplication
)
from PySide6.QtCore import Qt, Signal

from paintestimator.model.parameters import MissingParametersError
from paintestimator.model.report import format_result, format_result_text
from paintestimator.model.state import ProjectState
from paintestimator.view.widgets.breakdown_plot import BreakdownPlotWidget

logger = logging.getLogger(__name__)

RESULT_KEYS = ("paintable_area", "total_cost", "total_hours_needed", "primer", "paint")


class ResultsControlPanel(QWidget):
    results_generated = Signal()

    def __init__(self, project_state: ProjectState) -> None:
        super().__init__()
        self.project = project_state

        layout = QVBoxLayout(self)

        # --- Calculation ---
        grp_calc = QGroupBox("Calculation")
        l_calc = QVBoxLayout(grp_calc)

        self.btn_run = QPushButton("Calculate")
        self.btn_run.setMinimumHeight(40)
        self.btn_run.clicked.connect(self.on_run_clicked)
        l_calc.addWidget(self.btn_run)

        self.btn_copy = QPushButton("Copy Results")
        self.btn_copy.clicked.connect(self.on_copy_clicked)
        self.btn_copy.setEnabled(False)
        l_calc.addWidget(self.btn_copy)

        layout.addWidget(grp_calc)

        # --- Results ---
        grp_res = QGroupBox("Results:")
        l_res = QVBoxLayout(grp_res)
        self.result_labels: Dict[str, QLabel] = {}
        for key in RESULT_KEYS:
            lbl = QLabel("-")
            lbl.setWordWrap(True)
            lbl.setTextInteractionFlags(Qt.TextSelectableByMouse)
            l_res.addWidget(lbl)
            self.result_labels[key] = lbl
        layout.addWidget(grp_res)

        # --- Breakdown ---
        self.plot = BreakdownPlotWidget()
        layout.addWidget(self.plot, 1)

        self.reset_status()

    def on_run_clicked(self) -> None:
        try:
            self.project.calculate()
        except MissingParametersError as e:
            QMessageBox.warning(self, "Missing Values", str(e))
            self.reset_status()
            return

        self.load_from_state()
        self.results_generated.emit()

    def on_copy_clicked(self) -> None:
        if self.project.result is None:
            return
        QApplication.clipboard().setText(format_result_text(self.project.result))

    def load_from_state(self) -> None:
        """Show the result stored in ProjectState, or clear the panel if there is none."""
        result = self.project.result
        if result is None:
            self.reset_status()
            return

        for line in format_result(result):
            self.result_labels[line.key].setText(line.text)
        self.btn_copy.setEnabled(True)

        self.plot.update_plot(
            self.project.area_breakdown(), result, self.project.parameters.validate()
        )

    def reset_status(self) -> None:
        for lbl in self.result_labels.values():
            lbl.setText("-")
        self.btn_copy.setEnabled(False)
        self.plot.clear()
