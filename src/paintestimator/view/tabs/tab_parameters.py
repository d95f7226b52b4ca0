"""
Coverage & Cost Control Panel
Form for the coverage, cost and crew parameters.
"""
import logging
from typing import Callable, Dict, Optional, Union

from PySide6.QtWidgets import QWidget, QVBoxLayout, QGroupBox, QFormLayout, QLineEdit, QLabel, QHBoxLayout
from PySide6.QtCore import Signal

from paintestimator.config import COVERAGE_UNIT_LABEL, CURRENCY_SYMBOL
from paintestimator.model.inputs import (
    InvalidInputError, format_number, parse_optional_count, parse_optional_positive
)
from paintestimator.model.parameters import PARAMETER_LABELS, COUNT_PARAMETERS
from paintestimator.model.state import ProjectState

logger = logging.getLogger(__name__)

# Field name -> unit suffix shown next to the input
PARAMETER_SUFFIXES: Dict[str, str] = {
    "primer_coverage": COVERAGE_UNIT_LABEL,
    "paint_coverage": COVERAGE_UNIT_LABEL,
    "coat_count": "",
    "primer_unit_cost": f"{CURRENCY_SYMBOL} / can",
    "paint_unit_cost": f"{CURRENCY_SYMBOL} / can",
    "worker_count": "",
}

GROUPS = {
    "Coverage": ("primer_coverage", "paint_coverage", "coat_count"),
    "Cost": ("primer_unit_cost", "paint_unit_cost"),
    "Crew": ("worker_count",),
}


class ParametersControlPanel(QWidget):
    data_changed = Signal()

    def __init__(self, project_state: ProjectState) -> None:
        super().__init__()
        self.project = project_state
        self.edits: Dict[str, QLineEdit] = {}

        layout = QVBoxLayout(self)

        for title, names in GROUPS.items():
            grp = QGroupBox(title)
            form = QFormLayout(grp)
            for name in names:
                form.addRow(f"{PARAMETER_LABELS[name]}:", self._create_field(name))
            layout.addWidget(grp)

        layout.addStretch()
        self.load_from_state()

    def _create_field(self, name: str) -> QWidget:
        edit = QLineEdit()
        edit.setPlaceholderText("required")
        edit.editingFinished.connect(lambda n=name: self._on_editing_finished(n))
        self.edits[name] = edit

        suffix = PARAMETER_SUFFIXES.get(name)
        if not suffix:
            return edit

        row = QWidget()
        h = QHBoxLayout(row)
        h.setContentsMargins(0, 0, 0, 0)
        h.addWidget(edit)
        h.addWidget(QLabel(suffix))
        return row

    def _parser_for(self, name: str) -> Callable[[str], Optional[Union[float, int]]]:
        return parse_optional_count if name in COUNT_PARAMETERS else parse_optional_positive

    def _on_editing_finished(self, name: str) -> None:
        edit = self.edits[name]
        try:
            value = self._parser_for(name)(edit.text())
        except InvalidInputError as e:
            logger.debug(f"{PARAMETER_LABELS[name]}: {e}")
            # Keep the previous value
            edit.blockSignals(True)
            edit.setText(format_number(getattr(self.project.parameters, name)))
            edit.blockSignals(False)
            return

        if value == getattr(self.project.parameters, name):
            return
        self.project.set_parameter(name, value)
        self.data_changed.emit()

    def load_from_state(self) -> None:
        for name, edit in self.edits.items():
            edit.blockSignals(True)
            edit.setText(format_number(getattr(self.project.parameters, name)))
            edit.blockSignals(False)

    def commit_all(self) -> None:
        """Apply text that is still being edited (e.g. before a keyboard shortcut)."""
        for name in self.edits:
            self._on_editing_finished(name)
