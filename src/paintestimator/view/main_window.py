"""
Main Application Window
=======================
The primary GUI container that holds the Menu Bar and the Control Panels.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It connects global actions (like File -> New) and panel signals
   to the shared ProjectState.
"""
from PySide6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QTabBar, QStackedWidget
from PySide6.QtGui import QAction

from paintestimator.config import VISIBLE_APP_NAME
from paintestimator.model.state import ProjectState

# Import Control Panels
from paintestimator.view.tabs.tab_surfaces import SurfacesControlPanel
from paintestimator.view.tabs.tab_parameters import ParametersControlPanel
from paintestimator.view.tabs.tab_results import ResultsControlPanel

TAB_RESULTS = 2


class MainWindow(QMainWindow):
    def __init__(self, project_state: ProjectState) -> None:
        super().__init__()
        self.project: ProjectState = project_state

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(800, 900)

        # --- MAIN CONTAINER ---
        main_widget = QWidget()
        self.setCentralWidget(main_widget)

        main_layout = QVBoxLayout(main_widget)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        # --- 1. TOP TAB BAR ---
        self.tab_bar = QTabBar()
        self.tab_bar.setDrawBase(True)
        self.tab_bar.setExpanding(True)

        self.tab_bar.addTab("1. Surfaces")
        self.tab_bar.addTab("2. Coverage & Cost")
        self.tab_bar.addTab("3. Results")

        self.tab_bar.setStyleSheet("""
                    QTabBar::tab { height: 35px; min-width: 100px; }
                    QTabBar::tab:selected { font-weight: bold; }
                """)

        main_layout.addWidget(self.tab_bar)

        # --- 2. CONTROL PANELS (Stacked) ---
        self.controls_stack = QStackedWidget()

        self.surfaces_panel = SurfacesControlPanel(self.project)
        self.params_panel = ParametersControlPanel(self.project)
        self.results_panel = ResultsControlPanel(self.project)

        # Order must match Tab Bar order
        self.controls_stack.addWidget(self.surfaces_panel)  # Index 0
        self.controls_stack.addWidget(self.params_panel)  # Index 1
        self.controls_stack.addWidget(self.results_panel)  # Index 2

        main_layout.addWidget(self.controls_stack)

        # --- SIGNAL CONNECTIONS ---
        self.tab_bar.currentChanged.connect(self.controls_stack.setCurrentIndex)

        # Any edit invalidates the shown result
        self.surfaces_panel.data_changed.connect(self.on_data_changed)
        self.params_panel.data_changed.connect(self.on_data_changed)

        self.results_panel.results_generated.connect(self.on_results_generated)

        # --- ACTIONS & MENUS ---
        self._create_actions()
        self._create_menus()

    def _create_actions(self) -> None:
        # File Actions
        self.act_new = QAction("New Estimate", self)
        self.act_new.setShortcut("Ctrl+N")
        self.act_new.triggered.connect(self.on_file_new)

        self.act_exit = QAction("Exit", self)
        self.act_exit.triggered.connect(self.close)

        # Estimate Actions
        self.act_calculate = QAction("Calculate", self)
        self.act_calculate.setShortcut("Ctrl+Return")
        self.act_calculate.triggered.connect(self.on_calculate)

    def _create_menus(self) -> None:
        menu_bar = self.menuBar()

        file_menu = menu_bar.addMenu("&File")
        file_menu.addAction(self.act_new)
        file_menu.addSeparator()
        file_menu.addAction(self.act_exit)

        estimate_menu = menu_bar.addMenu("&Estimate")
        estimate_menu.addAction(self.act_calculate)

    # --- SLOTS ---

    def on_data_changed(self) -> None:
        """Slot called when surfaces or parameters change."""
        self.results_panel.reset_status()
        self.statusBar().clearMessage()

    def on_calculate(self) -> None:
        self.params_panel.commit_all()
        self.tab_bar.setCurrentIndex(TAB_RESULTS)
        self.results_panel.on_run_clicked()

    def on_results_generated(self) -> None:
        result = self.project.result
        if result is not None and result.paintable_area < 0:
            self.statusBar().showMessage("Warning: doors and windows exceed the wall area.")
        else:
            self.statusBar().showMessage("Estimate updated.", 5000)

    def on_file_new(self) -> None:
        self.project.reset()
        self.refresh_ui_from_state()

    def refresh_ui_from_state(self) -> None:
        """
        After a reset the State is replaced, but the Widgets are old.
        We need to force the Widgets to read from the State again.
        """
        self.surfaces_panel.blockSignals(True)
        try:
            self.surfaces_panel.load_from_state()
        finally:
            self.surfaces_panel.blockSignals(False)

        self.params_panel.blockSignals(True)
        try:
            self.params_panel.load_from_state()
        finally:
            self.params_panel.blockSignals(False)

        self.results_panel.load_from_state()
        self.statusBar().clearMessage()
