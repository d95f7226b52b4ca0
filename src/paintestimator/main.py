"""
Application Initialization
==========================
This module constructs the Model-View architecture and starts the Qt Event
Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Instantiates the Data Model (ProjectState).
2. Instantiates the Main Window (View).
3. Passes the Model into the View so they can communicate.
"""
import logging
import sys

from paintestimator.application import create_app
from paintestimator.logging_config import setup_logging
from paintestimator.model.state import ProjectState
from paintestimator.view.main_window import MainWindow


def main() -> None:
    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=logging.INFO)

    # 2. Create the Qt Application
    app = create_app()

    # 3. Initialize the Data Model
    project = ProjectState()

    # 4. Initialize the Main Window, passing the model
    window = MainWindow(project)
    window.show()

    # 5. Start Event Loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
