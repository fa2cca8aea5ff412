import logging
import sys
from PySide6.QtWidgets import QApplication
from BackEnd.core.logging_setup import configure_logging
from BackEnd.services.tracker_service import TrackerService
from FrontEnd.ui_main import MainWindow

def main():
    configure_logging()
    logging.getLogger(__name__).info("Starting Daily Study Tracker")
    app = QApplication(sys.argv)
    win = MainWindow(TrackerService())
    win.show()
    sys.exit(app.exec())

if __name__ == "__main__":
    main()
