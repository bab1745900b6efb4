import sys
import os
import logging

# Configure logging
logging.basicConfig(
    level=logging.WARNING,  # Only show warnings and errors
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout)  # Output to console
    ]
)

# Add editor/src to path so imports work when running directly
if __name__ == "__main__":
    current_dir = os.path.dirname(os.path.abspath(__file__))
    if current_dir not in sys.path:
        sys.path.insert(0, current_dir)

# PyQt5 import/s
from PyQt5 import QtWidgets
from PyQt5.QtWidgets import QMainWindow, QApplication
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QPalette, QColor

# Model imports
from models.layer_store import LayerStore
from models.viewport import Viewport

# Utility imports
from utils.history_manager import HistoryManager
from utils.logger import set_main_window

# Service imports
from services.import_worker import ImageImporter
from constants import MAX_HISTORY_ENTRIES, CONFIG_FILE_NAME

# Action imports
from actions.file_actions import FileActions

# Mixin imports
from main_window import MenuMixin, EventMixin, ConfigMixin, HistoryMixin, UISetupMixin
from main_window.config_mixin import default_config_dir


class StitchCraftEditor(MenuMixin, EventMixin, ConfigMixin, HistoryMixin, UISetupMixin, QMainWindow):
    def __init__(self, config_dir=None):
        super().__init__()
        self.setWindowTitle("StitchCraft")
        self.resize(1280, 720)
        self.setMinimumSize(960, 600)

        # Preferences
        self.config_dir = config_dir or default_config_dir()
        self.config_file = os.path.join(self.config_dir, CONFIG_FILE_NAME)
        self._load_config()

        # Layer store (single source of truth for layers, selection and checks)
        self.store = LayerStore(HistoryManager(max_history=MAX_HISTORY_ENTRIES))
        self.store.history.add_listener(self._on_history_changed)

        self.viewport = Viewport()
        self.importer = ImageImporter(self)

        # Initialize global logger with main window reference
        set_main_window(self)

        # Initialize action handlers (composition pattern)
        self.file_actions = FileActions(self)

        self.setup_ui()

        # Install event filter on application to catch canvas keys globally
        QApplication.instance().installEventFilter(self)


def apply_light_palette(app):
    """Fusion style with a cool light palette matching the canvas colours"""
    app.setStyle("Fusion")

    palette = QPalette()
    palette.setColor(QPalette.Window, QColor("#f1f5f9"))
    palette.setColor(QPalette.WindowText, QColor("#0f172a"))
    palette.setColor(QPalette.Base, Qt.white)
    palette.setColor(QPalette.AlternateBase, QColor("#e2e8f0"))
    palette.setColor(QPalette.Text, QColor("#0f172a"))
    palette.setColor(QPalette.Button, QColor("#e2e8f0"))
    palette.setColor(QPalette.ButtonText, QColor("#0f172a"))
    palette.setColor(QPalette.Highlight, QColor("#0ea5e9"))
    palette.setColor(QPalette.HighlightedText, Qt.white)
    palette.setColor(QPalette.Link, QColor("#0284c7"))
    app.setPalette(palette)


def main():
    """Main entry point for the StitchCraft editor"""
    app = QtWidgets.QApplication(sys.argv)
    apply_light_palette(app)

    window = StitchCraftEditor()
    window.show()
    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
