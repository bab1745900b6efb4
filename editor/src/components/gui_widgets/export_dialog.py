"""Export preview dialog with copy and save."""

import os

from PyQt5.QtWidgets import (QDialog, QVBoxLayout, QHBoxLayout, QPlainTextEdit,
                             QPushButton, QLabel, QApplication, QFileDialog)
from PyQt5.QtGui import QFontDatabase

from services.export_service import save_export_to_file, FORMAT_JSON
from utils.logger import loggerRaise


class ExportDialog(QDialog):
    """Shows exported text and lets the user copy it or save it to a file"""

    def __init__(self, content, filename, fmt, parent=None):
        super().__init__(parent)
        self.content = content
        self.filename = filename
        self.fmt = fmt
        self.saved_path = None
        self.setWindowTitle(f"Export {fmt.upper()}")
        self.setMinimumWidth(560)
        self.setMinimumHeight(420)

        layout = QVBoxLayout()

        self.preview = QPlainTextEdit()
        self.preview.setReadOnly(True)
        self.preview.setFont(QFontDatabase.systemFont(QFontDatabase.FixedFont))
        self.preview.setPlainText(content)
        layout.addWidget(self.preview)

        self.status_label = QLabel(filename)
        self.status_label.setStyleSheet("color: #64748b;")
        layout.addWidget(self.status_label)

        buttons = QHBoxLayout()
        self.copy_btn = QPushButton("Copy to Clipboard")
        self.copy_btn.clicked.connect(self.copy_to_clipboard)
        buttons.addWidget(self.copy_btn)

        self.save_btn = QPushButton("Save As…")
        self.save_btn.clicked.connect(self.save_as)
        buttons.addWidget(self.save_btn)

        buttons.addStretch()
        close_btn = QPushButton("Close")
        close_btn.clicked.connect(self.accept)
        buttons.addWidget(close_btn)
        layout.addLayout(buttons)

        self.setLayout(layout)

    def copy_to_clipboard(self):
        QApplication.clipboard().setText(self.content)
        self.status_label.setText("Copied to clipboard")

    def save_as(self):
        """Ask for a path (defaulting to the standard export name) and write the file"""
        if self.fmt == FORMAT_JSON:
            file_filter = "JSON Files (*.json);;All Files (*)"
        else:
            file_filter = "CSV Files (*.csv);;All Files (*)"
        path, _ = QFileDialog.getSaveFileName(self, "Save Export", self.filename, file_filter)
        if not path:
            return
        self.write_to(path)

    def write_to(self, path):
        try:
            save_export_to_file(self.content, path)
        except Exception as e:
            loggerRaise(e, f"Failed to save export: {str(e)}", "Export Error")
        self.saved_path = path
        self.status_label.setText(f"Saved to {os.path.basename(path)}")
