"""Zoom toolbar widget with zoom and view controls."""

from PyQt5.QtWidgets import QWidget, QHBoxLayout, QToolButton, QLabel
from PyQt5.QtCore import pyqtSignal, Qt


class ZoomToolbar(QWidget):
    """Toolbar with zoom in/out, zoom display, reset, fit, guides and info buttons"""
    
    zoom_in_requested = pyqtSignal()
    zoom_out_requested = pyqtSignal()
    reset_requested = pyqtSignal()
    fit_requested = pyqtSignal()
    guides_toggled = pyqtSignal(bool)
    info_requested = pyqtSignal()
    
    def __init__(self, parent=None, show_guides=True):
        super().__init__(parent)
        
        layout = QHBoxLayout()
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(4)
        
        # Zoom out button
        self.zoom_out_btn = QToolButton()
        self.zoom_out_btn.setText("−")
        self.zoom_out_btn.setToolTip("Zoom Out (Ctrl+-)")
        self.zoom_out_btn.clicked.connect(self.zoom_out_requested.emit)
        layout.addWidget(self.zoom_out_btn)
        
        # Zoom level display (click to reset)
        self.zoom_display = QToolButton()
        self.zoom_display.setText("100%")
        self.zoom_display.setMinimumWidth(60)
        self.zoom_display.setToolTip("Reset View (Ctrl+0)")
        self.zoom_display.clicked.connect(self.reset_requested.emit)
        layout.addWidget(self.zoom_display)
        
        # Zoom in button
        self.zoom_in_btn = QToolButton()
        self.zoom_in_btn.setText("+")
        self.zoom_in_btn.setToolTip("Zoom In (Ctrl+=)")
        self.zoom_in_btn.clicked.connect(self.zoom_in_requested.emit)
        layout.addWidget(self.zoom_in_btn)
        
        layout.addSpacing(8)
        
        self.fit_btn = QToolButton()
        self.fit_btn.setText("Fit")
        self.fit_btn.setToolTip("Fit all layers in view (Ctrl+1)")
        self.fit_btn.clicked.connect(self.fit_requested.emit)
        layout.addWidget(self.fit_btn)
        
        self.guides_btn = QToolButton()
        self.guides_btn.setText("Guides")
        self.guides_btn.setCheckable(True)
        self.guides_btn.setChecked(show_guides)
        self.guides_btn.setToolTip("Show bounding boxes and shift labels")
        self.guides_btn.toggled.connect(self.guides_toggled.emit)
        layout.addWidget(self.guides_btn)
        
        self.info_btn = QToolButton()
        self.info_btn.setText("?")
        self.info_btn.setToolTip("How it Works")
        self.info_btn.clicked.connect(self.info_requested.emit)
        layout.addWidget(self.info_btn)
        
        layout.addStretch()
        
        self.hint_label = QLabel("Space/Ctrl + drag to pan · Ctrl + wheel to zoom")
        self.hint_label.setStyleSheet("color: #94a3b8; font-size: 10px;")
        self.hint_label.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
        layout.addWidget(self.hint_label)
        
        self.setLayout(layout)
    
    def set_zoom_percent(self, percent, emit_signal=False):
        """Update the zoom display"""
        self.zoom_display.setText(f"{percent}%")
    
    def get_zoom_percent(self):
        """Get current zoom percentage from display"""
        text = self.zoom_display.text().strip().rstrip('%')
        try:
            return int(text)
        except ValueError:
            return 100
