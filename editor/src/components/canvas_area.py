# PyQt5 imports
from PyQt5.QtWidgets import QFrame, QVBoxLayout

# Local component imports
from .canvas_widget import StitchCanvas
from .gui_widgets import ZoomToolbar, InfoDialog


class CanvasArea(QFrame):
    """Center area: view toolbar above the stitching canvas"""

    def __init__(self, store, viewport, parent=None):
        super().__init__(parent)
        self.setMinimumWidth(400)
        self.store = store
        self.viewport = viewport
        self._setup_ui()

    def _setup_ui(self):
        """Setup the canvas area UI"""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(6)

        self.canvas_widget = StitchCanvas(self.store, self.viewport, self)
        self.zoom_toolbar = ZoomToolbar(self, show_guides=self.canvas_widget.show_guides)
        self.canvas_widget.zoom_toolbar = self.zoom_toolbar
        self.zoom_toolbar.set_zoom_percent(self.canvas_widget.get_zoom_percent())

        # Toolbar -> canvas
        self.zoom_toolbar.zoom_in_requested.connect(self.canvas_widget.zoom_in)
        self.zoom_toolbar.zoom_out_requested.connect(self.canvas_widget.zoom_out)
        self.zoom_toolbar.reset_requested.connect(self.canvas_widget.zoom_reset)
        self.zoom_toolbar.fit_requested.connect(self.canvas_widget.fit_to_view)
        self.zoom_toolbar.guides_toggled.connect(self.canvas_widget.set_show_guides)
        self.zoom_toolbar.info_requested.connect(self.show_info)

        layout.addWidget(self.zoom_toolbar)
        layout.addWidget(self.canvas_widget, stretch=1)

    def set_show_guides(self, show):
        """Keep toolbar button and canvas in sync (menu toggles)"""
        self.zoom_toolbar.guides_btn.setChecked(show)
        self.canvas_widget.set_show_guides(show)

    def show_info(self):
        dialog = InfoDialog(self)
        dialog.exec_()
