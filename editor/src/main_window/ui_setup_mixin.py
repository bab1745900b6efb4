"""UI setup for StitchCraftEditor"""

from PyQt5.QtWidgets import QWidget, QHBoxLayout, QSplitter, QLabel
from PyQt5.QtCore import Qt

from components.canvas_area import CanvasArea
from components.layer_panel import LayerPanel
from components.property_sidebar import PropertySidebar


class UISetupMixin:
    """UI initialization and component wiring"""

    def setup_ui(self):
        """Initialize and wire up all UI components"""
        self._create_menu_bar()

        # Create central widget with splitter
        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        main_layout = QHBoxLayout(central_widget)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        splitter = QSplitter(Qt.Horizontal)

        # Left sidebar - layer list and export
        self.left_sidebar = LayerPanel(self.store, self)
        self.left_sidebar.import_requested.connect(self.file_actions.import_images)
        self.left_sidebar.export_requested.connect(self.file_actions.export)
        splitter.addWidget(self.left_sidebar)

        # Center canvas area
        self.canvas_area = CanvasArea(self.store, self.viewport, self)
        self.canvas_area.canvas_widget.files_dropped.connect(self.file_actions.import_paths)
        self.canvas_area.zoom_toolbar.guides_toggled.connect(self._on_toolbar_guides_toggled)
        splitter.addWidget(self.canvas_area)

        # Right properties sidebar
        self.right_sidebar = PropertySidebar(self.store, self, angle_step=self.angle_step)
        self.right_sidebar.angle_step_changed.connect(self.set_angle_step)
        splitter.addWidget(self.right_sidebar)

        # Set initial sizes (left: 280px, center: flex, right: 280px)
        splitter.setSizes([280, 720, 280])
        splitter.setCollapsible(0, False)
        splitter.setCollapsible(1, False)
        splitter.setCollapsible(2, False)

        main_layout.addWidget(splitter)

        self.left_sidebar.setVisible(not self.left_sidebar_collapsed)
        self.right_sidebar.setVisible(not self.right_sidebar_collapsed)

        # Status bar with left and right sections
        self.status_left = QLabel("Ready")
        self.status_right = QLabel("")
        self.statusBar().addWidget(self.status_left, 1)
        self.statusBar().addPermanentWidget(self.status_right)

        self.statusBar().setStyleSheet("QStatusBar { border-top: 1px solid rgba(15, 23, 42, 40); padding: 4px; }")

        self.store.add_listener(self._on_store_changed)
        self._on_store_changed(None)
