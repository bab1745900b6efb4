# PyQt5 imports
from PyQt5.QtWidgets import (
    QFrame, QVBoxLayout, QHBoxLayout, QLabel, QScrollArea, QPushButton
)
from PyQt5.QtCore import pyqtSignal

from .property_sidebar_widgets import LayerListWidget
from models.layer_store import CHANGE_LAYERS, CHANGE_CHECKED
from services.export_service import FORMAT_JSON, FORMAT_CSV


class LayerPanel(QFrame):
	"""Left sidebar: import button, layer list, export-check controls and export buttons"""

	import_requested = pyqtSignal()
	export_requested = pyqtSignal(str)  # FORMAT_JSON / FORMAT_CSV

	def __init__(self, store, parent=None):
		super().__init__(parent)
		self.setMinimumWidth(240)
		self.setMaximumWidth(380)
		self.store = store
		self._setup_ui()
		self.store.add_listener(self._on_store_changed)
		self.refresh()

	def _setup_ui(self):
		layout = QVBoxLayout(self)
		layout.setContentsMargins(12, 12, 12, 12)
		layout.setSpacing(8)

		header = QHBoxLayout()
		self.title_label = QLabel("Layers")
		self.title_label.setStyleSheet("font-size: 14px; font-weight: 700;")
		header.addWidget(self.title_label)
		header.addStretch()
		self.check_all_btn = QPushButton("Check all")
		self.check_all_btn.setToolTip("Tick every layer for export, or clear all ticks")
		self.check_all_btn.clicked.connect(self.store.toggle_all_checked)
		header.addWidget(self.check_all_btn)
		layout.addLayout(header)

		self.import_btn = QPushButton("Import Images…")
		self.import_btn.clicked.connect(self.import_requested.emit)
		layout.addWidget(self.import_btn)

		scroll = QScrollArea()
		scroll.setWidgetResizable(True)
		scroll.setFrameShape(QFrame.NoFrame)
		self.layer_list_widget = LayerListWidget(self.store)
		scroll.setWidget(self.layer_list_widget)
		layout.addWidget(scroll, stretch=1)

		self.export_hint = QLabel()
		self.export_hint.setWordWrap(True)
		self.export_hint.setStyleSheet("color: #64748b; font-size: 11px;")
		layout.addWidget(self.export_hint)

		export_row = QHBoxLayout()
		self.export_json_btn = QPushButton("Export JSON")
		self.export_json_btn.clicked.connect(lambda: self.export_requested.emit(FORMAT_JSON))
		export_row.addWidget(self.export_json_btn)
		self.export_csv_btn = QPushButton("Export CSV")
		self.export_csv_btn.clicked.connect(lambda: self.export_requested.emit(FORMAT_CSV))
		export_row.addWidget(self.export_csv_btn)
		layout.addLayout(export_row)

	def _on_store_changed(self, kind):
		if kind in (CHANGE_LAYERS, CHANGE_CHECKED):
			self.refresh()

	def refresh(self):
		count = self.store.get_layer_count()
		checked = len(self.store.checked_ids)
		self.title_label.setText(f"Layers ({count})" if count else "Layers")

		has_layers = count > 0
		self.export_json_btn.setEnabled(has_layers)
		self.export_csv_btn.setEnabled(has_layers)
		self.check_all_btn.setEnabled(has_layers)
		self.check_all_btn.setText("Uncheck all" if has_layers and checked == count else "Check all")

		if not has_layers:
			self.export_hint.setText("")
		elif checked:
			self.export_hint.setText(f"Exporting {checked} checked layer(s)")
		else:
			self.export_hint.setText("No layers checked: exporting all layers")
