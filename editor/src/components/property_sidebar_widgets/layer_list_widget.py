"""
StitchCraft - Layer List Widget

Handles layer display, selection, export checkboxes, visibility toggles
and drag-drop reordering. Rows are listed top of stack first.
"""

from PyQt5.QtWidgets import (QWidget, QVBoxLayout, QPushButton, QLabel,
                             QHBoxLayout, QApplication, QCheckBox)
from PyQt5.QtCore import Qt, QMimeData, QByteArray
from PyQt5.QtGui import QPixmap, QDrag

from components.canvas_widgets.canvas_rendering_mixin import pil_to_qimage
from models.layer_store import CHANGE_LAYERS, CHANGE_SELECTION, CHANGE_CHECKED

LAYER_MIME_TYPE = 'application/x-stitchcraft-layer-id'
THUMBNAIL_SIZE = 36


class LayerListWidget(QWidget):
	"""Widget for displaying and managing the layer list with drag-drop support"""

	def __init__(self, store, parent=None):
		super().__init__(parent)
		self.store = store
		self.layer_buttons = []  # List of (layer_id, button) tuples
		self.drag_start_id = None
		self.drag_start_pos = None
		self.thumbnail_cache = {}  # id(image_ref) -> (image_ref, QPixmap)
		self._signature = None

		self._setup_ui()
		self.store.add_listener(self._on_store_changed)
		self.rebuild()

	def _setup_ui(self):
		"""Setup the layer list UI"""
		main_layout = QVBoxLayout(self)
		main_layout.setContentsMargins(0, 0, 0, 0)
		main_layout.setSpacing(2)

		# Shown instead of rows when the store is empty
		self.empty_label = QLabel("No layers yet")
		self.empty_label.setAlignment(Qt.AlignCenter)
		self.empty_label.setStyleSheet("color: #94a3b8; padding: 16px;")
		main_layout.addWidget(self.empty_label)

		# Create container for layers
		layers_container = QWidget()
		self.layers_layout = QVBoxLayout(layers_container)
		self.layers_layout.setContentsMargins(0, 0, 0, 0)
		self.layers_layout.setSpacing(2)
		self.layers_layout.addStretch()
		main_layout.addWidget(layers_container)

		# Enable drag and drop
		self.setAcceptDrops(True)

	def _on_store_changed(self, kind):
		if kind in (CHANGE_LAYERS, CHANGE_CHECKED):
			self.rebuild()
		elif kind == CHANGE_SELECTION:
			self.update_selection_visuals()

	def _current_signature(self):
		# Drag moves only change x/y, which the rows do not show
		return (tuple((layer.id, layer.name, layer.visible) for layer in self.store.layers),
		        self.store.checked_ids)

	def rebuild(self, force=False):
		"""Rebuild the rows from the store if anything they show has changed"""
		signature = self._current_signature()
		if signature == self._signature and not force:
			return
		self._signature = signature

		for layer_id, btn in self.layer_buttons:
			btn.deleteLater()
		self.layer_buttons.clear()

		# Clear all widgets from layout
		while self.layers_layout.count() > 0:
			item = self.layers_layout.takeAt(0)
			if item.widget():
				item.widget().deleteLater()

		layers = self.store.layers
		self.empty_label.setVisible(not layers)

		# Top of stack first
		for layer in reversed(layers):
			layer_btn = self._create_layer_button(layer)
			self.layers_layout.addWidget(layer_btn)
			self.layer_buttons.append((layer.id, layer_btn))

		# Re-add stretch at the end
		self.layers_layout.addStretch()
		self._prune_thumbnails()
		self.update_selection_visuals()

	def _create_layer_button(self, layer):
		"""Create a row for one layer"""
		layer_id = layer.id
		layer_btn = QPushButton()
		layer_btn.setCheckable(True)
		layer_btn.setFixedHeight(48)
		layer_btn.setProperty('layer_id', layer_id)
		layer_btn.clicked.connect(lambda checked, u=layer_id: self._on_row_clicked(u))

		# Enable drag functionality
		layer_btn.mousePressEvent = lambda event, u=layer_id, btn=layer_btn: self._layer_mouse_press(event, u, btn)
		layer_btn.mouseMoveEvent = lambda event, u=layer_id, btn=layer_btn: self._layer_mouse_move(event, u, btn)

		btn_layout = QHBoxLayout(layer_btn)
		btn_layout.setContentsMargins(5, 4, 5, 4)
		btn_layout.setSpacing(6)

		# Export checkbox
		check = QCheckBox()
		check.setToolTip("Include in export")
		check.setChecked(self.store.is_checked(layer_id))
		check.clicked.connect(lambda checked, u=layer_id: self.store.toggle_checked(u))
		btn_layout.addWidget(check)

		# Visibility toggle
		visibility_btn = QPushButton("👁" if layer.visible else "🚫")
		visibility_btn.setFixedSize(22, 22)
		visibility_btn.setToolTip("Toggle Visibility")
		visibility_btn.setStyleSheet("""
			QPushButton {
				border: 1px solid rgba(0, 0, 0, 30);
				border-radius: 3px;
				background-color: transparent;
			}
			QPushButton:hover {
				background-color: rgba(0, 0, 0, 15);
			}
		""")
		visibility_btn.clicked.connect(lambda checked, u=layer_id: self.store.toggle_visibility(u))
		btn_layout.addWidget(visibility_btn)

		# Thumbnail
		icon_label = QLabel()
		icon_label.setFixedSize(THUMBNAIL_SIZE, THUMBNAIL_SIZE)
		icon_label.setAlignment(Qt.AlignCenter)
		icon_label.setStyleSheet("border: 1px solid rgba(0, 0, 0, 25); border-radius: 3px;")
		thumbnail = self._get_thumbnail(layer.image_ref)
		if thumbnail is not None and not thumbnail.isNull():
			icon_label.setPixmap(thumbnail)
		btn_layout.addWidget(icon_label)

		# Name and intrinsic size
		name_widget = QWidget()
		name_widget.setStyleSheet("border: none;")
		name_layout = QVBoxLayout(name_widget)
		name_layout.setContentsMargins(0, 0, 0, 0)
		name_layout.setSpacing(0)

		name_label = QLabel(layer.name)
		name_label.setStyleSheet("border: none; font-size: 11px; font-weight: 600;")
		name_label.setToolTip(layer.name)
		name_layout.addWidget(name_label)

		size_label = QLabel(f"{int(layer.width)} × {int(layer.height)}")
		size_label.setStyleSheet("border: none; font-size: 10px; color: #64748b;")
		name_layout.addWidget(size_label)

		if not layer.visible:
			name_label.setStyleSheet("border: none; font-size: 11px; font-weight: 600; color: #94a3b8;")

		btn_layout.addWidget(name_widget, stretch=1)

		layer_btn.setStyleSheet("""
			QPushButton {
				text-align: left;
				border: 1px solid rgba(0, 0, 0, 20);
				border-radius: 6px;
				background-color: rgba(255, 255, 255, 120);
			}
			QPushButton:hover {
				background-color: rgba(255, 255, 255, 200);
			}
			QPushButton:checked {
				border: 2px solid #0ea5e9;
				background-color: rgba(14, 165, 233, 40);
			}
		""")
		return layer_btn

	# ========================================
	# Thumbnails
	# ========================================

	def _get_thumbnail(self, image_ref):
		if image_ref is None:
			return None
		key = id(image_ref)
		cached = self.thumbnail_cache.get(key)
		if cached is not None and cached[0] is image_ref:
			return cached[1]
		pixmap = QPixmap.fromImage(pil_to_qimage(image_ref)).scaled(
			THUMBNAIL_SIZE, THUMBNAIL_SIZE, Qt.KeepAspectRatio, Qt.SmoothTransformation)
		self.thumbnail_cache[key] = (image_ref, pixmap)
		return pixmap

	def _prune_thumbnails(self):
		live = {id(layer.image_ref) for layer in self.store.layers}
		for key in list(self.thumbnail_cache):
			if key not in live:
				del self.thumbnail_cache[key]

	# ========================================
	# Selection
	# ========================================

	def _on_row_clicked(self, layer_id):
		modifiers = QApplication.keyboardModifiers()
		additive = bool(modifiers & (Qt.ShiftModifier | Qt.ControlModifier | Qt.MetaModifier))
		self.store.toggle_selection(layer_id, additive=additive)
		# Store may not notify if nothing changed; keep button state in sync anyway
		self.update_selection_visuals()

	def update_selection_visuals(self):
		"""Update which layer buttons are checked"""
		for layer_id, btn in self.layer_buttons:
			btn.setChecked(self.store.is_selected(layer_id))

	# ========================================
	# Drag and drop reordering
	# ========================================

	def _layer_mouse_press(self, event, layer_id, button):
		"""Handle mouse press on layer button for drag start"""
		if event.button() == Qt.LeftButton:
			self.drag_start_id = layer_id
			self.drag_start_pos = event.pos()
		QPushButton.mousePressEvent(button, event)

	def _layer_mouse_move(self, event, layer_id, button):
		"""Handle mouse move on layer button for drag operation"""
		if not (event.buttons() & Qt.LeftButton):
			return

		if self.drag_start_id is None:
			return

		# Check if dragged far enough
		if (event.pos() - self.drag_start_pos).manhattanLength() < QApplication.startDragDistance():
			return

		drag = QDrag(button)
		mime_data = QMimeData()
		mime_data.setData(LAYER_MIME_TYPE, QByteArray(layer_id.encode('utf-8')))
		drag.setMimeData(mime_data)
		drag.setPixmap(button.grab())

		# Release never reaches the button once the drag starts
		button.setDown(False)
		drag.exec_(Qt.MoveAction)
		self.drag_start_id = None

	def _row_id_at(self, pos):
		"""Layer id of the row under pos (widget coordinates), or None"""
		widget = self.childAt(pos)
		while widget is not None and widget is not self:
			layer_id = widget.property('layer_id')
			if layer_id:
				return layer_id
			widget = widget.parentWidget()
		return None

	def dragEnterEvent(self, event):
		"""Accept layer drags"""
		if event.mimeData().hasFormat(LAYER_MIME_TYPE):
			event.acceptProposedAction()
		else:
			event.ignore()

	def dragMoveEvent(self, event):
		if event.mimeData().hasFormat(LAYER_MIME_TYPE):
			event.acceptProposedAction()
		else:
			event.ignore()

	def dropEvent(self, event):
		"""Move the dragged layer to the position of the row it was dropped on"""
		if not event.mimeData().hasFormat(LAYER_MIME_TYPE):
			event.ignore()
			return
		dragged_id = bytes(event.mimeData().data(LAYER_MIME_TYPE)).decode('utf-8')
		target_id = self._row_id_at(event.pos())
		event.acceptProposedAction()

		if target_id is None or target_id == dragged_id:
			return
		self.store.reorder(self.store.index_of(dragged_id), self.store.index_of(target_id))
