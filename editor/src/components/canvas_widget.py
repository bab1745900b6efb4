# PyQt5 imports
from PyQt5.QtWidgets import QWidget, QSizePolicy
from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QPainter

# Canvas mixins
from components.canvas_widgets.canvas_zoom_pan_mixin import CanvasZoomPanMixin
from components.canvas_widgets.canvas_coordinate_mixin import CanvasCoordinateMixin
from components.canvas_widgets.canvas_rendering_mixin import CanvasRenderingMixin

import logging

from components.interaction import InteractionController, IDLE, PAN, DRAG_LAYER
from models.layer_store import CHANGE_LAYERS, CHANGE_SELECTION
from services.image_import import is_supported_image

logger = logging.getLogger('Canvas')


class StitchCanvas(CanvasZoomPanMixin, CanvasCoordinateMixin, CanvasRenderingMixin, QWidget):
	"""Interactive canvas showing every layer at its placed position.

	Mouse gestures go through an InteractionController; the widget only
	converts Qt events and repaints.
	"""

	files_dropped = pyqtSignal(list)  # Paths of image files dropped on the canvas

	def __init__(self, store, viewport, parent=None, controller=None):
		super().__init__(parent)
		self.store = store
		self.viewport = viewport
		self.controller = controller or InteractionController(store, viewport)
		self.controller.on_view_changed = self.update
		self.show_guides = True
		self.zoom_toolbar = None
		self._pixmap_cache = {}

		self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
		self.setMinimumSize(300, 300)
		self.setFocusPolicy(Qt.StrongFocus)
		self.setMouseTracking(True)
		self.setAcceptDrops(True)

		self.store.add_listener(self._on_store_changed)

	def _on_store_changed(self, kind):
		if kind == CHANGE_LAYERS:
			self.prune_pixmap_cache()
		if kind in (CHANGE_LAYERS, CHANGE_SELECTION):
			self.update()

	# ========================================
	# Painting
	# ========================================

	def paintEvent(self, event):
		painter = QPainter(self)
		try:
			self.render_canvas(painter)
		finally:
			painter.end()

	# ========================================
	# Mouse
	# ========================================

	def mousePressEvent(self, event):
		# Clicking the canvas commits/abandons any property field edit
		self.setFocus(Qt.MouseFocusReason)
		self.controller.pointer_down(self.to_pointer_event(event))
		self.update_cursor()
		event.accept()

	def mouseMoveEvent(self, event):
		# Qt keeps delivering moves outside the widget while a button is held
		self.controller.pointer_move(self.to_pointer_event(event))
		self.update_cursor()

	def mouseReleaseEvent(self, event):
		self.controller.pointer_up(self.to_pointer_event(event))
		self.update_cursor()
		event.accept()

	def update_cursor(self):
		mode = self.controller.mode
		if mode == PAN:
			self.setCursor(Qt.ClosedHandCursor)
		elif mode == DRAG_LAYER:
			self.setCursor(Qt.SizeAllCursor)
		elif mode == IDLE and self.controller.space_held:
			self.setCursor(Qt.OpenHandCursor)
		else:
			self.setCursor(Qt.ArrowCursor)

	def focusOutEvent(self, event):
		if self.controller.space_held and self.controller.mode == IDLE:
			self.controller.space_held = False
			self.update_cursor()
		super().focusOutEvent(event)

	# ========================================
	# File drops
	# ========================================

	def _dropped_image_paths(self, mime_data):
		if not mime_data.hasUrls():
			return []
		paths = [url.toLocalFile() for url in mime_data.urls() if url.isLocalFile()]
		return [path for path in paths if is_supported_image(path)]

	def dragEnterEvent(self, event):
		if self._dropped_image_paths(event.mimeData()):
			event.acceptProposedAction()
		else:
			event.ignore()

	def dragMoveEvent(self, event):
		event.acceptProposedAction()

	def dropEvent(self, event):
		paths = self._dropped_image_paths(event.mimeData())
		if paths:
			logger.debug(f"Dropped {len(paths)} image(s) on canvas")
			self.files_dropped.emit(paths)
			event.acceptProposedAction()
