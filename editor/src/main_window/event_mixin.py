"""Window event handlers for StitchCraftEditor"""

from PyQt5.QtWidgets import QApplication, QLineEdit, QTextEdit, QPlainTextEdit, QAbstractSpinBox
from PyQt5.QtCore import QEvent

from components.canvas_widgets.canvas_coordinate_mixin import modifiers_from_qt, key_name_from_qt

# Widgets that own the keyboard while focused
TEXT_INPUT_TYPES = (QLineEdit, QTextEdit, QPlainTextEdit, QAbstractSpinBox)


class EventMixin:
	"""Window event handlers (eventFilter for canvas keys, close)"""

	def _is_text_input_focused(self):
		return isinstance(QApplication.focusWidget(), TEXT_INPUT_TYPES)

	def eventFilter(self, obj, event):
		"""Route key events to the canvas controller before child widgets consume them"""
		event_type = event.type()
		if event_type not in (QEvent.KeyPress, QEvent.KeyRelease):
			return False

		# Only keys aimed at this window (not dialogs), and only once per event
		focus = QApplication.focusWidget()
		target = focus if focus is not None else self
		if obj is not target or target.window() is not self:
			return False

		key = key_name_from_qt(event.key())
		if key is None:
			return False

		controller = self.canvas_area.canvas_widget.controller
		text_focused = self._is_text_input_focused()

		if event_type == QEvent.KeyPress:
			if event.isAutoRepeat() and key == 'space':
				return not text_focused
			handled = controller.key_press(key, modifiers_from_qt(event.modifiers()), text_focused)
		else:
			if event.isAutoRepeat():
				return False
			handled = controller.key_release(key, text_focused)

		if handled:
			self.canvas_area.canvas_widget.update_cursor()
		return handled

	def closeEvent(self, event):
		"""Stop listening to application-wide key events on close"""
		QApplication.instance().removeEventFilter(self)
		super().closeEvent(event)
