"""Numeric text fields for the property sidebar.

Each field wraps a QLineEdit around an edit buffer so half-typed input
('-', '1.', '') never reaches the layer store.
"""

from PyQt5.QtWidgets import QWidget, QHBoxLayout, QVBoxLayout, QLabel, QLineEdit, QToolButton
from PyQt5.QtCore import Qt, QEvent, pyqtSignal

from utils.edit_buffer import NumericEditBuffer, StepEditBuffer


class NumberField(QWidget):
	"""Label + line edit committing only valid numbers"""

	value_committed = pyqtSignal(float)

	buffer_class = NumericEditBuffer

	def __init__(self, label, parent=None, placeholder="Mixed"):
		super().__init__(parent)
		self.buffer = self.buffer_class(on_commit=self.value_committed.emit)

		layout = QHBoxLayout(self)
		layout.setContentsMargins(0, 0, 0, 0)
		layout.setSpacing(4)

		self.label = QLabel(label)
		self.label.setMinimumWidth(40)
		self.label.setStyleSheet("color: #64748b; font-size: 11px; font-weight: 600;")
		layout.addWidget(self.label)

		self.line_edit = QLineEdit()
		self.line_edit.setPlaceholderText(placeholder)
		self.line_edit.textEdited.connect(self.buffer.set_text)
		self.line_edit.installEventFilter(self)
		layout.addWidget(self.line_edit, stretch=1)

	def set_value(self, value):
		"""Show an external value (None = mixed/empty)"""
		self.buffer.sync(value)
		if self.line_edit.text() != self.buffer.text:
			self.line_edit.setText(self.buffer.text)

	def value(self):
		return self.buffer.value

	def eventFilter(self, obj, event):
		if obj is self.line_edit and event.type() == QEvent.FocusOut:
			self.line_edit.setText(self.buffer.blur())
		return super().eventFilter(obj, event)


class AngleField(NumberField):
	"""Angle field with step buttons; Up/Down keys step while focused"""

	def __init__(self, label, step, parent=None, placeholder="Mixed"):
		super().__init__(label, parent, placeholder)
		self.step = step

		buttons = QWidget()
		buttons_layout = QVBoxLayout(buttons)
		buttons_layout.setContentsMargins(0, 0, 0, 0)
		buttons_layout.setSpacing(0)

		self.up_btn = QToolButton()
		self.up_btn.setArrowType(Qt.UpArrow)
		self.up_btn.setFixedSize(18, 12)
		self.up_btn.setToolTip("Increase angle")
		self.up_btn.clicked.connect(self.increment)
		buttons_layout.addWidget(self.up_btn)

		self.down_btn = QToolButton()
		self.down_btn.setArrowType(Qt.DownArrow)
		self.down_btn.setFixedSize(18, 12)
		self.down_btn.setToolTip("Decrease angle")
		self.down_btn.clicked.connect(self.decrement)
		buttons_layout.addWidget(self.down_btn)

		self.layout().addWidget(buttons)

	def set_step(self, step):
		self.step = step

	def _current(self):
		return self.buffer.value if self.buffer.value is not None else 0.0

	def increment(self):
		self.value_committed.emit(self._current() + self.step)

	def decrement(self):
		self.value_committed.emit(self._current() - self.step)

	def eventFilter(self, obj, event):
		if obj is self.line_edit and event.type() == QEvent.KeyPress:
			if event.key() == Qt.Key_Up:
				self.increment()
				return True
			if event.key() == Qt.Key_Down:
				self.decrement()
				return True
		return super().eventFilter(obj, event)


class StepField(NumberField):
	"""Angle step field; accepts 0 < step <= 90 only"""

	buffer_class = StepEditBuffer

	def __init__(self, label, value, parent=None):
		super().__init__(label, parent, placeholder="")
		self.set_value(value)
