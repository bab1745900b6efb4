# PyQt5 imports
from PyQt5.QtWidgets import (
    QFrame, QVBoxLayout, QHBoxLayout, QLabel, QScrollArea, QWidget, QSlider
)
from PyQt5.QtCore import Qt, pyqtSignal

# Local widget imports
from .property_sidebar_widgets import NumberField, AngleField, StepField
from constants import ROTATION_SLIDER_MIN, ROTATION_SLIDER_MAX, DEFAULT_ANGLE_STEP
from models.layer_store import CHANGE_LAYERS, CHANGE_SELECTION
from utils.geometry import snap_slider_rotation
from utils.number_utils import round_half_up


class PropertySidebar(QFrame):
	"""Right sidebar editing position, rotation, scale and opacity of the selection"""

	angle_step_changed = pyqtSignal(float)

	def __init__(self, store, parent=None, angle_step=DEFAULT_ANGLE_STEP):
		super().__init__(parent)
		self.setMinimumWidth(240)
		self.setMaximumWidth(360)
		self.store = store
		self.angle_step = angle_step
		self._syncing = False  # Set while pushing store values into widgets
		self._setup_ui()
		self.store.add_listener(self._on_store_changed)
		self.refresh()

	def _setup_ui(self):
		"""Setup the sidebar UI"""
		outer = QVBoxLayout(self)
		outer.setContentsMargins(0, 0, 0, 0)

		scroll = QScrollArea()
		scroll.setWidgetResizable(True)
		scroll.setFrameShape(QFrame.NoFrame)
		outer.addWidget(scroll)

		content = QWidget()
		layout = QVBoxLayout(content)
		layout.setContentsMargins(12, 12, 12, 12)
		layout.setSpacing(10)
		scroll.setWidget(content)

		title = QLabel("Properties")
		title.setStyleSheet("font-size: 14px; font-weight: 700;")
		layout.addWidget(title)

		self.selection_label = QLabel()
		self.selection_label.setStyleSheet("color: #64748b; font-size: 11px;")
		layout.addWidget(self.selection_label)

		# Fields container (disabled without selection)
		self.fields_widget = QWidget()
		fields_layout = QVBoxLayout(self.fields_widget)
		fields_layout.setContentsMargins(0, 0, 0, 0)
		fields_layout.setSpacing(8)

		# Position
		position_row = QHBoxLayout()
		self.x_field = NumberField("X")
		self.x_field.value_committed.connect(lambda v: self._update({'x': v}))
		position_row.addWidget(self.x_field)
		self.y_field = NumberField("Y")
		self.y_field.value_committed.connect(lambda v: self._update({'y': v}))
		position_row.addWidget(self.y_field)
		fields_layout.addLayout(position_row)

		# Rotation
		self.angle_field = AngleField("Angle", self.angle_step)
		self.angle_field.value_committed.connect(lambda v: self._update({'rotation': v}))
		fields_layout.addWidget(self.angle_field)

		self.rotation_slider = QSlider(Qt.Horizontal)
		self.rotation_slider.setRange(ROTATION_SLIDER_MIN, ROTATION_SLIDER_MAX)
		self.rotation_slider.setSingleStep(1)
		self.rotation_slider.setToolTip("Snaps to -180°, -90°, 0°, 90°, 180°")
		self.rotation_slider.valueChanged.connect(self._on_rotation_slider)
		fields_layout.addWidget(self.rotation_slider)

		slider_labels = QHBoxLayout()
		for text, align in (("-180°", Qt.AlignLeft), ("0°", Qt.AlignCenter), ("180°", Qt.AlignRight)):
			label = QLabel(text)
			label.setAlignment(align)
			label.setStyleSheet("color: #94a3b8; font-size: 10px;")
			slider_labels.addWidget(label)
		fields_layout.addLayout(slider_labels)

		# Scale
		self.scale_field = NumberField("Scale")
		self.scale_field.value_committed.connect(lambda v: self._update({'scale': v}))
		fields_layout.addWidget(self.scale_field)

		# Opacity
		opacity_row = QHBoxLayout()
		opacity_label = QLabel("Opacity")
		opacity_label.setStyleSheet("color: #64748b; font-size: 11px; font-weight: 600;")
		opacity_row.addWidget(opacity_label)
		self.opacity_slider = QSlider(Qt.Horizontal)
		self.opacity_slider.setRange(0, 100)
		self.opacity_slider.valueChanged.connect(self._on_opacity_slider)
		opacity_row.addWidget(self.opacity_slider, stretch=1)
		self.opacity_value_label = QLabel()
		self.opacity_value_label.setMinimumWidth(36)
		opacity_row.addWidget(self.opacity_value_label)
		fields_layout.addLayout(opacity_row)

		layout.addWidget(self.fields_widget)

		# Angle step preference (always enabled)
		self.step_field = StepField("Step", self.angle_step)
		self.step_field.setToolTip("Angle change per arrow click / Up-Down key (0 - 90)")
		self.step_field.value_committed.connect(self._on_step_committed)
		layout.addWidget(self.step_field)

		layout.addStretch()

	# ========================================
	# Store -> widgets
	# ========================================

	def _on_store_changed(self, kind):
		if kind in (CHANGE_LAYERS, CHANGE_SELECTION):
			self.refresh()

	def refresh(self):
		"""Load common values of the selection into the fields"""
		count = len(self.store.selected_ids)
		if count == 0:
			self.selection_label.setText("Select a layer to edit its properties")
		elif count == 1:
			self.selection_label.setText(self.store.get_selected_layers()[0].name)
		else:
			self.selection_label.setText(f"{count} layers selected")
		self.fields_widget.setEnabled(count > 0)

		self._syncing = True
		try:
			self.x_field.set_value(self.store.get_common_value('x'))
			self.y_field.set_value(self.store.get_common_value('y'))
			rotation = self.store.get_common_value('rotation')
			self.angle_field.set_value(rotation)
			self.rotation_slider.setValue(round_half_up(rotation) if rotation is not None else 0)
			self.scale_field.set_value(self.store.get_common_value('scale'))
			opacity = self.store.get_common_value('opacity')
			self.opacity_slider.setValue(round_half_up(opacity * 100) if opacity is not None else 100)
			self.opacity_value_label.setText(f"{round_half_up(opacity * 100)}%" if opacity is not None else "Mixed")
		finally:
			self._syncing = False

	# ========================================
	# Widgets -> store
	# ========================================

	def _update(self, changes):
		if self._syncing:
			return
		self.store.update_selected(changes)

	def _on_rotation_slider(self, value):
		self._update({'rotation': snap_slider_rotation(value)})

	def _on_opacity_slider(self, value):
		self._update({'opacity': value / 100.0})

	def _on_step_committed(self, value):
		self.set_angle_step(value)
		self.angle_step_changed.emit(value)

	def set_angle_step(self, step):
		self.angle_step = step
		self.angle_field.set_step(step)
		if self.step_field.value() != step:
			self.step_field.set_value(step)
