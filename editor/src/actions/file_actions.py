"""File operations for the main window - image import and layout export"""
import logging

from PyQt5.QtWidgets import QFileDialog, QMessageBox

from constants import SUPPORTED_IMAGE_EXTENSIONS
from services.export_service import export_data, DEFAULT_FILENAMES
from services.image_import import is_supported_image
from components.gui_widgets import ExportDialog
from utils.logger import loggerRaise

logger = logging.getLogger('ImageImport')


def image_file_filter():
	patterns = " ".join(f"*{ext}" for ext in SUPPORTED_IMAGE_EXTENSIONS)
	return f"Images ({patterns});;All Files (*)"


class FileActions:
	"""Handles all file menu operations"""

	def __init__(self, main_window):
		"""Initialize with reference to main window

		Args:
			main_window: The StitchCraftEditor main window instance
		"""
		self.main_window = main_window
		self.main_window.importer.batch_finished.connect(self._on_batch_finished)

	def import_images(self):
		"""Ask for image files and decode them in the background"""
		paths, _ = QFileDialog.getOpenFileNames(
			self.main_window,
			"Import Images",
			"",
			image_file_filter()
		)
		if paths:
			self.import_paths(paths)

	def import_paths(self, paths):
		"""Queue paths for decoding; unsupported extensions are skipped"""
		supported = [path for path in paths if is_supported_image(path)]
		skipped = len(paths) - len(supported)
		if skipped:
			logger.warning(f"Skipped {skipped} unsupported file(s)")
		try:
			return self.main_window.importer.import_files(supported)
		except Exception as e:
			loggerRaise(e, "Failed to start image import", "Import Error")

	def _on_batch_finished(self, images):
		if not images:
			self.main_window.status_left.setText("No images could be imported")
			return
		self.main_window.store.add_layers(images)
		self.main_window.status_left.setText(f"Imported {len(images)} image(s)")

	def export(self, fmt):
		"""Serialize checked (or all) layers and show the export dialog"""
		store = self.main_window.store
		content = export_data(store.layers, store.checked_ids, fmt)
		if content is None:
			QMessageBox.information(self.main_window, "Export", "There are no layers to export.")
			return None

		dialog = ExportDialog(content, DEFAULT_FILENAMES[fmt], fmt, self.main_window)
		dialog.exec_()
		return content
