"""GUI widgets package - reusable UI components"""

from .zoom_toolbar import ZoomToolbar
from .info_dialog import InfoDialog
from .export_dialog import ExportDialog

__all__ = ['ZoomToolbar', 'InfoDialog', 'ExportDialog']
