"""UI components for StitchCraft

This package contains all UI components organized into subpackages:
- interaction: Qt-free pointer/keyboard state machine for the canvas
- canvas_widgets: Canvas mixins (coordinates, zoom/pan, rendering)
- property_sidebar_widgets: Layer list and numeric property fields
- gui_widgets: Toolbar and dialogs

Direct imports for the main window:
"""

from .canvas_area import CanvasArea
from .canvas_widget import StitchCanvas
from .layer_panel import LayerPanel
from .property_sidebar import PropertySidebar

__all__ = [
    'CanvasArea',
    'StitchCanvas',
    'LayerPanel',
    'PropertySidebar',
]
