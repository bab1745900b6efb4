"""Mixin for handling zoom and pan in the stitching canvas.

Provides viewport navigation including:
- Zoom in/out/reset in fixed steps
- Ctrl/Cmd + wheel zoom
- Fit all layers into view
- Guide display toggle
"""

from components.canvas_widgets.canvas_coordinate_mixin import modifiers_from_qt
from utils.geometry import content_bounds


class CanvasZoomPanMixin:
    """Mixin providing zoom and pan functionality for canvas."""
    
    # Expected state variables (initialized in main class):
    # - viewport: Viewport
    # - store: LayerStore
    # - controller: InteractionController
    # - show_guides: bool
    # - zoom_toolbar: ZoomToolbar or None
    
    def zoom_in(self):
        """Zoom in by one step."""
        self.viewport.zoom_in()
        self._on_viewport_changed()
    
    def zoom_out(self):
        """Zoom out by one step."""
        self.viewport.zoom_out()
        self._on_viewport_changed()
    
    def zoom_reset(self):
        """Reset zoom to 100% and pan to origin."""
        self.viewport.reset()
        self._on_viewport_changed()
    
    def set_zoom_level(self, zoom_percent):
        """Set zoom to specific percentage."""
        self.viewport.set_zoom(zoom_percent / 100.0)
        self._on_viewport_changed()
    
    def get_zoom_percent(self):
        """Get current zoom percentage."""
        return self.viewport.get_zoom_percent()
    
    def fit_to_view(self):
        """Frame every layer, never zooming past 100%."""
        bounds = content_bounds(self.store.layers)
        if self.viewport.fit_to(bounds, self.width(), self.height()):
            self._on_viewport_changed()
    
    def set_show_guides(self, show):
        """Toggle bounding box guides."""
        self.show_guides = show
        self.update()
    
    def _on_viewport_changed(self):
        self.update()
        self._update_zoom_toolbar()
    
    def _update_zoom_toolbar(self):
        """Update zoom toolbar display."""
        if self.zoom_toolbar is not None:
            self.zoom_toolbar.set_zoom_percent(self.get_zoom_percent(), emit_signal=False)
    
    # ========================================
    # Mouse Event Handlers
    # ========================================
    
    def wheelEvent(self, event):
        """Handle mouse wheel for zoom."""
        # angleDelta is +120 per notch scrolling up; wheel zoom expects +100 per notch down
        delta_y = -event.angleDelta().y() * 100 / 120
        if self.controller.wheel(delta_y, modifiers_from_qt(event.modifiers())):
            self._update_zoom_toolbar()
            event.accept()
        else:
            event.ignore()
