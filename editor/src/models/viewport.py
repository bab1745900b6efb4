"""Viewport state: zoom and pan of the canvas over world space.

screen = world * zoom + pan

Not part of history, not exported.
"""

from constants import (DEFAULT_ZOOM, MIN_ZOOM, MAX_ZOOM, ZOOM_STEP,
                       WHEEL_ZOOM_FACTOR, FIT_TO_VIEW_PADDING)
from models.transform import Vec2


def clamp_zoom(zoom):
    return max(MIN_ZOOM, min(MAX_ZOOM, zoom))


class Viewport:
    """Zoom/pan pair with world <-> canvas conversion."""

    def __init__(self, zoom=DEFAULT_ZOOM, pan=None):
        self.zoom = clamp_zoom(zoom)
        self.pan = pan if pan is not None else Vec2(0.0, 0.0)

    def world_to_screen(self, world_pos):
        return Vec2(world_pos.x * self.zoom + self.pan.x,
                    world_pos.y * self.zoom + self.pan.y)

    def screen_to_world(self, screen_pos):
        return Vec2((screen_pos.x - self.pan.x) / self.zoom,
                    (screen_pos.y - self.pan.y) / self.zoom)

    def rect_to_screen(self, rect):
        """World rect -> canvas rect (same type, scaled and offset)."""
        origin = self.world_to_screen(Vec2(rect.x, rect.y))
        return type(rect)(origin.x, origin.y, rect.width * self.zoom, rect.height * self.zoom)

    # ========================================
    # Zoom
    # ========================================

    def set_zoom(self, zoom):
        self.zoom = clamp_zoom(zoom)

    def zoom_in(self):
        self.set_zoom(self.zoom + ZOOM_STEP)

    def zoom_out(self):
        self.set_zoom(self.zoom - ZOOM_STEP)

    def zoom_by_wheel(self, delta_y):
        """Apply a wheel delta (positive = scroll down = zoom out)."""
        self.set_zoom(self.zoom - delta_y * WHEEL_ZOOM_FACTOR)

    def get_zoom_percent(self):
        return int(round(self.zoom * 100))

    # ========================================
    # Pan / framing
    # ========================================

    def set_pan(self, x, y):
        self.pan = Vec2(x, y)

    def reset(self):
        self.zoom = DEFAULT_ZOOM
        self.pan = Vec2(0.0, 0.0)

    def fit_to(self, content, view_width, view_height, padding=FIT_TO_VIEW_PADDING):
        """Frame a world rect in the view, never zooming past 100%.

        Args:
            content: Rect in world space (None for no content)
            view_width, view_height: Canvas size in pixels

        Returns:
            True if the viewport changed
        """
        if content is None or content.width <= 0 or content.height <= 0:
            return False
        if view_width <= 0 or view_height <= 0:
            return False

        scale_x = (view_width - padding * 2) / content.width
        scale_y = (view_height - padding * 2) / content.height
        self.zoom = clamp_zoom(min(scale_x, scale_y, 1.0))

        center = content.center
        self.pan = Vec2(view_width / 2 - center.x * self.zoom,
                        view_height / 2 - center.y * self.zoom)
        return True
