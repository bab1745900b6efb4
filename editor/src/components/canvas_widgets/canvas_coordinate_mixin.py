"""Coordinate and input conversion mixin for the canvas widget.

Converts between Qt types and the toolkit-neutral types the interaction
controller works with:
- QPoint/QPointF <-> Vec2 (canvas pixels)
- Canvas pixels <-> world space (through the Viewport)
- QMouseEvent -> PointerEvent, QKeyEvent -> key name
"""
from PyQt5.QtCore import Qt, QPointF, QRectF

from components.interaction import PointerEvent, LEFT_BUTTON, MIDDLE_BUTTON, RIGHT_BUTTON
from models.transform import Vec2


_BUTTON_NAMES = {
    Qt.LeftButton: LEFT_BUTTON,
    Qt.MiddleButton: MIDDLE_BUTTON,
    Qt.RightButton: RIGHT_BUTTON,
}

_KEY_NAMES = {
    Qt.Key_Space: 'space',
    Qt.Key_Left: 'left',
    Qt.Key_Right: 'right',
    Qt.Key_Up: 'up',
    Qt.Key_Down: 'down',
    Qt.Key_Delete: 'delete',
    Qt.Key_Backspace: 'backspace',
    Qt.Key_Z: 'z',
    Qt.Key_Y: 'y',
}


def modifiers_from_qt(qt_modifiers):
    """Qt.KeyboardModifiers -> {'ctrl', 'meta', 'shift', 'alt'}"""
    names = set()
    if qt_modifiers & Qt.ControlModifier:
        names.add('ctrl')
    if qt_modifiers & Qt.MetaModifier:
        names.add('meta')
    if qt_modifiers & Qt.ShiftModifier:
        names.add('shift')
    if qt_modifiers & Qt.AltModifier:
        names.add('alt')
    return frozenset(names)


def key_name_from_qt(qt_key):
    return _KEY_NAMES.get(qt_key)


class CanvasCoordinateMixin:
    """Mixin providing coordinate conversion methods.
    
    Requires the following from the parent class:
    - self.viewport (Viewport)
    """
    
    # ========================================
    # ATOMICS: Qt <-> Vec2
    # ========================================
    
    def qpoint_to_vec2(self, point):
        return Vec2(float(point.x()), float(point.y()))
    
    def vec2_to_qpointf(self, vec):
        return QPointF(vec.x, vec.y)
    
    def rect_to_qrectf(self, rect):
        return QRectF(rect.x, rect.y, rect.width, rect.height)
    
    # ========================================
    # HELPERS: canvas <-> world
    # ========================================
    
    def canvas_to_world(self, point):
        """QPoint in widget pixels -> Vec2 in world space"""
        return self.viewport.screen_to_world(self.qpoint_to_vec2(point))
    
    def world_to_canvas(self, world_pos):
        """Vec2 in world space -> QPointF in widget pixels"""
        return self.vec2_to_qpointf(self.viewport.world_to_screen(world_pos))
    
    # ========================================
    # Event conversion
    # ========================================
    
    def to_pointer_event(self, event):
        """QMouseEvent -> PointerEvent (canvas-local position)"""
        button = _BUTTON_NAMES.get(event.button(), LEFT_BUTTON)
        return PointerEvent(self.qpoint_to_vec2(event.pos()), button,
                            modifiers_from_qt(event.modifiers()))
