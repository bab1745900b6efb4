"""
Canvas interaction state machine.

Translates pointer, key and wheel input into Viewport and LayerStore calls.
Qt-free: the canvas widget converts its QMouseEvent/QKeyEvent into
PointerEvent objects and key names before calling in.

Modes:
    idle        - no gesture in progress
    pan         - space held, middle button, or ctrl/cmd on empty canvas
    drag_layer  - pressed on a layer that ended up selected
    box_select  - pressed on empty canvas
"""

import logging

from constants import ARROW_KEY_MOVE_NORMAL, ARROW_KEY_MOVE_COARSE
from models.transform import Rect, Vec2
from utils.geometry import layer_bounding_box
from .drag_context import (DragContext, PointerEvent, PAN, DRAG_LAYER, BOX_SELECT,
                           MIDDLE_BUTTON)

logger = logging.getLogger('Interaction')

IDLE = 'idle'

_ARROW_OFFSETS = {
    'left': (-1, 0),
    'right': (1, 0),
    'up': (0, -1),
    'down': (0, 1),
}


class InteractionController:
    """Pointer/keyboard handling for the canvas

    Args:
        store: LayerStore receiving selection and layer changes
        viewport: Viewport receiving pan/zoom changes
        on_view_changed: Called after pan/zoom or marquee changes (repaint hook)
    """

    def __init__(self, store, viewport, on_view_changed=None):
        self.store = store
        self.viewport = viewport
        self.on_view_changed = on_view_changed
        self.drag = None
        self.space_held = False

    @property
    def mode(self):
        return self.drag.operation if self.drag else IDLE

    @property
    def marquee_rect(self):
        """Canvas-local marquee while box selecting, else None"""
        if self.drag is None or self.drag.operation != BOX_SELECT:
            return None
        return Rect.from_points(self.drag.start, self.drag.current)

    def _view_changed(self):
        if self.on_view_changed:
            self.on_view_changed()

    # ========================================
    # Hit testing
    # ========================================

    def screen_box(self, layer):
        return self.viewport.rect_to_screen(layer_bounding_box(layer))

    def hit_test(self, pos):
        """Topmost visible layer whose bounding box contains pos, or None"""
        for layer in reversed(self.store.layers):
            if not layer.visible:
                continue
            box = self.screen_box(layer)
            if box.x <= pos.x < box.right and box.y <= pos.y < box.bottom:
                return layer.id
        return None

    # ========================================
    # Pointer
    # ========================================

    def pointer_down(self, event: PointerEvent):
        """Start a gesture. Returns the new mode."""
        if self.drag is not None:
            # Extra buttons pressed mid-gesture are ignored
            return self.mode

        layer_id = self.hit_test(event.pos)
        command_pan = event.command and layer_id is None

        if self.space_held or event.button == MIDDLE_BUTTON or command_pan:
            self.drag = DragContext(PAN, event.pos, modifiers=event.modifiers,
                                    initial_pan=self.viewport.pan)
            return self.mode

        if layer_id is not None:
            self._press_layer(layer_id, event)
            return self.mode

        base = self.store.selected_ids if event.shift else frozenset()
        if not event.shift:
            self.store.clear_selection()
        self.drag = DragContext(BOX_SELECT, event.pos, modifiers=event.modifiers,
                                base_selection=base)
        self._view_changed()
        return self.mode

    def _press_layer(self, layer_id, event):
        if event.shift or event.command:
            self.store.toggle_selection(layer_id, additive=True)
        elif not self.store.is_selected(layer_id):
            self.store.toggle_selection(layer_id, additive=False)

        if not self.store.is_selected(layer_id):
            # Modifier-click removed it from the selection; nothing to drag
            return

        self.store.record_history("Move layers")
        positions = {layer.id: (layer.x, layer.y) for layer in self.store.get_selected_layers()}
        self.drag = DragContext(DRAG_LAYER, event.pos, modifiers=event.modifiers,
                                initial_positions=positions)

    def pointer_move(self, event: PointerEvent):
        if self.drag is None:
            return
        self.drag.current = event.pos
        delta = self.drag.delta

        if self.drag.operation == PAN:
            initial = self.drag.initial_pan
            self.viewport.set_pan(initial.x + delta.x, initial.y + delta.y)
            self._view_changed()

        elif self.drag.operation == DRAG_LAYER:
            zoom = self.viewport.zoom
            self.store.move_layers({
                layer_id: (x + delta.x / zoom, y + delta.y / zoom)
                for layer_id, (x, y) in self.drag.initial_positions.items()
            })

        elif self.drag.operation == BOX_SELECT:
            self._update_marquee_selection()
            self._view_changed()

    def _update_marquee_selection(self):
        marquee = self.marquee_rect
        selected = set(self.drag.base_selection)
        for layer in self.store.layers:
            if layer.visible and marquee.intersects(self.screen_box(layer)):
                selected.add(layer.id)
        self.store.set_selection(selected)

    def pointer_up(self, event: PointerEvent = None):
        if self.drag is None:
            return
        logger.debug(f"End {self.drag.operation}")
        was_box = self.drag.operation == BOX_SELECT
        self.drag = None
        if was_box:
            self._view_changed()

    def cancel(self):
        """Drop any gesture without further changes (focus loss)"""
        self.drag = None
        self.space_held = False

    # ========================================
    # Keyboard
    # ========================================

    def key_press(self, key, modifiers=frozenset(), text_input_focused=False):
        """Handle a key press

        Args:
            key: Lower-case key name ('space', 'left', 'delete', 'z', ...)
            modifiers: {'ctrl', 'meta', 'shift', 'alt'}
            text_input_focused: True while a text field has focus

        Returns:
            True if the key was consumed
        """
        if text_input_focused:
            return False

        command = 'ctrl' in modifiers or 'meta' in modifiers
        shift = 'shift' in modifiers

        if key == 'space':
            self.space_held = True
            return True

        if command and key == 'z':
            if shift:
                self.store.redo()
            else:
                self.store.undo()
            return True
        if command and key == 'y':
            self.store.redo()
            return True

        if key in _ARROW_OFFSETS:
            if not self.store.selected_ids:
                return False
            step = ARROW_KEY_MOVE_COARSE if shift else ARROW_KEY_MOVE_NORMAL
            dx, dy = _ARROW_OFFSETS[key]
            self.store.nudge_selected(dx * step, dy * step)
            return True

        if key in ('delete', 'backspace'):
            if not self.store.selected_ids:
                return False
            self.store.delete_selected()
            return True

        return False

    def key_release(self, key, text_input_focused=False):
        """Space up ends pan mode, and any pan in progress"""
        if key != 'space':
            return False
        self.space_held = False
        if self.drag is not None and self.drag.operation == PAN:
            self.drag = None
        return not text_input_focused

    # ========================================
    # Wheel
    # ========================================

    def wheel(self, delta_y, modifiers=frozenset()):
        """Ctrl/Cmd + wheel zooms; plain wheel is left to the caller"""
        if 'ctrl' not in modifiers and 'meta' not in modifiers:
            return False
        self.viewport.zoom_by_wheel(delta_y)
        self._view_changed()
        return True
