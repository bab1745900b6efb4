"""Drag context and pointer event types for canvas interaction.

Unified drag state management: one object per pointer gesture instead of
separate is_panning / is_dragging / is_selecting flags.
"""

from dataclasses import dataclass, field

from models.transform import Vec2

# Drag operations
PAN = 'pan'
DRAG_LAYER = 'drag_layer'
BOX_SELECT = 'box_select'

# Mouse buttons
LEFT_BUTTON = 'left'
MIDDLE_BUTTON = 'middle'
RIGHT_BUTTON = 'right'


@dataclass
class PointerEvent:
    """Toolkit-neutral mouse event in canvas-local pixels."""
    pos: Vec2
    button: str = LEFT_BUTTON
    modifiers: frozenset = frozenset()  # {'ctrl', 'meta', 'shift', 'alt'}

    @property
    def shift(self):
        return 'shift' in self.modifiers

    @property
    def command(self):
        """Ctrl on Windows/Linux, Cmd on macOS"""
        return 'ctrl' in self.modifiers or 'meta' in self.modifiers


@dataclass
class DragContext:
    """State for one pointer gesture, from press to release."""
    operation: str  # PAN, DRAG_LAYER, BOX_SELECT
    start: Vec2  # Canvas-local press position
    current: Vec2 = None
    modifiers: frozenset = frozenset()
    initial_pan: Vec2 = None  # PAN
    initial_positions: dict = field(default_factory=dict)  # DRAG_LAYER: id -> (x, y)
    base_selection: frozenset = frozenset()  # BOX_SELECT: kept regardless of marquee

    def __post_init__(self):
        if self.current is None:
            self.current = self.start

    @property
    def delta(self):
        return self.current - self.start
