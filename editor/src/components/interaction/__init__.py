"""
StitchCraft - Canvas Interaction

- drag_context.py: PointerEvent and per-gesture DragContext
- interaction_controller.py: Pan / drag / marquee / keyboard state machine
"""

from .drag_context import (DragContext, PointerEvent, PAN, DRAG_LAYER, BOX_SELECT,
                           LEFT_BUTTON, MIDDLE_BUTTON, RIGHT_BUTTON)
from .interaction_controller import InteractionController, IDLE

__all__ = [
    'DragContext', 'PointerEvent', 'InteractionController',
    'IDLE', 'PAN', 'DRAG_LAYER', 'BOX_SELECT',
    'LEFT_BUTTON', 'MIDDLE_BUTTON', 'RIGHT_BUTTON',
]
