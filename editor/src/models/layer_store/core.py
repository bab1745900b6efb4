"""
StitchCraft - Layer Store

THE MODEL in the MVC architecture. Owns the ordered layer sequence plus the
selection and export-check sets, and is the only place they change.

This class handles:
- Layer sequence (index order is z-order, later = on top)
- Selection set and checked (export) set
- Undo/redo through a HistoryManager holding sequence snapshots

The store is INDEPENDENT of UI:
- No Qt imports
- No rendering logic
- No viewport (zoom/pan belongs to Viewport)

Usage:
    store = LayerStore()
    store.add_layers(decoded_images)
    store.update_selected({'rotation': 90})   # recentred, one undo step
    store.undo()
"""

import logging
from typing import Callable, List

from utils.history_manager import HistoryManager
from .mutation_mixin import LayerMutationMixin
from .selection_mixin import LayerSelectionMixin
from .query_mixin import LayerQueryMixin

# Change kinds passed to listeners
CHANGE_LAYERS = 'layers'
CHANGE_SELECTION = 'selection'
CHANGE_CHECKED = 'checked'


class LayerStore(LayerMutationMixin, LayerSelectionMixin, LayerQueryMixin):
    """Layer sequence with selection, export checks and history

    Properties:
        layers: Tuple of Layer records in z-order
        selected_ids: Frozen copy of the selection set
        checked_ids: Frozen copy of the checked set
        history: The HistoryManager recording sequence snapshots
    """

    def __init__(self, history: HistoryManager = None):
        self._layers = []
        self._selected_ids = set()
        self._checked_ids = set()
        self.history = history if history is not None else HistoryManager()
        self._listeners: List[Callable[[str], None]] = []
        self._logger = logging.getLogger('LayerStore')

    # ========================================
    # Change notification
    # ========================================

    def add_listener(self, callback: Callable[[str], None]):
        """Register callback(kind) invoked after every change"""
        self._listeners.append(callback)

    def remove_listener(self, callback):
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _notify(self, kind: str):
        for callback in list(self._listeners):
            callback(kind)

    # ========================================
    # History
    # ========================================

    def record_history(self, description: str = ""):
        """Snapshot the current sequence before a mutation"""
        self.history.record(self._layers, description)

    def undo(self) -> bool:
        """Restore the previous sequence. Returns False when nothing to undo."""
        previous = self.history.undo(self._layers)
        if previous is None:
            return False
        self._restore(previous)
        return True

    def redo(self) -> bool:
        """Re-apply the next sequence. Returns False when nothing to redo."""
        following = self.history.redo(self._layers)
        if following is None:
            return False
        self._restore(following)
        return True

    def _restore(self, snapshot):
        self._layers = list(snapshot)

        # Restored sequence may not contain layers that were selected/checked
        valid_ids = {layer.id for layer in self._layers}
        selection_changed = not self._selected_ids <= valid_ids
        self._selected_ids &= valid_ids
        self._checked_ids &= valid_ids

        self._notify(CHANGE_LAYERS)
        if selection_changed:
            self._notify(CHANGE_SELECTION)
