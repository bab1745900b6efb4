"""
Layer Selection Mixin

Selection and export-check sets. Neither set is part of history; undo only
prunes them down to ids that still exist.
"""

from typing import Iterable


class LayerSelectionMixin:
    """Mixin providing selection/check operations for LayerStore

    This mixin assumes the parent class has:
        - self._layers, self._selected_ids, self._checked_ids
        - self._notify(kind)
    """

    # ========================================
    # Selection
    # ========================================

    def toggle_selection(self, layer_id: str, additive: bool = False):
        """Additive flips membership, otherwise the selection becomes {layer_id}"""
        self.index_of(layer_id)
        if additive:
            self._selected_ids ^= {layer_id}
        else:
            self._selected_ids = {layer_id}
        self._notify('selection')

    def set_selection(self, layer_ids: Iterable[str]):
        """Replace the selection, ignoring ids not in the store"""
        valid_ids = {layer.id for layer in self._layers}
        new_ids = set(layer_ids) & valid_ids
        if new_ids == self._selected_ids:
            return
        self._selected_ids = new_ids
        self._notify('selection')

    def clear_selection(self):
        if self._selected_ids:
            self._selected_ids = set()
            self._notify('selection')

    def select_all(self):
        self.set_selection(layer.id for layer in self._layers)

    # ========================================
    # Export checks
    # ========================================

    def toggle_checked(self, layer_id: str):
        self.index_of(layer_id)
        self._checked_ids ^= {layer_id}
        self._notify('checked')

    def toggle_all_checked(self):
        """Check every layer, or clear all checks if every layer is already checked"""
        if self._layers and len(self._checked_ids) == len(self._layers):
            self._checked_ids = set()
        else:
            self._checked_ids = {layer.id for layer in self._layers}
        self._notify('checked')
