"""
Layer Mutation Mixin

Structural and property changes to the layer sequence.

Methods:
    - add_layers
    - update_layer
    - update_selected
    - move_layers
    - nudge_selected
    - delete_selected
    - reorder
    - toggle_visibility

Every method that records history does so BEFORE touching the sequence.
"""

import math
from typing import Dict, Iterable, Any

from models.layer import Layer, validate_changes
from utils.geometry import recenter_for_transform_change

_NUMERIC_FIELDS = ('x', 'y', 'rotation', 'scale', 'opacity')


class LayerMutationMixin:
    """Mixin providing mutations for LayerStore

    This mixin assumes the parent class has:
        - self._layers, self._selected_ids, self._checked_ids
        - self._logger: logging.Logger instance
        - self.record_history(description), self._notify(kind)
    """

    def add_layers(self, decoded_images: Iterable) -> list:
        """Append one layer per decoded image

        Args:
            decoded_images: DecodedImage objects in completion order

        Returns:
            List of new layer ids (empty when nothing was added)
        """
        new_layers = [Layer.from_decoded(image) for image in decoded_images]
        if not new_layers:
            return []

        self.record_history(f"Add {len(new_layers)} image(s)")
        self._layers.extend(new_layers)
        self._logger.debug(f"Added layers: {[layer.name for layer in new_layers]}")
        self._notify('layers')

        if not self._selected_ids:
            self._selected_ids = {new_layers[0].id}
            self._notify('selection')

        return [layer.id for layer in new_layers]

    def update_layer(self, layer_id: str, changes: Dict[str, Any], record_history: bool = True):
        """Merge changes into one layer

        Rotation or scale changes move x/y so the box centre stays put.

        Args:
            layer_id: Target layer
            changes: Field -> value; non-finite numbers are dropped
            record_history: Snapshot before applying

        Raises:
            ValueError: Unknown layer id, or a field that cannot be changed
        """
        index = self.index_of(layer_id)
        changes = self._sanitize_changes(changes)
        if not changes:
            return
        validate_changes(changes)

        if record_history:
            self.record_history(f"Edit {self._layers[index].name}")
        self._layers[index] = self._apply_changes(self._layers[index], changes)
        self._notify('layers')

    def update_selected(self, changes: Dict[str, Any]):
        """Apply the same changes to every selected layer as one undo step"""
        changes = self._sanitize_changes(changes)
        if not changes or not self._selected_ids:
            return

        validate_changes(changes)

        self.record_history(f"Edit {', '.join(sorted(changes))}")
        self._layers = [
            self._apply_changes(layer, changes) if layer.id in self._selected_ids else layer
            for layer in self._layers
        ]
        self._notify('layers')

    def move_layers(self, positions: Dict[str, tuple]):
        """Set x/y for several layers without recording history (drag moves)

        Args:
            positions: layer id -> (x, y)
        """
        if not positions:
            return
        self._layers = [
            layer.with_changes(x=positions[layer.id][0], y=positions[layer.id][1])
            if layer.id in positions else layer
            for layer in self._layers
        ]
        self._notify('layers')

    def nudge_selected(self, dx: float, dy: float):
        """Offset every selected layer, one undo step per call"""
        if not self._selected_ids:
            return
        self.record_history("Nudge")
        self._layers = [
            layer.with_changes(x=layer.x + dx, y=layer.y + dy)
            if layer.id in self._selected_ids else layer
            for layer in self._layers
        ]
        self._notify('layers')

    def delete_selected(self):
        """Remove selected layers and prune them from the checked set"""
        if not self._selected_ids:
            return

        self.record_history(f"Delete {len(self._selected_ids)} layer(s)")
        self._layers = [layer for layer in self._layers if layer.id not in self._selected_ids]
        self._checked_ids -= self._selected_ids
        self._selected_ids = set()

        self._notify('layers')
        self._notify('checked')
        self._notify('selection')

    def reorder(self, from_index: int, to_index: int):
        """Move one layer to a new index (remove, then insert)

        Raises:
            ValueError: Index out of range
        """
        count = len(self._layers)
        if not (0 <= from_index < count) or not (0 <= to_index < count):
            raise ValueError(f"Reorder index out of range: {from_index} -> {to_index} (layers: {count})")
        if from_index == to_index:
            return

        self.record_history("Reorder layers")
        layer = self._layers.pop(from_index)
        self._layers.insert(to_index, layer)
        self._notify('layers')

    def toggle_visibility(self, layer_id: str):
        """Flip visibility. Not an undoable change."""
        index = self.index_of(layer_id)
        layer = self._layers[index]
        self._layers[index] = layer.with_changes(visible=not layer.visible)
        self._notify('layers')

    # ========================================
    # Helpers
    # ========================================

    def _sanitize_changes(self, changes):
        clean = {}
        for key, value in changes.items():
            if key in _NUMERIC_FIELDS:
                try:
                    value = float(value)
                except (TypeError, ValueError):
                    self._logger.warning(f"Ignoring non-numeric {key}: {value!r}")
                    continue
                if not math.isfinite(value):
                    self._logger.warning(f"Ignoring non-finite {key}: {value}")
                    continue
                if key == 'scale' and value <= 0:
                    self._logger.warning(f"Ignoring non-positive scale: {value}")
                    continue
                if key == 'opacity':
                    value = min(1.0, max(0.0, value))
            clean[key] = value
        return clean

    def _apply_changes(self, layer, changes):
        if 'rotation' in changes or 'scale' in changes:
            pos = recenter_for_transform_change(layer, changes)
            return layer.with_changes(**{**changes, 'x': pos.x, 'y': pos.y})
        return layer.with_changes(**changes)
