"""
Layer Query Mixin

Read-only access for views and the exporter.
"""

from typing import Any, List, Optional


class LayerQueryMixin:
    """Mixin providing read access for LayerStore"""

    @property
    def layers(self) -> tuple:
        return tuple(self._layers)

    @property
    def selected_ids(self) -> frozenset:
        return frozenset(self._selected_ids)

    @property
    def checked_ids(self) -> frozenset:
        return frozenset(self._checked_ids)

    def get_layer_count(self) -> int:
        return len(self._layers)

    def index_of(self, layer_id: str) -> int:
        """Position of a layer in z-order

        Raises:
            ValueError: If no layer has this id
        """
        for index, layer in enumerate(self._layers):
            if layer.id == layer_id:
                return index
        raise ValueError(f"Layer with UUID '{layer_id}' not found")

    def get_layer(self, layer_id: str):
        return self._layers[self.index_of(layer_id)]

    def is_selected(self, layer_id: str) -> bool:
        return layer_id in self._selected_ids

    def is_checked(self, layer_id: str) -> bool:
        return layer_id in self._checked_ids

    def get_selected_layers(self) -> List:
        """Selected layers in z-order"""
        return [layer for layer in self._layers if layer.id in self._selected_ids]

    def get_common_value(self, field: str) -> Optional[Any]:
        """Shared value of a field over the selection

        Returns:
            The value if every selected layer has it, None if mixed or nothing selected
        """
        selected = self.get_selected_layers()
        if not selected:
            return None
        first = getattr(selected[0], field)
        if all(getattr(layer, field) == first for layer in selected[1:]):
            return first
        return None
