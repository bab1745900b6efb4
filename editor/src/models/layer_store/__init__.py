"""Layer store package"""

from .mutation_mixin import LayerMutationMixin
from .selection_mixin import LayerSelectionMixin
from .query_mixin import LayerQueryMixin
from .core import LayerStore, CHANGE_LAYERS, CHANGE_SELECTION, CHANGE_CHECKED

__all__ = [
    'LayerStore',
    'LayerMutationMixin',
    'LayerSelectionMixin',
    'LayerQueryMixin',
    'CHANGE_LAYERS',
    'CHANGE_SELECTION',
    'CHANGE_CHECKED',
]
