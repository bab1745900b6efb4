"""
StitchCraft - Property Sidebar Widget Components

This package contains components used by the sidebars:
the layer list and the numeric property fields.
"""

from .layer_list_widget import LayerListWidget
from .number_field import NumberField, AngleField, StepField

__all__ = ['LayerListWidget', 'NumberField', 'AngleField', 'StepField']
