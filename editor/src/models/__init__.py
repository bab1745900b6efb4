"""
StitchCraft - Data Models

This module contains the data model classes for the layer stack.
This is the MODEL in MVC architecture.

Public API: Import Layer, LayerStore, Viewport from models
"""

from .layer import Layer
from .layer_store import LayerStore
from .viewport import Viewport

__all__ = ['Layer', 'LayerStore', 'Viewport']
