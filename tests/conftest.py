"""
Shared fixtures for StitchCraft tests.

Provides decoded-image factories, populated layer stores and a viewport.
"""
import sys
import os
import pytest

# Ensure editor/src is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'editor', 'src'))

# Widget tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


def make_decoded(name="tile.png", width=100, height=50):
    """DecodedImage without real pixel data"""
    from services.image_import import DecodedImage
    return DecodedImage(name=name, image_ref=None, width=width, height=height)


@pytest.fixture
def decoded():
    """Factory for DecodedImage records"""
    return make_decoded


@pytest.fixture
def store():
    """Empty layer store"""
    from models.layer_store import LayerStore
    return LayerStore()


@pytest.fixture
def three_layer_store(store):
    """Store holding a.png, b.png, c.png (100x50 each) at the origin"""
    store.add_layers([make_decoded("a.png"), make_decoded("b.png"), make_decoded("c.png")])
    store.history.clear()
    return store


@pytest.fixture
def viewport():
    from models.viewport import Viewport
    return Viewport()


@pytest.fixture
def recorded_changes(store):
    """List collecting every change kind the store notifies"""
    kinds = []
    store.add_listener(kinds.append)
    return kinds
