"""Layer record - one placed image on the canvas."""
import uuid
from dataclasses import dataclass, field, fields, replace

from constants import (DEFAULT_POSITION_X, DEFAULT_POSITION_Y, DEFAULT_ROTATION,
                       DEFAULT_SCALE, DEFAULT_OPACITY)


# Set at creation, never changed through updates
IMMUTABLE_FIELDS = frozenset({'id', 'image_ref', 'width', 'height'})


def generate_layer_id():
    return str(uuid.uuid4())


@dataclass(frozen=True)
class Layer:
    """Immutable layer state.

    x/y are the top-left of the rotated bounding box in world space, not of
    the image itself. Updates produce a new Layer via with_changes(), so
    history snapshots can share records safely.
    """
    name: str
    width: float
    height: float
    image_ref: object = None
    x: float = DEFAULT_POSITION_X
    y: float = DEFAULT_POSITION_Y
    rotation: float = DEFAULT_ROTATION
    scale: float = DEFAULT_SCALE
    opacity: float = DEFAULT_OPACITY
    visible: bool = True
    id: str = field(default_factory=generate_layer_id)

    @classmethod
    def from_decoded(cls, decoded):
        """Fresh layer at the origin for a decoded image."""
        return cls(name=decoded.name, width=decoded.width,
                   height=decoded.height, image_ref=decoded.image_ref)

    def with_changes(self, **changes):
        """Copy with fields replaced.

        Raises:
            ValueError: unknown field, or one that cannot change after creation
        """
        validate_changes(changes)
        return replace(self, **changes)


def validate_changes(changes):
    """Raise ValueError if any key is not an editable layer field"""
    known = {f.name for f in fields(Layer)}
    for key in changes:
        if key not in known:
            raise ValueError(f"Unknown layer property: {key}")
        if key in IMMUTABLE_FIELDS:
            raise ValueError(f"Layer property '{key}' cannot be changed")
