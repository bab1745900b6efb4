"""
Rotated bounding box math.

Layer positions are stored as the top-left of the axis-aligned box that
encloses the rotated, scaled image, the same convention cv2.warpAffine
uses when a rotation matrix is expanded to keep the whole image in frame.
Everything here is pure; nothing holds state.
"""

import math

from constants import (ORTHOGONAL_SNAP_TOLERANCE, ROTATION_SLIDER_SNAPS,
                       ROTATION_SLIDER_SNAP_DISTANCE)
from models.transform import BoxSize, Rect, Vec2


def _finite_or(value, fallback):
    try:
        value = float(value)
    except (TypeError, ValueError):
        return fallback
    return value if math.isfinite(value) else fallback


def sanitize_scale(scale):
    """Degenerate or non-finite scale counts as 1."""
    scale = _finite_or(scale, 1.0)
    return scale if scale > 0 else 1.0


def sanitize_dimension(value):
    """Non-finite or negative sizes count as 0."""
    return max(0.0, _finite_or(value, 0.0))


def sanitize_rotation(rotation):
    return _finite_or(rotation, 0.0)


def normalize_rotation(rotation):
    """Rotation folded into [0, 360). Only used to classify, never stored."""
    return sanitize_rotation(rotation) % 360.0


def _near(value, target):
    return abs(value - target) < ORTHOGONAL_SNAP_TOLERANCE


def compute_bounding_box(width, height, rotation, scale=1.0):
    """Axis-aligned size of an image after rotation and scaling.

    Args:
        width, height: Intrinsic image size in pixels
        rotation: Degrees, any range
        scale: Uniform scale factor

    Returns:
        BoxSize of the enclosing box. Rotations within tolerance of 0/180/360
        return the scaled size exactly, 90/270 the swapped size.
    """
    scaled_w = sanitize_dimension(width) * sanitize_scale(scale)
    scaled_h = sanitize_dimension(height) * sanitize_scale(scale)
    rotation = sanitize_rotation(rotation)

    normalized = rotation % 360.0
    if _near(normalized, 0) or _near(normalized, 180) or _near(normalized, 360):
        return BoxSize(scaled_w, scaled_h)
    if _near(normalized, 90) or _near(normalized, 270):
        return BoxSize(scaled_h, scaled_w)

    rad = math.radians(rotation)
    sin = abs(math.sin(rad))
    cos = abs(math.cos(rad))
    return BoxSize(scaled_h * sin + scaled_w * cos,
                   scaled_h * cos + scaled_w * sin)


def layer_bounding_box(layer):
    """World-space rect of a layer's rotated bounding box."""
    size = compute_bounding_box(layer.width, layer.height, layer.rotation, layer.scale)
    return Rect(layer.x, layer.y, size.width, size.height)


def recenter_for_transform_change(layer, changes):
    """New top-left that keeps the layer's visual centre fixed.

    The centre is taken from the layer's current box; the new box uses the
    rotation/scale from `changes` where present, else the layer's own.

    Returns:
        Vec2 top-left for the new box
    """
    old = compute_bounding_box(layer.width, layer.height, layer.rotation, layer.scale)
    center_x = layer.x + old.width / 2
    center_y = layer.y + old.height / 2

    rotation = changes.get('rotation', layer.rotation)
    scale = changes.get('scale', layer.scale)
    new = compute_bounding_box(layer.width, layer.height, rotation, scale)
    return Vec2(center_x - new.width / 2, center_y - new.height / 2)


def content_bounds(layers):
    """Union of all layer boxes, or None when there are no layers."""
    bounds = None
    for layer in layers:
        box = layer_bounding_box(layer)
        bounds = box if bounds is None else bounds.united(box)
    return bounds


def snap_slider_rotation(value):
    """Pull a slider angle onto -180/-90/0/90/180 when close enough."""
    for snap in ROTATION_SLIDER_SNAPS:
        if abs(value - snap) <= ROTATION_SLIDER_SNAP_DISTANCE:
            value = snap
    return value
