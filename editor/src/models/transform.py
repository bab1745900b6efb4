"""Geometry data structures for world and canvas coordinates."""
from dataclasses import dataclass


@dataclass
class Vec2:
    """2D vector for coordinate pairs.
    
    Used for any x/y pair across the two spaces:
    - World space: layer positions, unaffected by the viewport
    - Canvas pixels: widget-local, world * zoom + pan
    """
    x: float
    y: float
    
    def __iter__(self):
        """Allow tuple unpacking: x, y = vec2"""
        return iter((self.x, self.y))
    
    def __add__(self, other):
        return Vec2(self.x + other.x, self.y + other.y)
    
    def __sub__(self, other):
        return Vec2(self.x - other.x, self.y - other.y)


@dataclass
class BoxSize:
    """Width/height pair of an axis-aligned box."""
    width: float
    height: float
    
    def __iter__(self):
        """Allow tuple unpacking: w, h = size"""
        return iter((self.width, self.height))


@dataclass
class Rect:
    """Axis-aligned rectangle (top-left + size)."""
    x: float
    y: float
    width: float
    height: float
    
    @classmethod
    def from_points(cls, a, b):
        """Normalized rect spanning two corner points (any order)."""
        left = min(a.x, b.x)
        top = min(a.y, b.y)
        return cls(left, top, abs(b.x - a.x), abs(b.y - a.y))
    
    @property
    def right(self):
        return self.x + self.width
    
    @property
    def bottom(self):
        return self.y + self.height
    
    @property
    def center(self):
        return Vec2(self.x + self.width / 2, self.y + self.height / 2)
    
    def intersects(self, other):
        """Strict overlap test; rectangles that only touch do not intersect."""
        return (self.x < other.right and self.right > other.x and
                self.y < other.bottom and self.bottom > other.y)
    
    def united(self, other):
        left = min(self.x, other.x)
        top = min(self.y, other.y)
        right = max(self.right, other.right)
        bottom = max(self.bottom, other.bottom)
        return Rect(left, top, right - left, bottom - top)
