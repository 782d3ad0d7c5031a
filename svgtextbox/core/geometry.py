# svgtextbox/core/geometry.py
"""
Rectangle helpers for ink extents: build shapely boxes, containment checks.
All coordinates are in the backend's scaled units.
"""

from __future__ import annotations

from typing import NamedTuple

from shapely.geometry import box
from shapely.geometry.base import BaseGeometry


class Extents(NamedTuple):
    """Rectangle as reported by the shaping backend: origin plus size."""
    x: int
    y: int
    width: int
    height: int


def extents_to_geom(ext: Extents) -> BaseGeometry:
    """Shapely geometry for the rectangle; degenerate sizes give a line or point."""
    return box(ext.x, ext.y, ext.x + ext.width, ext.y + ext.height)


def rect_inside_box(ext: Extents, box_width: int, box_height: int) -> bool:
    """
    True if ext starts at a non-negative offset and does not pass box_width/box_height.
    Zero-area rectangles (e.g. whitespace-only ink) are compared by bounds.
    """
    if ext.x < 0 or ext.y < 0 or ext.width < 0 or ext.height < 0:
        return False
    if box_width <= 0 or box_height <= 0:
        return False
    if ext.width == 0 or ext.height == 0:
        return ext.x + ext.width <= box_width and ext.y + ext.height <= box_height
    outer = box(0, 0, box_width, box_height)
    return outer.covers(extents_to_geom(ext))
