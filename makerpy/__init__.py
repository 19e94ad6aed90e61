"""
makerpy - 2D point arithmetic for path-based vector drawing.

This package provides the point primitives (construction, coercion,
arithmetic, transforms and polar/arc conversions) that path and shape
algorithms are built on.
"""

__version__ = "0.1.0"
__author__ = "Your Name"
__email__ = "your.email@example.com"

# Point operations and the utilities they are composed from
from . import angle, measure, point

# Core geometry types
from .cad_types import Point, PointLike, is_point

# Path entities
from .primitives import Arc, Circle, Line

# Define what gets imported with "from makerpy import *"
__all__ = [
    # Operation namespaces
    "point",
    "angle",
    "measure",
    # Geometry types
    "Point",
    "PointLike",
    "is_point",
    # Paths
    "Line",
    "Circle",
    "Arc",
]
