"""
planar - 2D point geometry

A small value-object library around a single mutable point type with
elementary planar-geometry operations.

This package provides:
- Point2D with NaN-rejecting coordinate setters
- Scaling, rotation, horizontal and central symmetry, middle point
- In-place translation from deltas or a translation vector
- Angle computation around a centre
- Random point assignment from pluggable integer sources
"""

__version__ = "1.0.0"
__license__ = "MIT"

from planar.domain.exceptions import InvalidArgumentError, PlanarError
from planar.domain.random_source import RandomSource
from planar.domain.value_objects.point import Point2D
from planar.domain.value_objects.translation import SupportsTranslation, TranslationVector
from planar.infrastructure.random.seeded import RandomSourceFactory, SeededRandomSource

__all__ = [
    "Point2D",
    "TranslationVector",
    "SupportsTranslation",
    "RandomSource",
    "SeededRandomSource",
    "RandomSourceFactory",
    "PlanarError",
    "InvalidArgumentError",
]
