"""Domain value objects."""

from planar.domain.value_objects.point import Point2D
from planar.domain.value_objects.translation import SupportsTranslation, TranslationVector

__all__ = [
    "Point2D",
    "SupportsTranslation",
    "TranslationVector",
]
