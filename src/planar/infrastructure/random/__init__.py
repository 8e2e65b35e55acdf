"""Random source implementations."""

from planar.infrastructure.random.seeded import RandomSourceFactory, SeededRandomSource

__all__ = [
    "RandomSourceFactory",
    "SeededRandomSource",
]
