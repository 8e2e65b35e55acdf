"""Seedable random integer source."""

import random

from planar.domain.random_source import RandomSource
from planar.shared.config.settings import RandomSettings
from planar.shared.logging import get_logger

logger = get_logger("random")

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class SeededRandomSource:
    """Random source producing signed 32-bit integers.

    Backed by its own ``random.Random`` instance, so two sources never share
    generator state and a given seed always yields the same sequence.
    """

    def __init__(self, seed: int | None = None):
        self.seed = seed
        self._random = random.Random(seed)

    def next_int(self) -> int:
        """Draw an integer uniformly from [-2**31, 2**31 - 1]."""
        return self._random.randint(INT32_MIN, INT32_MAX)

    def __repr__(self) -> str:
        return f"SeededRandomSource(seed={self.seed!r})"


class RandomSourceFactory:
    """Factory for creating random sources from configuration."""

    @classmethod
    def create(cls, settings: RandomSettings, offset: int = 0) -> RandomSource:
        """Create a random source.

        Args:
            settings: Random settings
            offset: Added to the configured seed, ignored when no seed is set

        Returns:
            Configured random source
        """
        seed = None if settings.seed is None else settings.seed + offset
        logger.debug("Creating random source with seed %s", seed)
        return SeededRandomSource(seed)

    @classmethod
    def create_pair(cls, settings: RandomSettings) -> tuple[RandomSource, RandomSource]:
        """Create independent sources for the X and Y axes.

        With a configured seed the Y source uses ``seed + 1`` so both axes do
        not draw the same sample.
        """
        return cls.create(settings), cls.create(settings, offset=1)
