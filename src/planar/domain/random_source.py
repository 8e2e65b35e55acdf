"""Random integer source interface."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    """Protocol for generators producing integer samples."""

    def next_int(self) -> int:
        """Draw the next integer sample."""
        ...
