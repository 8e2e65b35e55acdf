"""Translation vector value object."""

from dataclasses import dataclass
from typing import Protocol, Self, runtime_checkable


@runtime_checkable
class SupportsTranslation(Protocol):
    """Protocol for anything that can be used to translate a point."""

    @property
    def tx(self) -> float:
        """Translation along the X axis."""
        ...

    @property
    def ty(self) -> float:
        """Translation along the Y axis."""
        ...


@dataclass(frozen=True)
class TranslationVector:
    """Immutable translation vector with X and Y deltas."""

    tx: float = 0.0
    ty: float = 0.0

    def as_tuple(self) -> tuple[float, float]:
        return (self.tx, self.ty)

    def __add__(self, other: Self) -> Self:
        return TranslationVector(self.tx + other.tx, self.ty + other.ty)

    def __neg__(self) -> Self:
        return TranslationVector(-self.tx, -self.ty)

    def __str__(self) -> str:
        """String representation of the vector."""
        return f"TranslationVector({self.tx}, {self.ty})"
