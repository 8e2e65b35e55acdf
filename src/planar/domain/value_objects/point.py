"""Point value object for representing planar coordinates."""

import logging
import math
from typing import Self

from planar.domain.exceptions import InvalidArgumentError
from planar.domain.random_source import RandomSource
from planar.domain.value_objects.translation import SupportsTranslation

logger = logging.getLogger("planar.point")

_TWO_PI = 2.0 * math.pi


def _divide(numerator: float, denominator: float) -> float:
    """Divide two floats with IEEE-754 results instead of ZeroDivisionError."""
    if denominator != 0.0:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _is_positive_zero(value: float) -> bool:
    return value == 0.0 and math.copysign(1.0, value) > 0.0


class Point2D:
    """Mutable point holding double precision x, y coordinates.

    Coordinates can never become NaN: any attempt to assign NaN is ignored
    and the previous value is kept. Geometric operations such as scaling,
    rotation and symmetry return new points; the setters, ``translate``,
    ``translate_by`` and ``set_point`` mutate the point in place.
    """

    __slots__ = ("_x", "_y")

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        """Create a point at (x, y).

        Args:
            x: X coordinate, ignored (left at 0.0) when NaN
            y: Y coordinate, ignored (left at 0.0) when NaN
        """
        self._x = 0.0
        self._y = 0.0
        self.set_x(x)
        self.set_y(y)

    @classmethod
    def from_point(cls, other: Self | None) -> Self:
        """Create a copy of another point, or (0, 0) when it is None."""
        if other is None:
            return cls()
        return cls(other.x, other.y)

    @property
    def x(self) -> float:
        """The X coordinate of the point."""
        return self._x

    @x.setter
    def x(self, value: float) -> None:
        self.set_x(value)

    @property
    def y(self) -> float:
        """The Y coordinate of the point."""
        return self._y

    @y.setter
    def y(self, value: float) -> None:
        self.set_y(value)

    def get_x(self) -> float:
        return self._x

    def get_y(self) -> float:
        return self._y

    def set_x(self, value: float) -> None:
        """Set the X coordinate.

        Args:
            value: New X coordinate. NaN is ignored and the current value kept.
        """
        value = float(value)
        if math.isnan(value):
            logger.debug("Ignoring NaN x coordinate for %r", self)
            return
        self._x = value

    def set_y(self, value: float) -> None:
        """Set the Y coordinate.

        Args:
            value: New Y coordinate. NaN is ignored and the current value kept.
        """
        value = float(value)
        if math.isnan(value):
            logger.debug("Ignoring NaN y coordinate for %r", self)
            return
        self._y = value

    def scale(self, factor: float) -> Self:
        """Create a new point scaled by the given factor.

        Args:
            factor: Scaling factor applied to both coordinates

        Returns:
            The scaled point, or this very point when factor is NaN
        """
        if math.isnan(factor):
            logger.debug("Ignoring NaN scale factor for %r", self)
            return self
        return type(self)(self._x * factor, self._y * factor)

    def horizontal_symmetry(self, origin: Self | None) -> Self:
        """Reflect the point across the horizontal line passing through origin.

        Args:
            origin: Point giving the Y position of the horizontal axis

        Returns:
            New reflected point

        Raises:
            InvalidArgumentError: If origin is None
        """
        if origin is None:
            logger.debug("horizontal_symmetry called without origin")
            raise InvalidArgumentError("origin")
        return type(self)(self._x, 2.0 * origin.y - self._y)

    def compute_angle(self, other: Self | None) -> float:
        """Compute the angle of another point using this point as the centre.

        The vertical case is decided on an exact positive zero X delta; a
        negative zero goes through the arctangent branch. The result is not a
        four-quadrant arctangent: for a negative X delta the angle is
        ``pi - atan(-dy / dx)``.

        Args:
            other: The point whose angle is computed

        Returns:
            The angle in radians, or NaN when other is None
        """
        if other is None:
            logger.debug("compute_angle called without a point")
            return math.nan

        dx = other.x - self._x
        dy = other.y - self._y

        if _is_positive_zero(dx):
            angle = math.pi / 2.0
            if dy < 0.0:
                angle = _TWO_PI - angle
        elif dx < 0.0:
            angle = math.pi - math.atan(_divide(-dy, dx))
        else:
            angle = math.atan(_divide(dy, dx))

        return angle

    def rotate_point(self, center: Self | None, theta: float) -> Self | None:
        """Rotate the point around a centre.

        A negative theta is shifted by 2*pi before the (truncating) modulo
        2*pi is applied. A non-finite theta leaves the result at (0, 0).

        Args:
            center: The centre of rotation
            theta: The rotation angle in radians

        Returns:
            New rotated point, or None when center is None
        """
        if center is None:
            logger.debug("rotate_point called without a centre")
            return None

        angle = float(theta)
        if angle < 0.0:
            angle = _TWO_PI + angle
        angle = math.fmod(angle, _TWO_PI) if math.isfinite(angle) else math.nan

        cx = center.x
        cy = center.y
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)

        rotated = type(self)()
        rotated.set_x(cos_a * (self._x - cx) - sin_a * (self._y - cy) + cx)
        rotated.set_y(sin_a * (self._x - cx) + cos_a * (self._y - cy) + cy)
        return rotated

    def central_symmetry(self, center: Self | None) -> Self:
        """Get the point symmetric to this one through a centre.

        Raises:
            InvalidArgumentError: If center is None
        """
        if center is None:
            logger.debug("central_symmetry called without a centre")
            raise InvalidArgumentError("center")
        return self.rotate_point(center, math.pi)

    def middle_point(self, other: Self | None) -> Self:
        """Get the middle point between this point and another one.

        Raises:
            InvalidArgumentError: If other is None
        """
        if other is None:
            logger.debug("middle_point called without a point")
            raise InvalidArgumentError("other")
        return type(self)((self._x + other.x) / 2.0, (self._y + other.y) / 2.0)

    get_middle_point = middle_point

    def translate(self, tx: float, ty: float) -> None:
        """Translate the point in place.

        Each axis goes through its setter, so a NaN delta leaves that axis
        unchanged while the other one is still translated.

        Args:
            tx: The X translation
            ty: The Y translation
        """
        # Always true: NaN is unequal to everything, including NaN.
        if math.nan != tx or math.nan != ty:
            self.set_x(self._x + tx)
            self.set_y(self._y + ty)

    def translate_by(self, translation: SupportsTranslation | None) -> None:
        """Translate the point using a translation vector.

        Args:
            translation: Object exposing ``tx`` and ``ty``. Nothing happens if None.
        """
        if translation is not None:
            self.translate(translation.tx, translation.ty)

    def set_point(self, random_x: RandomSource, random_y: RandomSource) -> None:
        """Set the coordinates from one sample of each random source.

        Args:
            random_x: Source used for the X coordinate
            random_y: Source used for the Y coordinate
        """
        self.set_x(random_x.next_int())
        self.set_y(random_y.next_int())

    def as_tuple(self) -> tuple[float, float]:
        return (self._x, self._y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point2D):
            return NotImplemented
        return self._x == other._x and self._y == other._y

    __hash__ = None

    def __copy__(self) -> Self:
        return type(self)(self._x, self._y)

    def __deepcopy__(self, memo) -> Self:
        return type(self)(self._x, self._y)

    def __repr__(self) -> str:
        return f"Point2D(x={self._x!r}, y={self._y!r})"

    def __str__(self) -> str:
        """String representation of the point."""
        return f"({self._x}, {self._y})"
