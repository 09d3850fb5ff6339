# SPDX-FileCopyrightText: Copyright DB InfraGO AG
# SPDX-License-Identifier: Apache-2.0
"""Two dimensional vector calculation utility."""

from __future__ import annotations

__all__ = [
    "DegenerateGeometryError",
    "LineSide",
    "Point",
    "Vec2Element",
    "Vec2ish",
    "Vector2D",
    "round3",
]

import collections.abc as cabc
import math
import operator
import typing as t

Vec2Element = t.Union[float, int]
Vec2ish = t.Tuple[Vec2Element, Vec2Element]
LineSide = t.Literal["left", "right"]


class DegenerateGeometryError(ValueError):
    """Raised when geometry collapses, e.g. a zero-length direction."""


class Vector2D(t.NamedTuple):
    """A vector in 2-dimensional space.

    The coordinate system is the one used by SVG, i.e. the Y axis
    grows downwards.
    """

    x: Vec2Element = 0
    y: Vec2Element = 0

    def __add__(self, other: Vec2ish) -> Vector2D:  # type: ignore[override]
        return self.__map2(operator.add, other)

    def __radd__(self, other: Vec2ish) -> Vector2D:
        return self.__map2(operator.add, other, True)

    def __sub__(self, other: Vec2ish) -> Vector2D:
        return self.__map2(operator.sub, other)

    def __rsub__(self, other: Vec2ish) -> Vector2D:
        return self.__map2(operator.sub, other, True)

    @t.overload  # type: ignore
    def __mul__(self, other: Vec2ish) -> Vec2Element: ...
    @t.overload
    def __mul__(self, other: Vec2Element) -> Vector2D: ...
    def __mul__(self, other: Vec2Element | Vec2ish) -> Vector2D | Vec2Element:
        result = self.__map2(operator.mul, other)
        if result is NotImplemented:
            return self.__map(operator.mul, other)
        return sum(result)

    @t.overload  # type: ignore[override]
    def __rmul__(self, other: Vec2ish) -> Vec2Element: ...
    @t.overload
    def __rmul__(self, other: Vec2Element) -> Vector2D: ...
    def __rmul__(self, other: Vec2Element | Vec2ish) -> Vector2D | Vec2Element:
        result = self.__map2(operator.mul, other, True)
        if result is NotImplemented:
            return self.__map(operator.mul, other, True)
        return sum(result)

    def __matmul__(self, other: Vec2ish) -> Vector2D:
        return self.__map2(operator.mul, other)

    def __rmatmul__(self, other: Vec2ish) -> Vector2D:
        return self.__map2(operator.mul, other, True)

    def __truediv__(self, other: Vec2Element) -> Vector2D:
        return self.__map(operator.truediv, other)

    def __neg__(self) -> Vector2D:
        return type(self)(-self[0], -self[1])

    def __abs__(self) -> Vector2D:
        return type(self)(abs(self[0]), abs(self[1]))

    def __str__(self) -> str:  # pragma: no cover
        return f"({self[0]}, {self[1]})"

    @property
    def sqlength(self) -> float:
        """Calculate the squared length of this vector."""
        return self[0] ** 2 + self[1] ** 2

    @property
    def length(self) -> float:
        """Calculate the length of this vector."""
        return math.sqrt(self.sqlength)

    def normalize(self, length: Vec2Element = 1) -> Vector2D:
        """Create a Vector2D with the same direction and given length.

        Raises
        ------
        DegenerateGeometryError
            if this Vector2D has zero length
        """
        own_length = self.length
        if own_length == 0:
            raise DegenerateGeometryError(
                f"Cannot normalize the zero-length vector {self!r}"
            )
        factor = length / own_length
        return Vector2D(self[0] * factor, self[1] * factor)

    def rotate(self, side: LineSide) -> Vector2D:
        """Rotate this Vector2D by 90 degrees towards ``side``.

        Seen along the vector's direction, ``"left"`` yields the vector
        pointing to its left hand side and ``"right"`` the one pointing
        to its right hand side.
        """
        if side == "left":
            return Vector2D(self[1], -self[0])
        if side == "right":
            return Vector2D(-self[1], self[0])
        raise ValueError(f"Invalid rotation side: {side!r}")

    def round3(self) -> Vector2D:
        """Round both components to three decimal places.

        Only meant for serialization, intermediate results keep their
        full precision.
        """
        return Vector2D(round3(self[0]), round3(self[1]))

    def __map(
        self,
        func: cabc.Callable[[Vec2Element, Vec2Element], Vec2Element],
        other: Vec2Element | Vec2ish,
        reflected: bool = False,
    ) -> Vector2D:
        if not isinstance(other, (int, float)):  # pragma: no cover
            return NotImplemented
        if reflected:
            return type(self)(func(other, self[0]), func(other, self[1]))
        return type(self)(func(self[0], other), func(self[1], other))

    def __map2(
        self,
        func: cabc.Callable[[Vec2Element, Vec2Element], Vec2Element],
        other: Vec2Element | Vec2ish,
        reflected: bool = False,
    ) -> Vector2D:
        if isinstance(other, (int, float)):
            return NotImplemented
        if not len(other) == 2:  # pragma: no cover
            raise ValueError("Length of 'other' must be 2")
        if reflected:
            return type(self)(func(other[0], self[0]), func(other[1], self[1]))
        return type(self)(func(self[0], other[0]), func(self[1], other[1]))


Point = Vector2D


def round3(value: Vec2Element) -> Vec2Element:
    """Round to three decimal places, dropping the fraction if zero."""
    rounded = round(value, 3)
    if rounded == int(rounded):
        return int(rounded)
    return rounded

