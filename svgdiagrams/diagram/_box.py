# SPDX-FileCopyrightText: Copyright DB InfraGO AG
# SPDX-License-Identifier: Apache-2.0
"""Axis-aligned bounding boxes."""

from __future__ import annotations

__all__ = ["Box", "BoxSide", "bounding_box", "union"]

import collections.abc as cabc
import dataclasses
import math
import typing as t

from svgdiagrams import diagram

BoxSide = t.Literal["top", "right", "bottom", "left"]


@dataclasses.dataclass(frozen=True)
class Box:
    """An axis-aligned rectangle.

    Some may call it bounding box.
    """

    pos: diagram.Vector2D
    size: diagram.Vector2D

    def __post_init__(self) -> None:
        if not isinstance(self.pos, diagram.Vector2D):
            object.__setattr__(self, "pos", diagram.Vector2D(*self.pos))
        if not isinstance(self.size, diagram.Vector2D):
            object.__setattr__(self, "size", diagram.Vector2D(*self.size))
        if self.size.x < 0 or self.size.y < 0:
            raise diagram.DegenerateGeometryError(
                f"Box size must not be negative, got {self.size}"
            )

    @property
    def top_left(self) -> diagram.Vector2D:
        return self.pos

    @property
    def bottom_right(self) -> diagram.Vector2D:
        return self.pos + self.size

    @property
    def center(self) -> diagram.Vector2D:
        """Return the center point of this Box."""
        return self.pos + self.size / 2

    def contains(self, point: diagram.Vec2ish) -> bool:
        """Check whether ``point`` lies within or on the border of this Box."""
        x, y = point
        return (
            self.pos.x <= x <= self.pos.x + self.size.x
            and self.pos.y <= y <= self.pos.y + self.size.y
        )

    def point_at(
        self, side: BoxSide, offset: float | int = 0
    ) -> diagram.Vector2D:
        """Return the middle of the given ``side``, moved out by ``offset``.

        Parameters
        ----------
        side
            The edge of the box, one of ``top``, ``right``, ``bottom``
            or ``left``.
        offset
            Distance to move the point away from the box, perpendicular
            to the edge. Connectors use this to keep their ends (and
            markers) outside of the shape's stroke.
        """
        if side == "top":
            return self.pos + (self.size.x / 2, -offset)
        if side == "right":
            return self.pos + (self.size.x + offset, self.size.y / 2)
        if side == "bottom":
            return self.pos + (self.size.x / 2, self.size.y + offset)
        if side == "left":
            return self.pos + (-offset, self.size.y / 2)
        raise ValueError(f"Invalid box side: {side!r}")

    def __str__(self) -> str:
        return f"Box at {self.pos}, size {self.size}"


def bounding_box(p1: diagram.Vec2ish, p2: diagram.Vec2ish) -> Box:
    """Return the smallest Box that encloses both points."""
    (x1, y1), (x2, y2) = p1, p2
    topleft = diagram.Vector2D(min(x1, x2), min(y1, y2))
    bottomright = diagram.Vector2D(max(x1, x2), max(y1, y2))
    return Box(topleft, bottomright - topleft)


def union(*boxes: Box | cabc.Iterable[Box]) -> Box:
    """Calculate the Box that encloses all given boxes."""
    minx = miny = math.inf
    maxx = maxy = -math.inf

    for box in _flatten(boxes):
        minx = min(minx, box.pos.x)
        miny = min(miny, box.pos.y)
        maxx = max(maxx, box.pos.x + box.size.x)
        maxy = max(maxy, box.pos.y + box.size.y)

    if minx == math.inf:
        raise diagram.DegenerateGeometryError(
            "Cannot build the union of zero boxes"
        )
    return bounding_box((minx, miny), (maxx, maxy))


def _flatten(
    boxes: cabc.Iterable[Box | cabc.Iterable[Box]],
) -> cabc.Iterator[Box]:
    for box in boxes:
        if isinstance(box, Box):
            yield box
        else:
            yield from box
