# SPDX-FileCopyrightText: Copyright DB InfraGO AG
# SPDX-License-Identifier: Apache-2.0
"""Classes that represent the shapes of a diagram.

All shapes are immutable. Methods like :meth:`Line.shorten` or
:meth:`Rectangle.text` create new elements instead of modifying the
existing ones.
"""

from __future__ import annotations

__all__ = [
    "CORNER_RADIUS",
    "Circle",
    "Ellipse",
    "Line",
    "Polygon",
    "Rectangle",
    "Text",
    "VisualElement",
    "presentation_attributes",
]

import collections.abc as cabc
import dataclasses
import typing as t

from svgwrite import base, container, shapes
from svgwrite import text as svgtext

from svgdiagrams import diagram
from svgdiagrams.diagram import _text

CORNER_RADIUS = 5
"""Default corner radius of rectangles."""

VisualElement = t.Union[
    "Line", "Circle", "Ellipse", "Rectangle", "Text", "Polygon"
]

_E = t.TypeVar("_E", bound="_Element")


def presentation_attributes(
    color: str, classes: cabc.Sequence[str]
) -> dict[str, str]:
    """Return the SVG attributes shared by all kinds of shapes.

    Colors and style modifiers are expressed as CSS classes, which the
    stylesheet translates into stroke, fill and opacity.
    """
    return {"class_": " ".join((color, *classes))}


@dataclasses.dataclass(frozen=True)
class _Element:
    _: dataclasses.KW_ONLY
    color: str = "text"
    classes: tuple[str, ...] = ()
    children: tuple[VisualElement, ...] = ()
    title: str | None = None

    def __post_init__(self) -> None:
        diagram.check_color(self.color)
        classes = diagram.check_classes(self.classes)
        object.__setattr__(self, "classes", classes)
        object.__setattr__(self, "children", tuple(self.children))

    def _set_vector(self, name: str) -> diagram.Vector2D:
        value = getattr(self, name)
        if not isinstance(value, diagram.Vector2D):
            value = diagram.Vector2D(*value)
            object.__setattr__(self, name, value)
        return value

    def replace(self: _E, **changes: t.Any) -> _E:
        """Create a copy of this element with some fields replaced."""
        return dataclasses.replace(self, **changes)

    def with_children(self: _E, *children: VisualElement) -> _E:
        """Create a copy of this element with additional children."""
        return dataclasses.replace(
            self, children=(*self.children, *children)
        )

    @property
    def bounds(self) -> diagram.Box:
        """Calculate the bounding box of this element and its children."""
        own = self._bounds()
        if not self.children:
            return own
        return diagram.union(own, *(c.bounds for c in self.children))

    def encode(self, markers: diagram.MarkerRegistry) -> base.BaseElement:
        """Create the SVG element(s) for this element.

        Elements with children are wrapped in a group, in which the
        element itself is followed by the encoded children.

        Parameters
        ----------
        markers
            The registry in which to define the markers that are
            referenced by lines.
        """
        element = self._encode(markers)
        if self.title is not None:
            element.set_desc(title=self.title)
        if not self.children:
            return element

        group = container.Group()
        group.add(element)
        for child in self.children:
            group.add(child.encode(markers))
        return group

    def _attributes(self) -> dict[str, str]:
        return presentation_attributes(self.color, self.classes)

    def _bounds(self) -> diagram.Box:
        raise NotImplementedError

    def _encode(self, markers: diagram.MarkerRegistry) -> base.BaseElement:
        raise NotImplementedError


@dataclasses.dataclass(frozen=True)
class Line(_Element):
    """A straight line, optionally decorated with markers at its ends."""

    start: diagram.Vector2D
    end: diagram.Vector2D
    marker: tuple[diagram.Marker, ...] = ()
    marker_style: diagram.MarkerStyle = "arrow"

    def __post_init__(self) -> None:
        super().__post_init__()
        self._set_vector("start")
        self._set_vector("end")
        object.__setattr__(
            self, "marker", diagram.normalize_markers(self.marker)
        )
        diagram.marker_name(self.marker_style, "end")

    @property
    def vector(self) -> diagram.Vector2D:
        """Return the vector from start to end."""
        return self.end - self.start

    @property
    def length(self) -> float:
        return self.vector.length

    @property
    def center(self) -> diagram.Vector2D:
        return self.start + self.vector / 2

    def text(
        self,
        text: _text.TextLine | cabc.Iterable[_text.TextLine],
        side: diagram.LineSide = "left",
        distance: float | int = _text.LINE_TO_TEXT_DISTANCE,
        **props: t.Any,
    ) -> Text:
        """Create a text beside the middle of this line.

        The text keeps ``distance`` to the line and is aligned so that
        it grows away from the line. Its color defaults to the line's
        color, any of the ``props`` override the calculated values.
        """
        offset = self.vector.rotate(side).normalize(distance)
        alignment = diagram.determine_alignment(offset)
        params: dict[str, t.Any] = {
            "horizontal_alignment": alignment.horizontal,
            "vertical_alignment": alignment.vertical,
            "color": self.color,
            **props,
        }
        return Text(self.center + offset, text, **params)

    def shorten(
        self,
        start_offset: float | int,
        end_offset: float | int | None = None,
    ) -> Line:
        """Create a copy of this line that is shorter at both ends.

        Parameters
        ----------
        start_offset
            Distance by which to move the start towards the end.
        end_offset
            Distance by which to move the end towards the start.
            Defaults to ``start_offset``.
        """
        if end_offset is None:
            end_offset = start_offset
        vector = self.vector
        start = self.start + vector.normalize(start_offset)
        end = self.end - vector.normalize(end_offset)
        return dataclasses.replace(self, start=start, end=end)

    def _bounds(self) -> diagram.Box:
        return diagram.bounding_box(self.start, self.end)

    def _encode(self, markers: diagram.MarkerRegistry) -> shapes.Line:
        attributes = self._attributes()
        for end in self.marker:
            name = diagram.marker_name(self.marker_style, end)
            attributes[f"marker_{end}"] = markers.url(name, self.color)
        return shapes.Line(
            start=self.start.round3(), end=self.end.round3(), **attributes
        )


@dataclasses.dataclass(frozen=True)
class Circle(_Element):
    center: diagram.Vector2D
    radius: float | int

    def __post_init__(self) -> None:
        super().__post_init__()
        self._set_vector("center")
        if not self.radius > 0:
            raise diagram.DegenerateGeometryError(
                f"Circle radius must be positive, got {self.radius!r}"
            )

    def point_towards(
        self, target: diagram.Vec2ish, offset: float | int = 0
    ) -> diagram.Vector2D:
        """Return the point of the circumference in direction of ``target``.

        The point is moved further outwards by ``offset``.
        """
        direction = diagram.Vector2D(*target) - self.center
        return self.center + direction.normalize(self.radius + offset)

    def _bounds(self) -> diagram.Box:
        return diagram.Box(
            self.center - (self.radius, self.radius),
            (self.radius * 2, self.radius * 2),
        )

    def _encode(self, markers: diagram.MarkerRegistry) -> shapes.Circle:
        del markers
        return shapes.Circle(
            center=self.center.round3(),
            r=diagram.round3(self.radius),
            **self._attributes(),
        )


@dataclasses.dataclass(frozen=True)
class Ellipse(_Element):
    center: diagram.Vector2D
    radius: diagram.Vector2D
    """The horizontal and vertical radius."""

    def __post_init__(self) -> None:
        super().__post_init__()
        self._set_vector("center")
        radius = self._set_vector("radius")
        if not (radius.x > 0 and radius.y > 0):
            raise diagram.DegenerateGeometryError(
                f"Ellipse radii must be positive, got {radius}"
            )

    def point_towards(
        self, target: diagram.Vec2ish, offset: float | int = 0
    ) -> diagram.Vector2D:
        """Return the point of the outline in direction of ``target``.

        The point is moved further outwards by ``offset``.
        """
        direction = diagram.Vector2D(*target) - self.center
        unit = direction.normalize()
        scaled = diagram.Vector2D(
            unit.x / self.radius.x, unit.y / self.radius.y
        )
        outline = self.center + unit / scaled.length
        return outline + unit * offset

    def _bounds(self) -> diagram.Box:
        return diagram.Box(self.center - self.radius, self.radius * 2)

    def _encode(self, markers: diagram.MarkerRegistry) -> shapes.Ellipse:
        del markers
        return shapes.Ellipse(
            center=self.center.round3(),
            r=self.radius.round3(),
            **self._attributes(),
        )


@dataclasses.dataclass(frozen=True)
class Rectangle(_Element):
    """A rectangle.

    Some may call it box.
    """

    position: diagram.Vector2D
    """The top left corner."""
    size: diagram.Vector2D
    corner_radius: float | int = CORNER_RADIUS

    def __post_init__(self) -> None:
        super().__post_init__()
        self._set_vector("position")
        size = self._set_vector("size")
        if not (size.x > 0 and size.y > 0):
            raise diagram.DegenerateGeometryError(
                f"Rectangle size must be positive, got {size}"
            )
        if self.corner_radius < 0:
            raise diagram.DegenerateGeometryError(
                f"Corner radius must not be negative: {self.corner_radius}"
            )

    @property
    def center(self) -> diagram.Vector2D:
        return self.position + self.size / 2

    def text(
        self,
        text: _text.TextLine | cabc.Iterable[_text.TextLine],
        alignment: _text.Alignment = _text.Alignment(),
        margin: diagram.Vec2ish = _text.TEXT_MARGIN,
        **props: t.Any,
    ) -> Text:
        """Create a text inside of this rectangle.

        Parameters
        ----------
        text
            The text lines.
        alignment
            Where to place the text block. Left, right, top and bottom
            alignments keep ``margin`` to the respective border.
        margin
            Horizontal and vertical distance to the border.
        props
            Further properties of the created :class:`Text`. The color
            defaults to this rectangle's color.
        """
        horizontal, vertical = alignment
        _text.check_alignment(horizontal, vertical)
        margin = diagram.Vector2D(*margin)
        topleft = self.position + margin
        bottomright = self.position + self.size - margin
        x = {
            "left": topleft.x,
            "center": self.center.x,
            "right": bottomright.x,
        }[horizontal]
        y = {
            "top": topleft.y,
            "center": self.center.y,
            "bottom": bottomright.y,
        }[vertical]
        params: dict[str, t.Any] = {
            "horizontal_alignment": horizontal,
            "vertical_alignment": vertical,
            "color": self.color,
            **props,
        }
        return Text((x, y), text, **params)

    def _bounds(self) -> diagram.Box:
        return diagram.Box(self.position, self.size)

    def _encode(self, markers: diagram.MarkerRegistry) -> shapes.Rect:
        del markers
        params: dict[str, t.Any] = self._attributes()
        if self.corner_radius:
            params["rx"] = params["ry"] = diagram.round3(self.corner_radius)
        return shapes.Rect(
            insert=self.position.round3(), size=self.size.round3(), **params
        )


@dataclasses.dataclass(frozen=True)
class Text(_Element):
    """A block of one or more lines of text.

    The ``position`` is the anchor point, the alignments determine in
    which direction the text grows from there.
    """

    position: diagram.Vector2D
    text: tuple[_text.TextLine, ...]
    horizontal_alignment: _text.HorizontalAlignment = "center"
    vertical_alignment: _text.VerticalAlignment = "center"

    def __post_init__(self) -> None:
        super().__post_init__()
        self._set_vector("position")
        object.__setattr__(self, "text", _text.normalize_lines(self.text))
        if not self.text:
            raise diagram.DegenerateGeometryError(
                "Text needs at least one line"
            )
        _text.check_alignment(
            self.horizontal_alignment, self.vertical_alignment
        )

    @property
    def alignment(self) -> _text.Alignment:
        return _text.Alignment(
            self.horizontal_alignment, self.vertical_alignment
        )

    @property
    def size(self) -> diagram.Vector2D:
        """Return the estimated size of the rendered text."""
        return _text.estimate_text_size(self.text)

    def _top_left(self) -> diagram.Vector2D:
        factor = diagram.Vector2D(
            {"left": 0, "center": 0.5, "right": 1}[self.horizontal_alignment],
            {"top": 0, "center": 0.5, "bottom": 1}[self.vertical_alignment],
        )
        return self.position - self.size @ factor

    def _bounds(self) -> diagram.Box:
        return diagram.Box(self._top_left(), self.size)

    def _encode(self, markers: diagram.MarkerRegistry) -> svgtext.Text:
        del markers
        text = svgtext.Text(
            "",
            text_anchor=_text.text_anchor(self.horizontal_alignment),
            dominant_baseline="middle",
            **self._attributes(),
        )
        x = self.position.x
        y = self._top_left().y + _text.LINE_HEIGHT / 2
        for line in self.text:
            insert = diagram.Vector2D(x, y).round3()
            text.add(_text.encode_text_line(line, insert))
            y += _text.LINE_HEIGHT
        return text


@dataclasses.dataclass(frozen=True)
class Polygon(_Element):
    """A closed shape through three or more points."""

    points: tuple[diagram.Vector2D, ...]

    def __post_init__(self) -> None:
        super().__post_init__()
        points = tuple(diagram.Vector2D(*p) for p in self.points)
        if len(points) < 3:
            raise diagram.DegenerateGeometryError(
                f"A polygon needs at least three points, got {len(points)}"
            )
        object.__setattr__(self, "points", points)

    def _bounds(self) -> diagram.Box:
        return diagram.union(diagram.bounding_box(p, p) for p in self.points)

    def _encode(self, markers: diagram.MarkerRegistry) -> shapes.Polygon:
        del markers
        return shapes.Polygon(
            points=[p.round3() for p in self.points], **self._attributes()
        )
