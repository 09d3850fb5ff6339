# SPDX-FileCopyrightText: Copyright DB InfraGO AG
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

__all__ = [
    "DiagramMetadata",
    "SVGDiagram",
    "VIEWBOX_MARGIN",
    "drawing_defaults",
    "generate_svg",
    "print_svg",
]

import collections.abc as cabc
import contextlib
import dataclasses
import logging
import sys
import typing as t

from svgdiagrams import diagram

LOGGER = logging.getLogger(__name__)

VIEWBOX_MARGIN = 10
"""Padding around the elements, so that strokes and markers fit in."""

_DRAWING_DEFAULTS: dict[str, t.Any] = {}


class SVGDiagram:
    """An SVG diagram that can be drawn on and serialized.

    SVG diagram object that takes the ``metadata`` of a diagram via the
    :class:`DiagramMetadata` and a sequence of elements that are drawn
    in the given order on the diagram canvas of type :class:`Drawing`.
    Later elements are drawn on top of earlier ones.

    Example::

        circle = diagram.Circle((0, 0), 16, color="green")
        square = diagram.Rectangle((100, -16), (32, 32), color="blue")
        line = diagram.connection_line(circle, "right", square, "left")
        svg = SVGDiagram.from_elements(line, circle, square).to_string()
    """

    def __init__(
        self,
        metadata: DiagramMetadata,
        elements: cabc.Iterable[diagram.VisualElement],
        **drawing_params: t.Any,
    ) -> None:
        params = {**_DRAWING_DEFAULTS, **drawing_params}
        self.drawing = Drawing(metadata, **params)
        for element in elements:
            self.draw_element(element)

    @classmethod
    def from_elements(
        cls,
        *elements: diagram.VisualElement,
        name: str = "Untitled Diagram",
        class_: str | None = None,
        margin: float | int = VIEWBOX_MARGIN,
        **drawing_params: t.Any,
    ) -> SVGDiagram:
        """Create an SVGDiagram that is sized to fit all ``elements``.

        Raises
        ------
        DegenerateGeometryError
            If no elements were given.
        """
        if not elements:
            raise diagram.DegenerateGeometryError(
                "Cannot create a diagram without elements"
            )
        bounds = diagram.union(e.bounds for e in elements)
        metadata = DiagramMetadata(
            bounds.pos, bounds.size, name, class_, margin=margin
        )
        LOGGER.debug("Sized diagram %r to %s", name, bounds)
        return cls(metadata, elements, **drawing_params)

    def draw_element(self, element: diagram.VisualElement) -> None:
        """Draw the given ``element`` on the underlaying ``Drawing``."""
        self.drawing.draw_element(element)

    def save_drawing(
        self,
        filename: str | None = None,
        pretty: bool = False,
        indent: int = 2,
    ) -> None:
        """Write the underlying ``Drawing`` to an SVG file."""
        self.drawing.save_as(filename=filename, pretty=pretty, indent=indent)

    def to_string(self) -> str:
        """Return a string representation of the underlying ``Drawing``."""
        return self.drawing.to_string()


@dataclasses.dataclass
class DiagramMetadata:
    """Holds metadata about a diagram.

    The metadata of a diagram includes the diagram-name, ``(x, y)``
    position, ``(w, h)`` size, the viewbox string and the diagram class.
    Position and size are padded by ``margin`` on all sides.
    """

    pos: tuple[float, float]
    size: tuple[float, float]
    viewbox: str
    name: str
    class_: str | None

    def __init__(
        self,
        pos: diagram.Vec2ish,
        size: diagram.Vec2ish,
        name: str = "Untitled Diagram",
        class_: str | None = None,
        *,
        margin: float | int = VIEWBOX_MARGIN,
    ) -> None:
        if len(pos) != 2:
            raise ValueError(
                f"Invalid position: '{pos}'. Needs to be of format (x, y)."
            )
        if len(size) != 2:
            raise ValueError(
                f"Invalid size: '{size}'. Needs to be of format (x, y)."
            )
        if margin < 0:
            raise ValueError(f"Margin must not be negative: {margin}")

        padded_pos = diagram.Vector2D(*pos) - (margin, margin)
        padded_size = diagram.Vector2D(*size) + (2 * margin, 2 * margin)
        self.pos = tuple(padded_pos.round3())
        self.size = tuple(padded_size.round3())
        self.viewbox = " ".join(map(str, self.pos + self.size))
        self.class_ = class_
        self.name = name


def generate_svg(*elements: diagram.VisualElement, **kw: t.Any) -> str:
    """Serialize ``elements`` into a complete SVG document.

    The elements are drawn in the given order, i.e. the first element
    ends up at the bottom. Connecting lines should therefore be passed
    before the shapes they connect.

    Keyword arguments are passed on to :meth:`SVGDiagram.from_elements`.
    """
    return SVGDiagram.from_elements(*elements, **kw).to_string()


def print_svg(
    *elements: diagram.VisualElement,
    file: t.TextIO | None = None,
    **kw: t.Any,
) -> None:
    """Write the SVG document of ``elements`` to ``file``.

    Nothing is written if the generation fails. The default ``file`` is
    standard output, from where the build pipeline picks it up.
    """
    svg = generate_svg(*elements, **kw)
    if file is None:
        file = sys.stdout
    file.write(svg + "\n")


@contextlib.contextmanager
def drawing_defaults(**params: t.Any) -> cabc.Iterator[None]:
    """Temporarily change the default parameters of new drawings.

    This affects diagrams that are created while the context is active,
    including those created by diagram scripts through
    :func:`print_svg`. Explicitly passed parameters still take
    precedence.
    """
    old = dict(_DRAWING_DEFAULTS)
    _DRAWING_DEFAULTS.update(params)
    try:
        yield
    finally:
        _DRAWING_DEFAULTS.clear()
        _DRAWING_DEFAULTS.update(old)


from .drawing import Drawing
