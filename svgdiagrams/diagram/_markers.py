# SPDX-FileCopyrightText: Copyright DB InfraGO AG
# SPDX-License-Identifier: Apache-2.0
"""Line end decorations and the per-document registry for them.

SVG markers do not inherit the stroke color of the line referencing
them, so every marker is defined once per color it is used with.
"""

from __future__ import annotations

__all__ = [
    "ARROW_LENGTH",
    "ARROW_WIDTH",
    "DOT_RADIUS",
    "Marker",
    "MarkerFactories",
    "MarkerFactory",
    "MarkerRegistry",
    "MarkerStyle",
    "marker_factories",
    "marker_name",
    "marker_offset",
    "normalize_markers",
]

import collections.abc as cabc
import dataclasses
import logging
import re
import typing as t

from svgwrite import container, path, shapes

from svgdiagrams import diagram

LOGGER = logging.getLogger(__name__)

Marker = t.Literal["start", "end"]
MarkerStyle = t.Literal["arrow", "dot"]

ARROW_LENGTH = 10
"""Distance between the base and the tip of an arrowhead."""
ARROW_WIDTH = 8
"""Width of an arrowhead at its base."""
DOT_RADIUS = 3.5
"""Radius of a dot marker."""


@dataclasses.dataclass(frozen=True)
class MarkerFactory:
    function: cabc.Callable[..., container.Marker]
    offset: float
    """How far the marker reaches beyond the end of its line."""


class MarkerFactories(cabc.Mapping[str, MarkerFactory]):
    def __init__(self) -> None:
        self.__markers: dict[str, MarkerFactory] = {}

    def __call__(
        self,
        func: cabc.Callable | None = None,
        *,
        offset: float = 0,
    ) -> cabc.Callable:
        def decorator(func: cabc.Callable) -> cabc.Callable:
            symbol_name = re.sub(
                "(?:^|_)([a-z])",
                lambda m: m.group(1).capitalize(),
                func.__name__,
            )
            self.__markers[symbol_name] = MarkerFactory(func, offset)
            return func

        if func is None:
            return decorator
        return decorator(func)

    def __iter__(self) -> cabc.Iterator[str]:
        yield from self.__markers

    def __len__(self) -> int:
        return len(self.__markers)

    def __getitem__(self, k: str) -> MarkerFactory:
        try:
            return self.__markers[k]
        except KeyError:
            raise diagram.UnknownStyleError(
                f"Unknown marker requested: {k}"
            ) from None


marker_factories = MarkerFactories()


def _make_marker(
    ref_pts: tuple[float, float],
    size: tuple[float, float],
    *,
    id_: str,
    d: str,
    **kwargs: t.Any,
) -> container.Marker:
    marker = container.Marker(
        insert=ref_pts,
        size=size,
        id_=id_,
        orient="auto",
        markerUnits="userSpaceOnUse",
    )
    marker.add(path.Path(d=d, **kwargs))
    return marker


@marker_factories(offset=ARROW_LENGTH)
def arrow_start_mark(id_: str, /, **kw: t.Any) -> container.Marker:
    d = (
        f"M {ARROW_LENGTH},0 0,{ARROW_WIDTH / 2}"
        f" {ARROW_LENGTH},{ARROW_WIDTH} Z"
    )
    return _make_marker(
        (ARROW_LENGTH, ARROW_WIDTH / 2),
        (ARROW_LENGTH, ARROW_WIDTH),
        id_=id_,
        d=d,
        **kw,
    )


@marker_factories(offset=ARROW_LENGTH)
def arrow_end_mark(id_: str, /, **kw: t.Any) -> container.Marker:
    d = f"M 0,0 {ARROW_LENGTH},{ARROW_WIDTH / 2} 0,{ARROW_WIDTH} Z"
    return _make_marker(
        (0, ARROW_WIDTH / 2),
        (ARROW_LENGTH, ARROW_WIDTH),
        id_=id_,
        d=d,
        **kw,
    )


@marker_factories(offset=DOT_RADIUS)
def dot_mark(id_: str, /, **kw: t.Any) -> container.Marker:
    marker = container.Marker(
        insert=(DOT_RADIUS, DOT_RADIUS),
        size=(2 * DOT_RADIUS, 2 * DOT_RADIUS),
        id_=id_,
        orient="auto",
        markerUnits="userSpaceOnUse",
    )
    marker.add(
        shapes.Circle(center=(DOT_RADIUS, DOT_RADIUS), r=DOT_RADIUS, **kw)
    )
    return marker


def marker_name(style: MarkerStyle, end: Marker) -> str:
    """Return the factory name for the given marker style and line end."""
    if style == "arrow":
        return "ArrowStartMark" if end == "start" else "ArrowEndMark"
    if style == "dot":
        return "DotMark"
    raise diagram.UnknownStyleError(f"Unknown marker style: {style!r}")


def normalize_markers(
    marker: Marker | cabc.Iterable[Marker] | None,
) -> tuple[Marker, ...]:
    """Convert a ``marker`` argument into a tuple of line ends."""
    if marker is None:
        return ()
    if isinstance(marker, str):
        marker = (marker,)

    ends: list[Marker] = []
    for end in marker:
        if end not in ("start", "end"):
            raise diagram.UnknownStyleError(
                f"Invalid marker {end!r}, expected 'start' or 'end'"
            )
        if end not in ends:
            ends.append(end)
    return tuple(ends)


def marker_offset(
    markers: Marker | cabc.Iterable[Marker] | None,
    end: Marker,
    style: MarkerStyle = "arrow",
) -> float:
    """Return how far the marker at ``end`` reaches beyond the line.

    Connectors shorten their lines by this amount, so that the tip of an
    arrowhead instead of its base touches the connected shape. Ends
    without a marker have an offset of zero.
    """
    if end not in normalize_markers(markers):
        return 0
    return marker_factories[marker_name(style, end)].offset


class MarkerRegistry:
    """The marker definitions used by one document.

    A fresh registry is created for every serialization. Requiring the
    same marker with the same color again returns the identifier of the
    existing definition.
    """

    def __init__(self) -> None:
        self.__definitions: dict[str, container.Marker] = {}

    def require(self, name: str, color: str) -> str:
        """Return the ID of the ``name`` marker in ``color``.

        The definition is created on first use.
        """
        rgb = diagram.check_color(color)
        marker_id = f"{name}_{rgb.tohex()}"
        if marker_id not in self.__definitions:
            factory = marker_factories[name]
            self.__definitions[marker_id] = factory.function(
                marker_id, fill=str(rgb), stroke="none"
            )
            LOGGER.debug("Registered marker %s", marker_id)
        return marker_id

    def url(self, name: str, color: str) -> str:
        """Return a ``url(#...)`` reference to the marker."""
        return f"url(#{self.require(name, color)})"

    def __contains__(self, marker_id: object) -> bool:
        return marker_id in self.__definitions

    def __iter__(self) -> cabc.Iterator[container.Marker]:
        return iter(self.__definitions.values())

    def __len__(self) -> int:
        return len(self.__definitions)
