# SPDX-FileCopyrightText: Copyright DB InfraGO AG
# SPDX-License-Identifier: Apache-2.0
"""The color palette and style classes understood by the stylesheet."""

from __future__ import annotations

__all__ = [
    "COLORS",
    "RGB",
    "STROKE_WIDTH",
    "STYLE_CLASSES",
    "UnknownStyleError",
    "check_classes",
    "check_color",
]

import collections.abc as cabc
import logging
import typing as t

LOGGER = logging.getLogger(__name__)

STROKE_WIDTH = 2.5
"""Default stroke width of lines and shape outlines."""


class UnknownStyleError(ValueError):
    """Raised for colors or classes the stylesheet does not know about."""


class RGB(t.NamedTuple):
    """A color.

    Each color component (red, green, blue) is an integer in the range
    of 0..255 (inclusive). The alpha channel is a float between 0.0 and
    1.0 (inclusive). If it is 1, then the ``str()`` form does not
    include transparency information.
    """

    r: int = 0
    g: int = 0
    b: int = 0
    a: float = 1.0

    def __str__(self) -> str:
        return "#" + self.tohex()

    def tohex(self) -> str:
        assert all(0 <= n <= 255 for n in self[:3])
        assert 0.0 <= self.a <= 1.0
        if self.a >= 1.0:
            return f"{self.r:02X}{self.g:02X}{self.b:02X}"
        return f"{self.r:02X}{self.g:02X}{self.b:02X}{int(self.a * 255):02X}"


#: This dict maps the color names usable on elements to RGB tuples.
#:
#: The names double as CSS classes in the produced SVG. The RGB values
#: are needed wherever CSS cannot reach, i.e. inside marker definitions,
#: and for generating the matching stylesheet.
COLORS: dict[str, RGB] = {
    "text": RGB(33, 37, 41),
    "background": RGB(255, 255, 255),
    "gray": RGB(108, 117, 125),
    "brown": RGB(121, 85, 72),
    "red": RGB(220, 53, 69),
    "orange": RGB(253, 126, 20),
    "yellow": RGB(255, 193, 7),
    "green": RGB(40, 167, 69),
    "blue": RGB(0, 123, 255),
    "purple": RGB(111, 66, 193),
    "pink": RGB(232, 62, 140),
}

#: The style modifier classes, mapped to the CSS they stand for.
#:
#: ``alpha`` and ``beta`` control the opacity of filled shapes, the
#: others control stroke width, filling, line joins and dashing.
STYLE_CLASSES: dict[str, dict[str, str]] = {
    "thin": {"stroke-width": f"{STROKE_WIDTH / 2}"},
    "thick": {"stroke-width": f"{STROKE_WIDTH * 2}"},
    "filled": {"fill": "currentColor"},
    "angular": {"stroke-linejoin": "miter"},
    "alpha": {"fill-opacity": "0.25"},
    "beta": {"fill-opacity": "0.5"},
    "dashed": {"stroke-dasharray": f"{STROKE_WIDTH * 3} {STROKE_WIDTH * 2}"},
}


def check_color(color: str) -> RGB:
    """Look up the RGB value of a palette color.

    Raises
    ------
    UnknownStyleError
        If ``color`` is not part of the palette.
    """
    try:
        return COLORS[color]
    except KeyError:
        raise UnknownStyleError(
            f"Unknown color {color!r}, expected one of: {', '.join(COLORS)}"
        ) from None


def check_classes(classes: str | cabc.Iterable[str]) -> tuple[str, ...]:
    """Split and validate style classes.

    ``classes`` may be a whitespace-separated string or an iterable of
    class names. Duplicates are dropped, the order is kept.
    """
    if isinstance(classes, str):
        classes = classes.split()

    result: list[str] = []
    for cls in classes:
        if cls not in STYLE_CLASSES:
            raise UnknownStyleError(
                f"Unknown style class {cls!r},"
                f" expected one of: {', '.join(STYLE_CLASSES)}"
            )
        if cls in result:
            LOGGER.debug("Ignoring duplicate style class %r", cls)
            continue
        result.append(cls)
    return tuple(result)
