# SPDX-FileCopyrightText: Copyright DB InfraGO AG
# SPDX-License-Identifier: Apache-2.0
"""Formatted text lines and the estimation of their rendered size.

SVG cannot reflow text, so shapes that contain text have to be sized
before the text is drawn. The estimation assumes a fixed-pitch font,
which slightly overestimates the width of proportional fonts.
"""

from __future__ import annotations

__all__ = [
    "Alignment",
    "CHARACTER_WIDTH",
    "DOUBLE_TEXT_MARGIN",
    "FONT_SIZE",
    "HorizontalAlignment",
    "LINE_HEIGHT",
    "LINE_TO_TEXT_DISTANCE",
    "TEXT_MARGIN",
    "TextLine",
    "TextSpan",
    "VerticalAlignment",
    "bold",
    "calculate_text_height",
    "check_alignment",
    "encode_text_line",
    "estimate_text_size",
    "estimate_text_size_with_margin",
    "estimate_text_width",
    "italic",
    "join_text",
    "normalize_lines",
    "plain_text",
    "preserve_whitespace",
    "uppercase",
]

import collections.abc as cabc
import dataclasses
import typing as t

from svgwrite import text as svgtext

from svgdiagrams import diagram

FONT_SIZE = 16
"""Font size (px) the estimation is calibrated for."""
CHARACTER_WIDTH = 0.6 * FONT_SIZE
"""Estimated width of a single character."""
LINE_HEIGHT = 1.5 * FONT_SIZE
"""Vertical distance between two consecutive lines."""
TEXT_MARGIN = diagram.Vector2D(12, 8)
"""Space between a text block and the border of its container."""
DOUBLE_TEXT_MARGIN = TEXT_MARGIN * 2
LINE_TO_TEXT_DISTANCE = 8
"""Default distance between a line and a text placed beside it."""

HorizontalAlignment = t.Literal["left", "center", "right"]
VerticalAlignment = t.Literal["top", "center", "bottom"]
SpanStyle = t.Literal["bold", "italic", "uppercase", "preserve", None]

_TEXT_ANCHORS = {"left": "start", "center": "middle", "right": "end"}
_SPAN_ATTRIBUTES: dict[SpanStyle, dict[str, str]] = {
    "bold": {"font_weight": "bold"},
    "italic": {"font_style": "italic"},
    "uppercase": {},
    "preserve": {"xml:space": "preserve"},
    None: {},
}


class Alignment(t.NamedTuple):
    """How a text block is placed relative to its anchor point."""

    horizontal: HorizontalAlignment = "center"
    vertical: VerticalAlignment = "center"


@dataclasses.dataclass(frozen=True)
class TextSpan:
    """A run of text with uniform formatting."""

    parts: tuple[TextLine, ...]
    style: SpanStyle = None

    def __post_init__(self) -> None:
        if self.style not in _SPAN_ATTRIBUTES:
            raise ValueError(f"Invalid text style: {self.style!r}")


TextLine = t.Union[str, TextSpan]


def bold(*parts: TextLine) -> TextSpan:
    return TextSpan(parts, "bold")


def italic(*parts: TextLine) -> TextSpan:
    return TextSpan(parts, "italic")


def uppercase(*parts: TextLine) -> TextSpan:
    return TextSpan(parts, "uppercase")


def preserve_whitespace(*parts: TextLine) -> TextSpan:
    """Keep consecutive spaces, e.g. to indent continuation lines."""
    return TextSpan(parts, "preserve")


def join_text(*parts: TextLine) -> TextSpan:
    """Concatenate differently formatted parts into one line."""
    return TextSpan(parts)


def plain_text(line: TextLine) -> str:
    """Return the characters of ``line`` as they will be displayed."""
    if isinstance(line, str):
        return line
    text = "".join(plain_text(p) for p in line.parts)
    if line.style == "uppercase":
        return text.upper()
    return text


def normalize_lines(
    text: TextLine | cabc.Iterable[TextLine],
) -> tuple[TextLine, ...]:
    """Convert the various accepted text arguments into a tuple of lines.

    A plain string is split at line breaks.
    """
    if isinstance(text, str):
        return tuple(text.split("\n"))
    if isinstance(text, TextSpan):
        return (text,)
    return tuple(text)


def estimate_text_width(line: TextLine) -> float:
    return len(plain_text(line)) * CHARACTER_WIDTH


def calculate_text_height(lines: cabc.Sequence[TextLine]) -> float:
    return len(lines) * LINE_HEIGHT


def estimate_text_size(lines: cabc.Sequence[TextLine]) -> diagram.Vector2D:
    """Estimate width and height of a block of ``lines``."""
    width = max(map(estimate_text_width, lines), default=0)
    return diagram.Vector2D(width, calculate_text_height(lines))


def estimate_text_size_with_margin(
    lines: cabc.Sequence[TextLine],
) -> diagram.Vector2D:
    """Estimate the size of a box that fits ``lines`` plus margins.

    The result grows monotonically with the number of lines and the
    length of the longest line.
    """
    return estimate_text_size(lines) + DOUBLE_TEXT_MARGIN


def encode_text_line(
    line: TextLine,
    insert: diagram.Vec2ish | None = None,
    *,
    upper: bool = False,
) -> svgtext.TSpan:
    """Create the ``<tspan>`` for one (formatted) line of text.

    Nested spans keep their own formatting. ``upper`` is set for the
    parts of an uppercase span and applies to all text below it.
    """
    if isinstance(line, str):
        return svgtext.TSpan(line.upper() if upper else line, insert=insert)

    upper = upper or line.style == "uppercase"
    tspan = svgtext.TSpan("", insert=insert, **_SPAN_ATTRIBUTES[line.style])
    for part in line.parts:
        tspan.add(encode_text_line(part, upper=upper))
    return tspan


def check_alignment(
    horizontal: HorizontalAlignment, vertical: VerticalAlignment
) -> None:
    """Raise a ValueError if either alignment is unknown."""
    text_anchor(horizontal)
    if vertical not in ("top", "center", "bottom"):
        raise ValueError(f"Invalid vertical alignment: {vertical!r}")


def text_anchor(alignment: HorizontalAlignment) -> str:
    try:
        return _TEXT_ANCHORS[alignment]
    except KeyError:
        raise ValueError(
            f"Invalid horizontal alignment: {alignment!r}"
        ) from None
