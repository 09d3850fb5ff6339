# SPDX-FileCopyrightText: Copyright DB InfraGO AG
# SPDX-License-Identifier: Apache-2.0
"""Lines that connect shapes, and the placement of their labels."""

from __future__ import annotations

__all__ = [
    "AXIS_DOMINANCE",
    "connection_line",
    "determine_alignment",
    "diagonal_line",
]

import typing as t

from svgdiagrams import diagram

AXIS_DOMINANCE = 4
"""Ratio beyond which an offset counts as purely horizontal/vertical."""


def determine_alignment(offset: diagram.Vec2ish) -> diagram.Alignment:
    """Choose the alignment of a text that is placed at ``offset``.

    The text grows away from the point it is offset from. If one
    component of the offset dominates the other one by more than
    :data:`AXIS_DOMINANCE`, the text is centered on the other axis, so
    that labels of nearly axis-aligned lines don't look diagonal.
    """
    offset = diagram.Vector2D(*offset)
    absolute = abs(offset)

    horizontal: diagram.HorizontalAlignment
    if absolute.y > absolute.x * AXIS_DOMINANCE:
        horizontal = "center"
    elif offset.x > 0:
        horizontal = "left"
    else:
        horizontal = "right"

    vertical: diagram.VerticalAlignment
    if absolute.x > absolute.y * AXIS_DOMINANCE:
        vertical = "center"
    elif offset.y > 0:
        vertical = "top"
    else:
        vertical = "bottom"

    return diagram.Alignment(horizontal, vertical)


def connection_line(
    start_element: diagram.VisualElement,
    start_side: diagram.BoxSide,
    end_element: diagram.VisualElement,
    end_side: diagram.BoxSide,
    **props: t.Any,
) -> diagram.Line:
    """Connect two elements at the given sides of their bounding boxes.

    Each end keeps the distance its marker needs, so that the tip of an
    arrowhead touches the element. Unless overridden with ``marker``,
    the line gets an arrowhead at its end.
    """
    props.setdefault("marker", "end")
    marker = props["marker"]
    style = props.get("marker_style", "arrow")
    start = start_element.bounds.point_at(
        start_side, diagram.marker_offset(marker, "start", style)
    )
    end = end_element.bounds.point_at(
        end_side, diagram.marker_offset(marker, "end", style)
    )
    return diagram.Line(start, end, **props)


def diagonal_line(
    start_element: diagram.Circle | diagram.Ellipse,
    end_element: diagram.Circle | diagram.Ellipse,
    **props: t.Any,
) -> diagram.Line:
    """Connect two round elements along the line between their centers.

    Both ends lie on the outline of their element, no matter at which
    angle the elements are placed relative to each other. Unless
    overridden with ``marker``, the line gets an arrowhead at its end.
    """
    props.setdefault("marker", "end")
    marker = props["marker"]
    style = props.get("marker_style", "arrow")
    start = start_element.point_towards(
        end_element.center, diagram.marker_offset(marker, "start", style)
    )
    end = end_element.point_towards(
        start_element.center, diagram.marker_offset(marker, "end", style)
    )
    return diagram.Line(start, end, **props)
