# SPDX-FileCopyrightText: Copyright DB InfraGO AG
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import math

import pytest

from svgdiagrams import diagram

LEFT_BOX = diagram.Rectangle((0, 0), (100, 50))
RIGHT_BOX = diagram.Rectangle((200, 0), (100, 50))


@pytest.mark.parametrize(
    ["marker", "start", "end"],
    [
        ((), (100, 25), (200, 25)),
        ("end", (100, 25), (190, 25)),
        ("start", (110, 25), (200, 25)),
        (("start", "end"), (110, 25), (190, 25)),
    ],
)
def test_connection_line_leaves_room_for_markers(marker, start, end):
    line = diagram.connection_line(
        LEFT_BOX, "right", RIGHT_BOX, "left", marker=marker
    )

    assert line.start == pytest.approx(start)
    assert line.end == pytest.approx(end)


def test_connection_line_length_is_gap_minus_markers():
    gap = RIGHT_BOX.position.x - (LEFT_BOX.position.x + LEFT_BOX.size.x)

    line = diagram.connection_line(
        LEFT_BOX, "right", RIGHT_BOX, "left", marker=["start", "end"]
    )

    assert line.length == pytest.approx(gap - 2 * diagram.ARROW_LENGTH)


def test_connection_line_defaults_to_an_end_arrow():
    line = diagram.connection_line(LEFT_BOX, "right", RIGHT_BOX, "left")

    assert line.marker == ("end",)
    assert line.marker_style == "arrow"


def test_connection_line_passes_on_properties():
    line = diagram.connection_line(
        LEFT_BOX,
        "bottom",
        RIGHT_BOX,
        "bottom",
        color="green",
        classes="dashed",
        marker=(),
    )

    assert line.start == (50, 50)
    assert line.end == (250, 50)
    assert line.color == "green"
    assert line.classes == ("dashed",)


def test_connection_line_with_dot_markers():
    line = diagram.connection_line(
        LEFT_BOX,
        "right",
        RIGHT_BOX,
        "left",
        marker=("start", "end"),
        marker_style="dot",
    )

    assert line.length == pytest.approx(100 - 2 * diagram.DOT_RADIUS)


def test_connection_line_between_text_and_circle():
    circle = diagram.Circle((0, 100), 10)
    text = diagram.Text((0, 0), "x", vertical_alignment="top")

    line = diagram.connection_line(text, "bottom", circle, "top")

    assert line.start == pytest.approx((0, diagram.LINE_HEIGHT))
    assert line.end == pytest.approx((0, 90 - diagram.ARROW_LENGTH))


class TestDiagonalLine:
    def test_circles_on_a_horizontal_axis(self):
        a = diagram.Circle((0, 0), 16)
        b = diagram.Circle((200, 0), 16)

        line = diagram.diagonal_line(a, b, marker=())

        assert line.start == pytest.approx((16, 0))
        assert line.end == pytest.approx((184, 0))

    def test_default_end_arrow(self):
        a = diagram.Circle((0, 0), 16)
        b = diagram.Circle((200, 0), 16)

        line = diagram.diagonal_line(a, b)

        assert line.end == pytest.approx((200 - 16 - diagram.ARROW_LENGTH, 0))

    @pytest.mark.parametrize(
        "center", [(30, 40), (-30, 40), (0, -50), (100, 1)]
    )
    def test_ends_lie_on_the_circles(self, center):
        a = diagram.Circle((0, 0), 5)
        b = diagram.Circle(center, 7)

        line = diagram.diagonal_line(a, b, marker=())

        assert math.isclose((line.start - a.center).length, 5)
        assert math.isclose((line.end - b.center).length, 7)
        distance = (b.center - a.center).length
        assert math.isclose(line.length, distance - 12)

    def test_ellipses(self):
        a = diagram.Ellipse((0, 0), (20, 10))
        b = diagram.Ellipse((0, 100), (20, 10))

        line = diagram.diagonal_line(a, b, marker=("start", "end"))

        assert line.start == pytest.approx((0, 20))
        assert line.end == pytest.approx((0, 80))


@pytest.mark.parametrize(
    ["offset", "expected"],
    [
        ((0, -8), ("center", "bottom")),
        ((0, 8), ("center", "top")),
        ((8, 0), ("left", "center")),
        ((-8, 0), ("right", "center")),
        ((5, 5), ("left", "top")),
        ((-5, -5), ("right", "bottom")),
        ((1, 8), ("center", "top")),
        ((2, 5), ("left", "top")),
        ((-5, 1), ("right", "center")),
    ],
)
def test_determine_alignment(offset, expected):
    assert diagram.determine_alignment(offset) == expected
