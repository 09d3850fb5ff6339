# SPDX-FileCopyrightText: Copyright DB InfraGO AG
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import itertools

import pytest

from svgdiagrams import diagram

POINTS = [(0, 0), (10, 5), (-3, 7), (4.5, -2)]


@pytest.mark.parametrize(
    ["p1", "p2"], list(itertools.permutations(POINTS, 2))
)
def test_bounding_box_is_independent_of_point_order(p1, p2):
    box = diagram.bounding_box(p1, p2)

    assert box == diagram.bounding_box(p2, p1)
    assert box.size.x >= 0 and box.size.y >= 0
    assert box.contains(p1)
    assert box.contains(p2)


def test_bounding_box_of_a_single_point_is_empty():
    box = diagram.bounding_box((3, 4), (3, 4))

    assert box.pos == (3, 4)
    assert box.size == (0, 0)


def test_box_rejects_negative_sizes():
    with pytest.raises(diagram.DegenerateGeometryError):
        diagram.Box((0, 0), (-1, 5))


def test_box_corners_and_center():
    box = diagram.Box((10, 20), (100, 50))

    assert box.top_left == (10, 20)
    assert box.bottom_right == (110, 70)
    assert box.center == (60, 45)


@pytest.mark.parametrize(
    ["side", "offset", "expected"],
    [
        ("top", 0, (50, 0)),
        ("right", 0, (100, 25)),
        ("bottom", 0, (50, 50)),
        ("left", 0, (0, 25)),
        ("top", 5, (50, -5)),
        ("right", 5, (105, 25)),
        ("bottom", 5, (50, 55)),
        ("left", 5, (-5, 25)),
    ],
)
def test_point_at_side(side, offset, expected):
    box = diagram.Box((0, 0), (100, 50))

    assert box.point_at(side, offset) == expected


def test_point_at_rejects_unknown_sides():
    with pytest.raises(ValueError, match="side"):
        diagram.Box((0, 0), (1, 1)).point_at("middle")


class TestUnion:
    def test_union_encloses_all_boxes(self):
        boxes = [
            diagram.Box((0, 0), (10, 10)),
            diagram.Box((20, -5), (5, 5)),
            diagram.Box((3, 3), (1, 1)),
        ]

        actual = diagram.union(*boxes)

        assert actual == diagram.Box((0, -5), (25, 15))

    def test_union_accepts_iterables(self):
        boxes = [diagram.Box((0, 0), (1, 1)), diagram.Box((4, 4), (1, 1))]

        assert diagram.union(iter(boxes)) == diagram.union(*boxes)
        assert diagram.union(boxes[0], boxes[1:]) == diagram.union(*boxes)

    def test_union_of_one_box_is_that_box(self):
        box = diagram.Box((1, 2), (3, 4))

        assert diagram.union(box) == box

    def test_union_of_nothing_raises(self):
        with pytest.raises(diagram.DegenerateGeometryError):
            diagram.union()
