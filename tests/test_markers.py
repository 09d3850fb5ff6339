# SPDX-FileCopyrightText: Copyright DB InfraGO AG
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import pytest

from svgdiagrams import diagram


def test_all_marker_styles_are_registered():
    assert set(diagram.marker_factories) >= {
        "ArrowStartMark",
        "ArrowEndMark",
        "DotMark",
    }


def test_unknown_markers_are_rejected():
    with pytest.raises(diagram.UnknownStyleError):
        diagram.marker_factories["TriangleMark"]


@pytest.mark.parametrize(
    ["style", "end", "expected"],
    [
        ("arrow", "start", "ArrowStartMark"),
        ("arrow", "end", "ArrowEndMark"),
        ("dot", "start", "DotMark"),
        ("dot", "end", "DotMark"),
    ],
)
def test_marker_name(style, end, expected):
    assert diagram.marker_name(style, end) == expected


def test_marker_name_rejects_unknown_styles():
    with pytest.raises(diagram.UnknownStyleError):
        diagram.marker_name("diamond", "end")


@pytest.mark.parametrize(
    ["marker", "expected"],
    [
        (None, ()),
        ((), ()),
        ("end", ("end",)),
        (["start", "end", "start"], ("start", "end")),
    ],
)
def test_normalize_markers(marker, expected):
    assert diagram.normalize_markers(marker) == expected


def test_normalize_markers_rejects_unknown_ends():
    with pytest.raises(diagram.UnknownStyleError):
        diagram.normalize_markers(["middle"])


@pytest.mark.parametrize(
    ["markers", "end", "style", "expected"],
    [
        ("end", "end", "arrow", diagram.ARROW_LENGTH),
        ("end", "start", "arrow", 0),
        ((), "end", "arrow", 0),
        (("start", "end"), "start", "dot", diagram.DOT_RADIUS),
    ],
)
def test_marker_offset(markers, end, style, expected):
    assert diagram.marker_offset(markers, end, style) == expected


class TestMarkerRegistry:
    def test_markers_are_defined_once_per_color(self):
        registry = diagram.MarkerRegistry()

        first = registry.require("ArrowEndMark", "green")
        second = registry.require("ArrowEndMark", "green")

        assert first == second == "ArrowEndMark_28A745"
        assert len(registry) == 1
        assert first in registry

    def test_different_colors_get_different_definitions(self):
        registry = diagram.MarkerRegistry()

        registry.require("ArrowEndMark", "green")
        registry.require("ArrowEndMark", "blue")
        registry.require("ArrowStartMark", "green")

        ids = [marker.attribs["id"] for marker in registry]
        assert ids == [
            "ArrowEndMark_28A745",
            "ArrowEndMark_007BFF",
            "ArrowStartMark_28A745",
        ]

    def test_marker_definitions_are_filled_with_their_color(self):
        registry = diagram.MarkerRegistry()

        registry.require("DotMark", "red")

        (marker,) = registry
        assert 'fill="#DC3545"' in marker.tostring()

    def test_url_references_the_definition(self):
        registry = diagram.MarkerRegistry()

        url = registry.url("ArrowEndMark", "text")

        assert url == "url(#ArrowEndMark_212529)"

    def test_registries_are_independent(self):
        one = diagram.MarkerRegistry()
        two = diagram.MarkerRegistry()

        one.require("ArrowEndMark", "green")

        assert len(two) == 0

    def test_unknown_colors_are_rejected(self):
        registry = diagram.MarkerRegistry()

        with pytest.raises(diagram.UnknownStyleError):
            registry.require("ArrowEndMark", "chartreuse")
