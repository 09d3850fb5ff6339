# SPDX-FileCopyrightText: Copyright DB InfraGO AG
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import pytest

from svgdiagrams import diagram


def test_plain_text_applies_uppercase_and_flattens_spans():
    line = diagram.join_text(
        "Bcc: ", diagram.uppercase("ietf"), diagram.bold(" <ietf.org>")
    )

    assert diagram.plain_text(line) == "Bcc: IETF <ietf.org>"


def test_normalize_lines_splits_strings_at_line_breaks():
    assert diagram.normalize_lines("a\nb") == ("a", "b")
    assert diagram.normalize_lines(["a\nb"]) == ("a\nb",)

    span = diagram.bold("x")
    assert diagram.normalize_lines(span) == (span,)


def test_invalid_span_styles_are_rejected():
    with pytest.raises(ValueError):
        diagram.TextSpan(("x",), "underline")


@pytest.mark.parametrize(
    ["shorter", "longer"],
    [
        (["a"], ["ab"]),
        (["abc"], ["abc", "d"]),
        (["abc", "d"], ["abc", "de", "f"]),
        ([diagram.bold("ab")], ["abc"]),
        ([], [""]),
    ],
)
def test_size_estimation_is_monotonic(shorter, longer):
    small = diagram.estimate_text_size_with_margin(shorter)
    large = diagram.estimate_text_size_with_margin(longer)

    assert small.x <= large.x
    assert small.y <= large.y
    assert small != large


def test_size_estimation_of_nothing_is_the_margin():
    assert diagram.estimate_text_size([]) == (0, 0)
    assert (
        diagram.estimate_text_size_with_margin([])
        == diagram.DOUBLE_TEXT_MARGIN
    )


def test_text_height_is_proportional_to_line_count():
    lines = ["one", "two", "three"]

    assert diagram.calculate_text_height(lines) == 3 * diagram.LINE_HEIGHT


def test_text_width_counts_displayed_characters():
    line = diagram.join_text("ab", diagram.italic("cd"))

    assert diagram.estimate_text_width(line) == 4 * diagram.CHARACTER_WIDTH


class TestEncoding:
    def test_plain_lines_become_a_single_tspan(self):
        tspan = diagram.encode_text_line("hello", (1, 2))

        svg = tspan.tostring()
        assert tspan.elementname == "tspan"
        assert 'x="1"' in svg and 'y="2"' in svg
        assert ">hello</tspan>" in svg

    def test_bold_spans_set_the_font_weight(self):
        tspan = diagram.encode_text_line(diagram.bold("a", "b"))

        assert tspan.attribs["font-weight"] == "bold"
        assert len(tspan.elements) == 2

    def test_uppercase_spans_transform_their_text(self):
        tspan = diagram.encode_text_line(diagram.uppercase("ietf"))

        assert "IETF" in tspan.tostring()

    def test_uppercase_keeps_nested_formatting(self):
        line = diagram.uppercase("to: ", diagram.bold("ab"))

        tspan = diagram.encode_text_line(line)

        plain, bold = tspan.elements
        assert plain.tostring() == "<tspan>TO: </tspan>"
        assert bold.attribs["font-weight"] == "bold"
        assert ">AB</tspan>" in bold.tostring()
        assert "ab" not in tspan.tostring()

    def test_whitespace_is_preserved_on_request(self):
        line = diagram.join_text(
            diagram.preserve_whitespace("    "), "David"
        )

        svg = diagram.encode_text_line(line).tostring()

        assert 'xml:space="preserve"' in svg
        assert ">    <" in svg
