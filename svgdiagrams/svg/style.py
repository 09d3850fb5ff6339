# SPDX-FileCopyrightText: Copyright DB InfraGO AG
# SPDX-License-Identifier: Apache-2.0
"""Stylesheet generator for SVG diagrams.

The produced SVG only refers to colors and style modifiers by their
CSS class names. This module renders the stylesheet that gives these
classes their meaning, e.g. for embedding it into standalone files.
"""

from __future__ import annotations

import collections.abc as cabc
import logging

from svgdiagrams import diagram

logger = logging.getLogger(__name__)

SHAPES = ("line", "rect", "circle", "ellipse", "polygon")


def _rule(selector: str, declarations: cabc.Mapping[str, str]) -> str:
    body = "; ".join(f"{k}: {v}" for k, v in declarations.items())
    return f"{selector} {{ {body} }}"


def generate_stylesheet() -> str:
    """Render the CSS for all palette colors and style classes."""
    rules = [
        _rule(
            ", ".join(SHAPES),
            {
                "fill": "none",
                "stroke": "currentColor",
                "stroke-width": str(diagram.STROKE_WIDTH),
                "stroke-linecap": "round",
                "stroke-linejoin": "round",
            },
        ),
        _rule("text", {"fill": "currentColor", "stroke": "none"}),
    ]
    for name, color in diagram.COLORS.items():
        rules.append(_rule(f".{name}", {"color": str(color)}))
    for name, declarations in diagram.STYLE_CLASSES.items():
        rules.append(_rule(f".{name}", declarations))

    logger.debug("Generated stylesheet with %d rules", len(rules))
    return "\n".join(rules)
