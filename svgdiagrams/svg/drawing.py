# SPDX-FileCopyrightText: Copyright DB InfraGO AG
# SPDX-License-Identifier: Apache-2.0
"""Custom extensions to the svgwrite ``Drawing`` object."""

from __future__ import annotations

import os
import re
import typing as t

from svgwrite import drawing

from svgdiagrams import diagram

from . import generate, style

DEBUG = "SVGDIAGRAMS_SVG_DEBUG" in os.environ
"""Debug flag to render the bounding boxes of all elements."""
DEFAULT_FONT_FAMILY = "'Open Sans','Segoe UI',Arial,sans-serif"


class Drawing:
    """The main container that stores all svg elements.

    Every Drawing owns a fresh :class:`~svgdiagrams.diagram.MarkerRegistry`,
    which collects the marker definitions while the elements are drawn.
    """

    def __init__(
        self,
        metadata: generate.DiagramMetadata,
        *,
        font_family: str = DEFAULT_FONT_FAMILY,
        embed_stylesheet: bool = False,
    ):
        superparams: dict[str, t.Any] = {
            "filename": f"{metadata.name}.svg",
            "font-family": font_family,
            "font-size": f"{diagram.FONT_SIZE}px",
            "size": metadata.size,
            "viewBox": metadata.viewbox,
        }
        if metadata.class_:
            superparams["class_"] = re.sub(r"\s+", "", metadata.class_)

        self.__drawing = drawing.Drawing(**superparams)
        self.markers = diagram.MarkerRegistry()
        if embed_stylesheet:
            self.__drawing.embed_stylesheet(style.generate_stylesheet())

    @property
    def filename(self) -> str:
        """Return the filename of the SVG."""
        return self.__drawing.filename

    @filename.setter
    def filename(self, name: str) -> None:
        self.__drawing.filename = name

    def save_as(self, filename: str | None = None, **kw: t.Any) -> None:
        """Write the SVG to a file.

        If ``filename`` wasn't given the underlying ``filename`` is
        taken.
        """
        self._deploy_defs()
        kw["filename"] = filename or self.__drawing.filename
        return self.__drawing.saveas(**kw)

    def to_string(self) -> str:
        """Return a string representation of the SVG."""
        self._deploy_defs()
        return self.__drawing.tostring()

    def __repr__(self) -> str:
        return self.__drawing._repr_svg_()

    def draw_element(self, element: diagram.VisualElement) -> None:
        """Draw an element on top of everything drawn so far."""
        self.__drawing.add(element.encode(self.markers))
        if DEBUG:
            self._draw_bounds_helper(element.bounds)

    def _deploy_defs(self) -> None:
        defs_ids = {d.attribs.get("id") for d in self.__drawing.defs.elements}
        for marker in self.markers:
            if marker.attribs["id"] not in defs_ids:
                self.__drawing.defs.add(marker)
                defs_ids.add(marker.attribs["id"])

    def _draw_bounds_helper(self, bounds: diagram.Box) -> None:
        self.__drawing.add(
            self.__drawing.rect(
                insert=bounds.pos.round3(),
                size=bounds.size.round3(),
                fill="none",
                stroke="rgb(239, 41, 41)",
                stroke_dasharray="5",
            )
        )
