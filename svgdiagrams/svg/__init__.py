# SPDX-FileCopyrightText: Copyright DB InfraGO AG
# SPDX-License-Identifier: Apache-2.0
"""Serialization of diagram elements into SVG documents."""
# isort: off
from . import generate
from . import drawing, style
from .generate import SVGDiagram, drawing_defaults, generate_svg, print_svg
