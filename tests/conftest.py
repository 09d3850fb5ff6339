# SPDX-FileCopyrightText: Copyright DB InfraGO AG
# SPDX-License-Identifier: Apache-2.0
"""Global fixtures for pytest."""

import pytest
from lxml import etree


@pytest.fixture
def parse_svg():
    """Return a function that parses SVG markup into an lxml tree."""

    def parse(markup: str) -> etree._Element:
        return etree.fromstring(markup.encode("utf-8"))

    return parse
