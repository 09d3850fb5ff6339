# SPDX-FileCopyrightText: Copyright DB InfraGO AG
# SPDX-License-Identifier: Apache-2.0
"""The svgdiagrams package."""
from importlib import metadata

try:
    __version__ = metadata.version("svgdiagrams")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0+unknown"
del metadata
