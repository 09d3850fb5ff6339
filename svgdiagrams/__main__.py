# SPDX-FileCopyrightText: Copyright DB InfraGO AG
# SPDX-License-Identifier: Apache-2.0
"""Main entry point for the CLI scripts around svgdiagrams."""

import click

import svgdiagrams
from svgdiagrams._scripts import render


@click.group(no_args_is_help=True)
@click.version_option(svgdiagrams.__version__, prog_name="svgdiagrams")
def main():
    pass


main.add_command(render.main, "render")


if __name__ == "__main__":
    main()
