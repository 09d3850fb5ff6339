# SPDX-FileCopyrightText: Copyright DB InfraGO AG
# SPDX-License-Identifier: Apache-2.0

import contextlib
import io
import logging
import pathlib
import runpy

import click

from svgdiagrams import svg

logger = logging.getLogger(__name__)


def render_script(script: pathlib.Path) -> str:
    """Run a diagram script and return the SVG it printed.

    A script may end itself with ``sys.exit()``. Exit status 0 or None
    counts as a normal end.

    Raises
    ------
    RuntimeError
        If the script exited with a non-zero status.
    ValueError
        If the script ran successfully, but did not print anything.
    """
    buffer = io.StringIO()
    with contextlib.redirect_stdout(buffer):
        try:
            runpy.run_path(str(script), run_name="__main__")
        except SystemExit as err:
            if err.code not in (None, 0):
                raise RuntimeError(
                    f"Script exited with status {err.code!r}: {script}"
                ) from err
    output = buffer.getvalue()
    if not output.strip():
        raise ValueError(f"Script did not produce any SVG: {script}")
    return output


@click.command()
@click.argument(
    "scripts",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=pathlib.Path),
)
@click.option(
    "-o",
    "--output",
    type=click.Path(file_okay=False, dir_okay=True, path_type=pathlib.Path),
    default="./diagrams",
    help="Directory to store the rendered diagrams in",
    show_default=True,
    envvar="SVGDIAGRAMS_OUTPUT_DIR",
    show_envvar=True,
)
@click.option(
    "--embed-style/--no-embed-style",
    default=False,
    help="Embed the stylesheet, so that the diagrams can stand alone.",
    show_default=True,
    envvar="SVGDIAGRAMS_EMBED_STYLE",
    show_envvar=True,
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def main(
    scripts: tuple[pathlib.Path, ...],
    output: pathlib.Path,
    embed_style: bool,
    verbose: bool,
) -> None:
    """Render diagram scripts into SVG files.

    Every SCRIPT is a Python file that builds its diagram and prints it
    with `svgdiagrams.svg.print_svg`. The printed SVG is stored as
    `<script name>.svg` in the output directory.

    \b
    Exit codes
    ----------

    The CLI will indicate the success status via exit codes:

    \b
    - 0 in case of success
    - 1 if no diagram could be rendered
    - 2 for CLI usage errors
    - 3 if some diagrams failed to render, but others were successful
    """  # noqa: D301
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO)
    output.mkdir(parents=True, exist_ok=True)

    failed: list[pathlib.Path] = []
    with svg.drawing_defaults(embed_stylesheet=embed_style):
        for script in scripts:
            try:
                content = render_script(script)
            except Exception:
                logger.exception("Could not render %s", script)
                failed.append(script)
                continue

            target = output / f"{script.stem}.svg"
            target.write_text(content, encoding="utf-8")
            logger.info("Rendered %s to %s", script, target)

    ok = len(scripts) - len(failed)
    if ok == 0:
        logger.error("Could not render any diagrams")
        raise SystemExit(1)

    if failed:
        msg = "\n".join(f" - {i}" for i in failed)
        logger.error(
            "%d diagrams failed to render (%d ok)\n%s", len(failed), ok, msg
        )
        raise SystemExit(3)
