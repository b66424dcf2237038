"""
AppIconGen: Application Icon Set Generator
Copyright (C) 2025 Travis L. Seymour, PhD

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with this program.  If not, see <https://www.gnu.org/licenses/>.
"""

from enum import Enum
from pathlib import Path

from munch import Munch
import typer

from appicongen import app_short_name, log
from appicongen.errors import AppIconError
from appicongen.generator import generate
from appicongen.manifest import loader, planner
from appicongen.session.logsetup import setup_logging
from appicongen.session.version import __version__

app = typer.Typer(add_completion=False, help="Generate an Xcode AppIcon.appiconset from a single image.")


class RendererKind(str, Enum):
    pillow = "pillow"
    qt = "qt"


def _version_callback(value: bool):
    if value:
        typer.echo(f"{app_short_name} {__version__}")
        raise typer.Exit()


@app.callback()
def common(
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit."
    ),
):
    pass


@app.command("generate")
def generate_command(
    source: Path = typer.Argument(..., metavar="SOURCE", help="Square source image (PNG, JPEG, ...)."),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Directory that will receive AppIcon.appiconset. Omit to render in memory only."
    ),
    renderer: RendererKind = typer.Option(
        RendererKind.pillow, "--renderer", "-r", envvar="APPICONGEN_RENDERER", help="Rasterization backend."
    ),
    workers: int | None = typer.Option(
        None, "--workers", "-w", min=1, envvar="APPICONGEN_WORKERS", help="Size of the render worker pool."
    ),
    debug: bool = typer.Option(
        False,
        "--debug/--no-debug",
        "-d",
        envvar="APPICONGEN_DEBUG",
        help="Write extra debugging information to terminal.",
    ),
    log_file: Path | None = typer.Option(None, "--log-file", help="Also write the log to this file."),
):
    args = Munch(
        {
            "source": source,
            "output": output,
            "renderer": renderer.value,
            "workers": workers,
            "debug": debug,
            "log_file": log_file,
        }
    )
    setup_logging(debug=args.debug, log_file=args.log_file)
    log.debug(f"{app_short_name} {__version__} run options: {dict(args)}")

    if not args.source.is_file():
        typer.secho(f'Source image "{args.source}" is not a readable file.', fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    try:
        icon_set = generate(args.source, args.output, renderer=args.renderer, max_workers=args.workers)
    except AppIconError as e:
        typer.secho(f"Icon generation failed: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    for icon in icon_set.images:
        where = icon.destination_path if icon.destination_path is not None else "(memory)"
        typer.echo(f"{icon.filename:<28} {icon.pixels:>5}px  {where}")
    typer.secho(f"Generated {len(icon_set)} icons.", fg=typer.colors.GREEN)


@app.command("plan")
def plan_command():
    """List every rendition the bundled manifest asks for."""
    try:
        rendition_plan = planner.plan(loader.load())
    except AppIconError as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    for entry in rendition_plan:
        typer.echo(f"{entry.filename:<28} {entry.pixels:>5}px")
    typer.echo(f"{len(rendition_plan)} renditions")


def main():
    app(prog_name="appicongen")


if __name__ == "__main__":
    main()
