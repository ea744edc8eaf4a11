"""CLI application entry point for textmesh.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from textmesh import __version__
from textmesh.cli.output import (
    console,
    print_error,
    print_font_info,
    print_font_metrics,
    print_header,
    print_measurement,
    print_mesh_summary,
    print_placements_summary,
    print_step,
    print_success,
)
from textmesh.config import (
    JustifyText,
    LoggingConfig,
    TextMeshSettings,
    TextMeshStyle,
    parse_anchor,
)
from textmesh.core import font_metrics, layout_combined, layout_placements, measure
from textmesh.exceptions import (
    FontLoadError,
    FontParseError,
    MeshSaveError,
    TextMeshError,
)
from textmesh.io import Font, write_obj, write_placements_obj
from textmesh.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="textmesh",
    help="Lay out text with a TrueType/OpenType font and extrude it into 3D meshes.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]textmesh[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Lay out text with a TrueType/OpenType font and extrude it into 3D meshes."""


def _check_font_path(font_path: Path) -> None:
    """Exit with an error message unless font_path is an existing file."""
    if not font_path.exists():
        print_error(
            f"Input file not found: {font_path}",
            details=f"The file '{font_path}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not font_path.is_file():
        print_error(
            f"Input path is not a file: {font_path}",
            details="Please provide a path to a TTF or OTF font file.",
        )
        raise typer.Exit(code=1)


def _unescape(text: str) -> str:
    """Turn a literal backslash-n typed on the command line into a newline."""
    return text.replace("\\n", "\n")


@app.command()
def metrics(
    font_path: Annotated[
        Path,
        typer.Argument(
            help="Path to TTF/OTF font file",
            show_default=False,
        ),
    ],
) -> None:
    """Show the vertical metrics of a font in em units."""
    _check_font_path(font_path)

    try:
        with Font.from_path(font_path) as font:
            print_font_info(
                font_path=str(font_path),
                font_type=font.format,
                glyph_count=font.glyph_count,
                upm=font.units_per_em,
            )
            print_font_metrics(font_metrics(font))
    except (FontLoadError, FontParseError) as e:
        print_error(f"Could not load font: {e.reason}")
        raise typer.Exit(code=1)


@app.command(name="measure")
def measure_command(
    font_path: Annotated[
        Path,
        typer.Argument(
            help="Path to TTF/OTF font file",
            show_default=False,
        ),
    ],
    text: Annotated[
        str,
        typer.Argument(
            help="Single line of text to measure",
            show_default=False,
        ),
    ],
) -> None:
    """Measure the width of a text and the pen position of each character."""
    _check_font_path(font_path)

    try:
        with Font.from_path(font_path) as font:
            width, positions = measure(font, text)
    except (FontLoadError, FontParseError) as e:
        print_error(f"Could not load font: {e.reason}")
        raise typer.Exit(code=1)

    print_measurement(text, width, positions)


@app.command()
def build(
    font_path: Annotated[
        Path,
        typer.Argument(
            help="Path to TTF/OTF font file",
            show_default=False,
        ),
    ],
    text: Annotated[
        str,
        typer.Argument(
            help="Text to lay out; '\\n' starts a new line",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write the result as a Wavefront OBJ file",
        ),
    ] = None,
    depth: Annotated[
        float,
        typer.Option(
            "--depth",
            "-d",
            help="Extrusion depth in em units (> 0)",
        ),
    ] = 0.1,
    subdivision: Annotated[
        int,
        typer.Option(
            "--subdivision",
            "-s",
            help="Straight segments per curve segment (0-255)",
            min=0,
            max=255,
        ),
    ] = 20,
    justify: Annotated[
        str,
        typer.Option(
            "--justify",
            "-j",
            help="Line alignment (left|center|right)",
        ),
    ] = "left",
    anchor: Annotated[
        str,
        typer.Option(
            "--anchor",
            "-a",
            help="Anchor moved to the origin: a name like top-left, or 'px,py'",
        ),
    ] = "center",
    per_glyph: Annotated[
        bool,
        typer.Option(
            "--per-glyph",
            help="Produce one positioned mesh per character instead of one combined mesh",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
) -> None:
    """Lay out a text and extrude it into a 3D mesh.

    Example:
        textmesh build FiraMono-Medium.ttf "Hello\\nWorld" -o hello.obj

    This lays out two lines, centers the merged mesh on the origin and
    writes it to hello.obj.
    """
    _check_font_path(font_path)

    # Validate justify argument
    try:
        justify_text = JustifyText(justify.lower())
    except ValueError:
        print_error(
            f"Invalid justify: {justify}",
            details="Valid values: left, center, right",
        )
        raise typer.Exit(code=1)

    # Validate anchor argument
    try:
        anchor_spec = parse_anchor(anchor)
    except ValueError:
        print_error(
            f"Invalid anchor: {anchor}",
            details="Use a name (top-left, center, bottom-right, ...) or 'px,py'",
        )
        raise typer.Exit(code=1)

    try:
        style = TextMeshStyle(
            depth=depth,
            subdivision=subdivision,
            justify=justify_text,
            anchor=anchor_spec,
        )
    except ValidationError as e:
        print_error("Invalid style", details=str(e))
        raise typer.Exit(code=1)

    settings = TextMeshSettings(
        style=style,
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "WARNING",
        ),
    )
    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    if not quiet:
        print_header(__version__)

    layout_input = _unescape(text)

    try:
        if not quiet:
            print_step("Loading font")

        with Font.from_path(font_path) as font:
            if not quiet:
                print_font_info(
                    font_path=str(font_path),
                    font_type=font.format,
                    glyph_count=font.glyph_count,
                    upm=font.units_per_em,
                )
                print_step("Laying out text")

            if per_glyph:
                placements = layout_placements(font, layout_input, settings.style)
                visible = sum(1 for ch in layout_input if not ch.isspace())
                if not quiet:
                    print_placements_summary(
                        count=len(placements),
                        triangles=sum(p.local_mesh.triangle_count for p in placements),
                        skipped=visible - len(placements),
                    )
                if output is not None:
                    write_placements_obj(placements, output)
            else:
                mesh = layout_combined(font, layout_input, settings.style)
                if not quiet:
                    print_mesh_summary(
                        vertices=len(mesh.vertices),
                        triangles=mesh.triangle_count,
                        bbox=mesh.bounding_box(),
                    )
                if output is not None:
                    write_obj(mesh, output)

        if output is not None and not quiet:
            print_success(output_path=str(output), file_size=_format_file_size(output))

    except (FontLoadError, FontParseError) as e:
        print_error(f"Could not load font: {e.reason}")
        raise typer.Exit(code=1)
    except MeshSaveError as e:
        print_error(f"Could not save mesh: {e.reason}")
        raise typer.Exit(code=1)
    except TextMeshError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def _format_file_size(path: Path) -> str:
    """Format file size in human-readable form.

    Args:
        path: Path to file

    Returns:
        Human-readable file size (e.g., "428 KB")
    """
    try:
        size_bytes = path.stat().st_size
    except OSError:
        return "unknown"
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.0f} KB"
    else:
        return f"{size_bytes / (1024 * 1024):.1f} MB"


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
