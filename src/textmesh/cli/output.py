"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from textmesh.domain import BoundingBox, FontMetrics

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]textmesh[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_font_info(font_path: str, font_type: str, glyph_count: int, upm: int) -> None:
    """Print font information.

    Args:
        font_path: Path to the font file
        font_type: Font format type (e.g., "TrueType", "OpenType")
        glyph_count: Total number of glyphs in font
        upm: Units per em value
    """
    # Use Text to safely handle paths with special characters
    line1 = Text("  ")
    line1.append(font_path)
    line1.append(f" ({font_type})")
    console.print(line1)
    console.print(f"  {glyph_count:,} glyphs {SYM_DOT} {upm:,} UPM")


def print_font_metrics(metrics: FontMetrics) -> None:
    """Print vertical font metrics as a table (em units)."""
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Metric")
    table.add_column("Value (em)", justify="right")

    table.add_row("Ascender", f"{metrics.ascender:.4f}")
    table.add_row("Descender", f"{metrics.descender:.4f}")
    table.add_row("Line gap", f"{metrics.line_gap:.4f}")
    table.add_row("Line height", f"{metrics.line_height:.4f}")
    console.print(table)


def print_measurement(text: str, width: float, positions: list[tuple[int, float]]) -> None:
    """Print the width of a text and the pen position of each character.

    Args:
        text: Measured text
        width: Total advance width in em units
        positions: (character index, x offset) pairs
    """
    console.print(f"  Width {SYM_DOT} [bold]{width:.4f}[/bold] em")

    if not positions:
        return

    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("#", justify="right")
    table.add_column("Char")
    table.add_column("x (em)", justify="right")
    for index, x in positions:
        ch = text[index]
        label = repr(ch) if ch.isspace() or not ch.isprintable() else ch
        table.add_row(str(index), label, f"{x:.4f}")
    console.print(table)


def _format_bbox(bbox: BoundingBox | None) -> str:
    if bbox is None:
        return "empty"
    (x0, y0, z0), (x1, y1, z1) = bbox.min, bbox.max
    return f"({x0:.3f}, {y0:.3f}, {z0:.3f}) to ({x1:.3f}, {y1:.3f}, {z1:.3f})"


def print_mesh_summary(vertices: int, triangles: int, bbox: BoundingBox | None) -> None:
    """Print the size of a combined mesh.

    Args:
        vertices: Number of vertices
        triangles: Number of triangles
        bbox: Bounding box of the mesh, None if empty
    """
    console.print(f"  {vertices:,} vertices {SYM_DOT} {triangles:,} triangles")
    console.print(f"  Bounds {_format_bbox(bbox)}")


def print_placements_summary(count: int, triangles: int, skipped: int) -> None:
    """Print the result of a per-glyph layout.

    Args:
        count: Number of placed glyphs
        triangles: Total triangles over all glyphs
        skipped: Visible characters that produced no glyph
    """
    skipped_style = "yellow" if skipped > 0 else "green"
    console.print(
        f"  {count} glyphs {SYM_DOT} {triangles:,} triangles {SYM_DOT} "
        f"[{skipped_style}]{skipped} skipped[/{skipped_style}]"
    )


def print_success(output_path: str, file_size: str) -> None:
    """Print success message with the written file.

    Args:
        output_path: Path to output file
        file_size: Human-readable file size string
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green]")
    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({file_size})")
    console.print(line)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
