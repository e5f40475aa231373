"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from typing import Any

from rich.console import Console
from rich.table import Table
from rich.text import Text

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
    console.print(f"\n[bold]Glyphpen[/bold] v{version}")
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


def print_area_table(rows: list[tuple[str, float | None, str | None]]) -> None:
    """Print signed areas per glyph.

    Args:
        rows: (glyph name, area or None on failure, error message or None)
    """
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Glyph")
    table.add_column("Area", justify="right")
    table.add_column("Direction")

    for name, area, error in rows:
        if area is None:
            table.add_row(name, "[red]error[/red]", Text(error or "", style="red"))
            continue
        if area > 0:
            direction = "counter-clockwise"
        elif area < 0:
            direction = "clockwise"
        else:
            direction = "-"
        table.add_row(name, f"{area:.2f}", direction)

    console.print(table)


def _format_point(pt: Any) -> str:
    return f"({pt[0]:g}, {pt[1]:g})"


def print_segments(glyph_name: str, commands: list[tuple[str, tuple[Any, ...]]]) -> None:
    """Print primitive drawing commands, one per line.

    Args:
        glyph_name: Name of the glyph the commands belong to
        commands: (operator, points) tuples from a RecordingPen
    """
    console.print(f"\n[bold]{glyph_name}[/bold] {SYM_DOT} {len(commands)} commands")
    for operator, args in commands:
        points = " ".join(_format_point(pt) for pt in args)
        console.print(f"  {operator:<10} {points}".rstrip())


def print_summary(drawn: int, errors: int, total_time_s: float) -> None:
    """Print run summary.

    Args:
        drawn: Number of glyphs drawn successfully
        errors: Number of glyphs that failed to draw
        total_time_s: Total drawing time in seconds
    """
    error_style = "red" if errors > 0 else "green"
    console.print(
        f"\n[bold green]{SYM_OK} Complete[/bold green] in {total_time_s * 1000:.0f}ms"
    )
    console.print(
        f"  {drawn} glyphs {SYM_DOT} [{error_style}]{errors} errors[/{error_style}]"
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
