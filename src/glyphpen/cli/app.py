"""CLI application entry point for glyphpen.

This module provides the main CLI interface using Typer.
"""

import time
from pathlib import Path
from typing import Annotated

import typer

from glyphpen import __version__
from glyphpen.cli.output import (
    console,
    print_area_table,
    print_error,
    print_font_info,
    print_header,
    print_segments,
    print_step,
    print_summary,
)
from glyphpen.config import GlyphpenSettings, LoggingConfig, PenConfig
from glyphpen.core import AreaPen, RecordingPen
from glyphpen.exceptions import (
    FontLoadError,
    GlyphNotFoundError,
    GlyphpenError,
    PenError,
)
from glyphpen.io import FontReader
from glyphpen.utils import DrawingLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="glyphpen",
    help="Draw font glyphs through pens: measure areas and inspect decomposed segments.",
    add_completion=False,
    no_args_is_help=True,
)

StrictOption = Annotated[
    bool,
    typer.Option(
        "--strict-components",
        help="Fail on components missing from the font instead of skipping them",
    ),
]
LogFileOption = Annotated[
    Path | None,
    typer.Option(
        "--log-file",
        help="Write detailed logs to file",
    ),
]
LogLevelOption = Annotated[
    str,
    typer.Option(
        "--log-level",
        help="Logging level (DEBUG|INFO|WARNING|ERROR)",
    ),
]
QuietOption = Annotated[
    bool,
    typer.Option(
        "--quiet",
        "-q",
        help="Minimal console output",
    ),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Glyphpen[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_options(
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
    """Draw font glyphs through glyphpen pens."""


def _build_settings(
    strict_components: bool, log_file: Path | None, log_level: str
) -> GlyphpenSettings:
    return GlyphpenSettings(
        pen=PenConfig(skip_missing_components=not strict_components),
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )


def _open_font(font_path: Path, quiet: bool) -> FontReader:
    """Validate the font path and load it.

    Args:
        font_path: Path to font file
        quiet: Suppress output

    Returns:
        Loaded FontReader

    Raises:
        FontLoadError: If the font cannot be loaded
    """
    if not font_path.is_file():
        raise FontLoadError(str(font_path), "file does not exist or is not a file")

    reader = FontReader(font_path)
    try:
        reader.load()
    except Exception as e:
        raise FontLoadError(str(font_path), str(e)) from e

    if not quiet:
        print_font_info(
            font_path=str(font_path),
            font_type=reader.format,
            glyph_count=reader.glyph_count,
            upm=reader.units_per_em,
        )
    return reader


@app.command()
def area(
    input_font: Annotated[
        Path,
        typer.Argument(
            help="Path to input TTF/OTF font file",
            show_default=False,
        ),
    ],
    glyphs: Annotated[
        list[str] | None,
        typer.Argument(
            help="Glyph names to measure (default: all glyphs)",
            show_default=False,
        ),
    ] = None,
    strict_components: StrictOption = False,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Print the signed area of glyphs.

    Counter-clockwise contours count positive, clockwise contours negative.
    Components are drawn transformed into their composite glyph.

    Example:
        glyphpen area Roboto-Regular.ttf O o zero
    """
    settings = _build_settings(strict_components, log_file, log_level)
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
    )
    drawing_logger = DrawingLogger(logger)

    try:
        if not quiet:
            print_header(__version__)
            print_step("Loading font")
        reader = _open_font(input_font, quiet)

        with reader:
            glyph_set = reader.glyph_set
            names = glyphs or reader.glyph_order
            for name in names:
                if name not in glyph_set:
                    raise GlyphNotFoundError(name)

            if not quiet:
                print_step("Measuring")

            stats = drawing_logger.stats
            stats.start_time = time.time()
            rows: list[tuple[str, float | None, str | None]] = []
            for name in names:
                pen = AreaPen(glyph_set=glyph_set, config=settings.pen)
                try:
                    glyph_set[name].draw(pen)
                except PenError as e:
                    drawing_logger.log_glyph_error(name, e)
                    rows.append((name, None, str(e)))
                    continue
                drawing_logger.log_glyph_drawn(name, type(pen).__name__)
                rows.append((name, pen.value, None))
            stats.end_time = time.time()

        print_area_table(rows)
        if not quiet:
            print_summary(stats.drawn_count, stats.error_count, stats.duration_seconds)

    except FontLoadError as e:
        print_error(f"Could not load font: {e.reason}")
        raise typer.Exit(code=1)
    except GlyphpenError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if stats.error_count:
        raise typer.Exit(code=1)


@app.command()
def segments(
    input_font: Annotated[
        Path,
        typer.Argument(
            help="Path to input TTF/OTF font file",
            show_default=False,
        ),
    ],
    glyph: Annotated[
        str,
        typer.Argument(
            help="Glyph name to decompose",
            show_default=False,
        ),
    ],
    strict_components: StrictOption = False,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Print the primitive segments a glyph decomposes into.

    Quadratic runs are split at their implied on-curve points, super
    Beziers into plain cubic segments and components are drawn in place.

    Example:
        glyphpen segments Roboto-Regular.ttf Aacute
    """
    settings = _build_settings(strict_components, log_file, log_level)
    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
    )

    try:
        if not quiet:
            print_header(__version__)
            print_step("Loading font")
        reader = _open_font(input_font, quiet)

        with reader:
            glyph_set = reader.glyph_set
            if glyph not in glyph_set:
                raise GlyphNotFoundError(glyph)
            pen = RecordingPen(glyph_set=glyph_set, config=settings.pen)
            glyph_set[glyph].draw(pen)

        print_segments(glyph, pen.value)

    except FontLoadError as e:
        print_error(f"Could not load font: {e.reason}")
        raise typer.Exit(code=1)
    except GlyphpenError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
