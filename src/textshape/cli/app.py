"""CLI application entry point for textshape.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from textshape import __version__
from textshape.cli.output import (
    console,
    print_error,
    print_font_info,
    print_header,
    print_region_info,
    print_step,
    print_success,
)
from textshape.config import CurveConfig, LayoutConfig, LoggingConfig, TextShapeSettings
from textshape.core import ShapelyRegionEngine, text_to_region
from textshape.domain import Alignment, Text
from textshape.exceptions import FontLoadError, GlyphLoadError, TextShapeError
from textshape.io import load_font, write_region
from textshape.utils import LayoutLogger, configure_logging

app = typer.Typer(
    name="textshape",
    help="Convert text set in a TrueType/OpenType font into a single 2D region.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]textshape[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def render(
    input_font: Annotated[
        Path,
        typer.Argument(
            help="Path to input TTF/OTF font file",
            show_default=False,
        ),
    ],
    text: Annotated[
        str,
        typer.Argument(
            help="Text to convert; '\\n' starts a new line",
            show_default=False,
        ),
    ],
    height: Annotated[
        float,
        typer.Option(
            "--height",
            "-H",
            help="Height of one line advance in the output (must be positive)",
        ),
    ] = 1.0,
    align: Annotated[
        str,
        typer.Option(
            "--align",
            "-a",
            help="Horizontal alignment (left|right|center)",
        ),
    ] = "center",
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write the region to a .svg or .wkt file",
        ),
    ] = None,
    tolerance: Annotated[
        float,
        typer.Option(
            "--tolerance",
            "-t",
            help="Curve flattening tolerance at 1000 UPM",
            min=0.01,
            max=10.0,
        ),
    ] = 0.5,
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
    """Convert TEXT set in INPUT_FONT into one centred, scaled region.

    Example:
        textshape Roboto-Regular.ttf "Hello\\nWorld" --align left -o hello.svg
    """
    if not input_font.exists():
        print_error(
            f"Input file not found: {input_font}",
            details=f"The file '{input_font}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    try:
        alignment = Alignment(align.lower())
    except ValueError:
        print_error(
            f"Invalid alignment: {align}",
            details="Valid values: left, right, center",
        )
        raise typer.Exit(code=1)

    if height <= 0:
        print_error("Height must be greater than zero")
        raise typer.Exit(code=1)

    settings = TextShapeSettings(
        curve=CurveConfig(flatten_tolerance=tolerance),
        layout=LayoutConfig(alignment=alignment, height=height),
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )
    layout_logger = LayoutLogger(logger)

    if not quiet:
        print_header(__version__)
        print_step("Loading font")

    try:
        with load_font(input_font, settings.curve) as font:
            if not quiet:
                print_font_info(
                    font_path=str(input_font),
                    font_type=font.format,
                    glyph_count=font.glyph_count,
                    upm=font.units_per_em,
                )
                print_step("Composing text")

            engine = ShapelyRegionEngine()
            region = text_to_region(
                font,
                Text(text.replace("\\n", "\n"), settings.layout.alignment),
                settings.layout.height,
                engine=engine,
                settings=settings,
                layout_logger=layout_logger,
            )

        if not quiet:
            stats = layout_logger.stats
            print_region_info(
                bounds=engine.bounds(region),
                area=region.area,
                lines=stats.lines,
                glyphs=stats.glyphs_placed,
                empty=stats.glyphs_empty,
            )

        if output is not None:
            write_region(region, output)

        if not quiet:
            print_success(str(output) if output else None)

    except FontLoadError as e:
        print_error(f"Could not load font: {e.reason}")
        raise typer.Exit(code=1)
    except GlyphLoadError as e:
        print_error(f"Could not load glyph '{e.glyph}': {e.reason}")
        raise typer.Exit(code=1)
    except TextShapeError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except ValueError as e:
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
