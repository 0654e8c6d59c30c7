"""Rich console output helpers for the CLI."""

from rich.console import Console
from rich.text import Text

console = Console()

SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header."""
    console.print(f"\n[bold]textshape[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_font_info(font_path: str, font_type: str, glyph_count: int, upm: int) -> None:
    """Print font information.

    Args:
        font_path: Path to the font file
        font_type: Font format type (e.g., "TrueType", "OpenType")
        glyph_count: Total number of glyphs in font
        upm: Units per em value
    """
    line = Text("  ")
    line.append(font_path)
    line.append(f" ({font_type})")
    console.print(line)
    console.print(f"  {glyph_count:,} glyphs {SYM_DOT} {upm:,} UPM")


def print_region_info(
    bounds: tuple[float, float, float, float],
    area: float,
    lines: int,
    glyphs: int,
    empty: int,
) -> None:
    """Print a summary of the composed region."""
    min_x, min_y, max_x, max_y = bounds
    console.print(
        f"  {lines} lines {SYM_DOT} {glyphs} glyphs {SYM_DOT} {empty} blank"
    )
    console.print(
        f"  bounds ({min_x:.4g}, {min_y:.4g}) – ({max_x:.4g}, {max_y:.4g}) "
        f"{SYM_DOT} area {area:.4g}"
    )


def print_success(output_path: str | None) -> None:
    """Print success message."""
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green]")
    if output_path:
        line = Text("  ")
        line.append(output_path, style="bold")
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
