"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

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
    console.print(f"\n[bold]Outliner[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_outline_info(outline_path: str, point_count: int, mode: str) -> None:
    """Print outline information.

    Args:
        outline_path: Path to the outline file
        point_count: Number of points in the raw outline
        mode: Cleanup mode that will be applied
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(outline_path)
    console.print(line)
    console.print(f"  {point_count:,} points {SYM_DOT} {mode} cleanup")


def print_stages(input_count: int, stages: list[tuple[str, int]]) -> None:
    """Print point counts after each cleanup stage.

    Args:
        input_count: Points before the first stage
        stages: (stage name, points after stage) pairs
    """
    if not stages:
        console.print("  No cleanup stages run")
        return

    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Stage")
    table.add_column("Points", justify="right")
    table.add_column("Change", justify="right")

    previous = input_count
    for name, count in stages:
        table.add_row(name, f"{count:,}", f"{count - previous:+,}")
        previous = count

    console.print(table)


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    return f"{seconds:.1f}s"


def print_success(
    output_path: str,
    total_time_s: float,
    input_count: int,
    output_count: int,
    scaled: bool,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        total_time_s: Total processing time in seconds
        input_count: Points in the raw outline
        output_count: Points in the cleaned outline
        scaled: Whether the outline was normalized to unit size
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}")

    line = Text("  ")
    line.append(output_path, style="bold")
    console.print(line)

    scale_str = "unit scaled" if scaled else "not scaled"
    console.print(f"  {input_count:,} {SYM_DOT} {output_count:,} points {SYM_DOT} {scale_str}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
