"""CLI application entry point for outliner.

This module provides the main CLI interface using Typer.
"""

import time
from pathlib import Path
from typing import Annotated

import typer

from outliner import __version__
from outliner.cli.output import (
    SYM_OK,
    console,
    print_error,
    print_header,
    print_outline_info,
    print_stages,
    print_step,
    print_success,
)
from outliner.config import CleanupConfig, CleanupMode, LoggingConfig, OutlinerSettings
from outliner.core import ShapeCleaner
from outliner.exceptions import (
    InvalidCleanupModeError,
    OutlineFormatError,
    OutlinerError,
    OutlineSaveError,
)
from outliner.io import OutlineReader, OutlineWriter
from outliner.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="outliner",
    help="Clean traced vector outlines into minimal, unit-scaled polygons for extrusion.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Outliner[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def clean(
    input_outline: Annotated[
        Path,
        typer.Argument(
            help="Path to outline JSON file (list of [x, y] points)",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {name}-cleaned.json)",
        ),
    ] = None,
    mode: Annotated[
        str,
        typer.Option(
            "--mode",
            "-m",
            help="Cleanup mode (none|normal|aggressive or 0|1|2)",
        ),
    ] = "normal",
    no_scale: Annotated[
        bool,
        typer.Option(
            "--no-scale",
            help="Keep original coordinates instead of scaling to unit size",
        ),
    ] = False,
    rotate_seam: Annotated[
        bool,
        typer.Option(
            "--rotate-seam",
            help="Start the loop at a corner so the closing edge is simplified too",
        ),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            help="Show stage point counts without writing output",
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
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
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
    """Clean a traced outline and write it as a unit-scaled polygon.

    Removes duplicate and collinear points, simplifies the outline with
    Douglas-Peucker and, in aggressive mode, rebuilds the outer boundary of
    self-overlapping traces by ray sampling.

    Example:
        outliner trace.json --mode aggressive

    This will create trace-cleaned.json next to the input.
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    # Validate input file exists
    if not input_outline.exists():
        print_error(
            f"Input file not found: {input_outline}",
            details=f"The file '{input_outline}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not input_outline.is_file():
        print_error(
            f"Input path is not a file: {input_outline}",
            details="Please provide a path to an outline JSON file.",
        )
        raise typer.Exit(code=1)

    # Validate mode argument
    try:
        cleanup_mode = CleanupMode.parse(mode)
    except InvalidCleanupModeError:
        print_error(
            f"Invalid mode: {mode}",
            details="Valid values: none, normal, aggressive (or 0, 1, 2)",
        )
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    # Create settings from CLI arguments
    settings = OutlinerSettings(
        cleanup=CleanupConfig(
            mode=cleanup_mode,
            auto_scale=not no_scale,
            rotate_seam=rotate_seam,
        ),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "WARNING",
        ),
    )

    try:
        start_time = time.time()

        if not quiet:
            print_step("Loading outline")

        reader = OutlineReader(input_outline)
        reader.load()
        raw = reader.shape

        if not quiet:
            print_outline_info(str(input_outline), len(raw), cleanup_mode.label)

        logger = configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
            quiet=quiet,
        )
        cleaner = ShapeCleaner(settings, logger=logger)

        if not quiet:
            print_step("Cleaning")

        final, report = cleaner.process(raw)

        if verbose:
            print_stages(report.input_count, report.stages)
        elif not quiet:
            console.print(f"  {report.input_count:,} → {report.output_count:,} points")

        if dry_run:
            if not quiet:
                if not verbose:
                    print_stages(report.input_count, report.stages)
                console.print(
                    f"\n[bold green]{SYM_OK} Dry run complete[/bold green] – no file written"
                )
            raise typer.Exit(code=0)

        output_path = output if output is not None else OutlineWriter.get_cleaned_path(input_outline)
        OutlineWriter(output_path).save(final, mode=cleanup_mode)

        if not quiet:
            print_success(
                output_path=str(output_path),
                total_time_s=time.time() - start_time,
                input_count=report.input_count,
                output_count=report.output_count,
                scaled=report.scaled,
            )

    except FileNotFoundError as e:
        print_error(f"Could not load outline: {e}")
        raise typer.Exit(code=1)
    except OutlineFormatError as e:
        print_error("Could not load outline", details=e.details)
        raise typer.Exit(code=1)
    except OutlineSaveError as e:
        print_error(f"Could not save outline: {e.reason}")
        raise typer.Exit(code=1)
    except OutlinerError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
