#!/usr/bin/env python3
"""
svg2asset.cli.cli

Typer-based CLI for converting a folder of SVGs into an Xcode asset catalog.

Each SVG becomes an image set holding a PDF produced by ``svg2pdf``.
Optionally, SwiftGen is run afterwards to generate Swift code for the catalog.

Examples
--------
Convert the SVGs in ``icons/`` into ``Assets.xcassets``:

    svg2asset convert -i icons -a Assets.xcassets

Replace an existing catalog and generate Swift code:

    svg2asset convert -i icons -a Icons.xcassets --force --swiftgen
"""

from __future__ import annotations

import logging
import sys
import traceback
from pathlib import Path

import typer

from svg2asset.errors import Svg2AssetError
from svg2asset.types import (
    DEFAULT_ASSET_CATALOG,
    DEFAULT_SVG2PDF_PATH,
    DEFAULT_SWIFTGEN_PATH,
)

app = typer.Typer(
    name="svg2asset",
    help="Convert SVGs to PDF asset catalog.",
    no_args_is_help=True,
)

LOG_HANDLER_NAME = "svg2asset-cli"


# -----------------------------
# Utilities
# -----------------------------
def _configure_logging(verbose: bool) -> None:
    """Send package log records to stderr as bare messages.

    Parameters
    ----------
    verbose : bool
        Include per-item progress (DEBUG) records.
    """
    package_logger = logging.getLogger("svg2asset")
    for handler in list(package_logger.handlers):
        if handler.get_name() == LOG_HANDLER_NAME:
            package_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(LOG_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def _print_conversion_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly fatal error.

    Parameters
    ----------
    exc : Exception
        Exception raised during conversion.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.echo(f"✗ {type(exc).__name__}: {exc}", err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _binary_status(path: Path) -> str:
    return str(path) if path.is_file() else f"<not installed at {path}>"


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks on error."),
) -> None:
    """Initialize shared CLI state.

    Parameters
    ----------
    ctx : typer.Context
        Typer context object used to store shared state.
    debug : bool, default=False
        Whether to enable debug error output.
    """
    ctx.obj = {"debug": debug}


# -----------------------------
# Commands
# -----------------------------
@app.command("convert")
def convert_cmd(
    ctx: typer.Context,
    input_dir: Path = typer.Option(
        Path("."),
        "--input-dir",
        "-i",
        metavar="DIR",
        help="Input directory containing SVGs.",
    ),
    asset_catalog: Path = typer.Option(
        Path(DEFAULT_ASSET_CATALOG),
        "--asset-catalog",
        "-a",
        metavar="PATH",
        help="Path to output asset catalog.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print verbose output."),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite an asset catalog at the destination, if it exists.",
    ),
    swiftgen: bool = typer.Option(
        False,
        "--swiftgen",
        help="Use SwiftGen to generate code for the asset catalog (if SwiftGen is installed).",
    ),
    serial: bool = typer.Option(
        False,
        "--serial/--no-serial",
        help="Require serial processing instead of concurrent.",
    ),
    icon_names: list[str] | None = typer.Option(
        None,
        "--icon-names",
        help="Name of a file to convert, e.g. arrow.svg (repeatable). All icons when omitted.",
    ),
    template: bool = typer.Option(
        True,
        "--template/--no-template",
        help="Mark converted images as template images.",
    ),
    jobs: int | None = typer.Option(
        None,
        "--jobs",
        "-j",
        min=1,
        envvar="SVG2ASSET_JOBS",
        help="Maximum number of concurrent conversions.",
    ),
    timeout: float | None = typer.Option(
        None,
        "--timeout",
        envvar="SVG2ASSET_TIMEOUT",
        help="Seconds before a single conversion is killed.",
    ),
    svg2pdf_path: Path = typer.Option(
        Path(DEFAULT_SVG2PDF_PATH),
        "--svg2pdf",
        envvar="SVG2ASSET_SVG2PDF",
        help="Path to the svg2pdf binary.",
    ),
    swiftgen_path: Path = typer.Option(
        Path(DEFAULT_SWIFTGEN_PATH),
        "--swiftgen-path",
        envvar="SVG2ASSET_SWIFTGEN",
        help="Path to the SwiftGen binary.",
    ),
) -> None:
    """Convert a folder of SVGs to an asset catalog.

    Parameters
    ----------
    ctx : typer.Context
        Typer context containing global options.
    input_dir : Path
        Directory containing the SVG files.
    asset_catalog : Path
        ``.xcassets`` directory to create.
    icon_names : list[str] | None
        Full file names to convert; everything when omitted.

    Notes
    -----
    - Individual conversion failures are reported but do not change the
      exit status.
    """
    debug: bool = bool(ctx.obj.get("debug", False))
    _configure_logging(verbose)

    try:
        from svg2asset.api import convert_svg_directory

        result = convert_svg_directory(
            input_dir=input_dir,
            asset_catalog=asset_catalog,
            force=force,
            swiftgen=swiftgen,
            serial=serial,
            max_workers=jobs,
            timeout=timeout,
            icon_names=icon_names,
            template=template,
            svg2pdf_path=svg2pdf_path,
            swiftgen_path=swiftgen_path,
        )
    except Svg2AssetError as exc:
        raise typer.Exit(code=_print_conversion_error(exc, debug))
    except Exception as exc:
        raise typer.Exit(code=_print_conversion_error(exc, debug))

    typer.echo(f"Processed {result.batch.succeeded} assets")


@app.command("doctor")
def doctor_cmd(
    svg2pdf_path: Path = typer.Option(
        Path(DEFAULT_SVG2PDF_PATH), "--svg2pdf", envvar="SVG2ASSET_SVG2PDF"
    ),
    swiftgen_path: Path = typer.Option(
        Path(DEFAULT_SWIFTGEN_PATH), "--swiftgen-path", envvar="SVG2ASSET_SWIFTGEN"
    ),
) -> None:
    """Print installed toolchain versions and external binaries."""
    import importlib.metadata as metadata

    typer.echo(f"Python: {sys.version.split()[0]}")
    for module in ["svg2asset", "pydantic", "typer"]:
        try:
            version = metadata.version(module)
            typer.echo(f"{module}: {version}")
        except metadata.PackageNotFoundError:
            typer.echo(f"{module}: <not installed>")

    typer.echo(f"svg2pdf: {_binary_status(svg2pdf_path)}")
    typer.echo(f"swiftgen: {_binary_status(swiftgen_path)}")


if __name__ == "__main__":
    app()
