"""Top-level API for SVG to asset-catalog conversion."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from svg2asset.application.results import CatalogResult

__version__ = "0.1.0"


def convert_svg_directory(
    input_dir: Path,
    asset_catalog: Path,
    *,
    force: bool = False,
    swiftgen: bool = False,
    serial: bool = False,
    max_workers: int | None = None,
    timeout: float | None = None,
    icon_names: Iterable[str] | None = None,
    template: bool = True,
    svg2pdf_path: Path | None = None,
    swiftgen_path: Path | None = None,
) -> CatalogResult:
    """Convert every SVG in a directory into an Xcode asset catalog.

    Parameters
    ----------
    input_dir : Path
        Directory containing the SVG files.
    asset_catalog : Path
        ``.xcassets`` directory to create. Its parent must exist.
    force : bool, default=False
        Replace an existing catalog at ``asset_catalog``.
    swiftgen : bool, default=False
        Run SwiftGen against the finished catalog when it is installed.
    serial : bool, default=False
        Convert one file at a time instead of using a worker pool.
    max_workers : int, optional
        Upper bound on concurrently running conversions.
    timeout : float, optional
        Seconds after which a single conversion is killed.
    icon_names : Iterable[str], optional
        Full file names (``name.svg``) to convert; all files when omitted.
    template : bool, default=True
        Mark converted images as template images.
    svg2pdf_path : Path, optional
        Location of the svg2pdf binary.
    swiftgen_path : Path, optional
        Location of the SwiftGen binary.

    Returns
    -------
    CatalogResult
        Resolved paths and per-item outcomes.
    """
    from .api import convert_svg_directory as _impl

    return _impl(
        input_dir=input_dir,
        asset_catalog=asset_catalog,
        force=force,
        swiftgen=swiftgen,
        serial=serial,
        max_workers=max_workers,
        timeout=timeout,
        icon_names=icon_names,
        template=template,
        svg2pdf_path=svg2pdf_path,
        swiftgen_path=swiftgen_path,
    )


__all__ = ["__version__", "convert_svg_directory"]
