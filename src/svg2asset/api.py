"""Public directory-conversion API (delegates to application use-cases)."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable
from typing import Optional

from svg2asset.application.results import CatalogResult
from svg2asset.application.use_cases import build_conversion_options
from svg2asset.application.use_cases import convert_catalog


def convert_svg_directory(
    input_dir: Path,
    asset_catalog: Path,
    force: bool = False,
    swiftgen: bool = False,
    serial: bool = False,
    max_workers: Optional[int] = None,
    timeout: Optional[float] = None,
    icon_names: Optional[Iterable[str]] = None,
    template: bool = True,
    svg2pdf_path: Optional[Path] = None,
    swiftgen_path: Optional[Path] = None,
) -> CatalogResult:
    """Convert a directory of SVG files into an Xcode asset catalog."""
    options = build_conversion_options(
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
    return convert_catalog(
        input_dir=Path(input_dir),
        asset_catalog=Path(asset_catalog),
        options=options,
    )
