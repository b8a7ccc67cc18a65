"""Application-layer use-cases and option objects."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from svg2asset.application.options import BatchOptions, ConversionOptions, ToolPaths
from svg2asset.application.ports import CatalogPostProcessor, ProcessOutcome, ProcessRunner
from svg2asset.application.results import BatchResult, CatalogResult, ItemResult


def build_conversion_options(
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
) -> ConversionOptions:
    """Build typed conversion options via lazy use-case import."""
    from svg2asset.application.use_cases import build_conversion_options as _impl

    return _impl(
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


__all__ = [
    "BatchOptions",
    "BatchResult",
    "CatalogPostProcessor",
    "CatalogResult",
    "ConversionOptions",
    "ItemResult",
    "ProcessOutcome",
    "ProcessRunner",
    "ToolPaths",
    "build_conversion_options",
]
