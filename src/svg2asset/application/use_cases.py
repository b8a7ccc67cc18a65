"""Application use-cases orchestrating catalog conversion."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from pydantic import ValidationError

from svg2asset.adapters.processes import SubprocessRunner
from svg2asset.application.options import (
    BatchOptions,
    ConversionOptions,
    ToolPaths,
    default_max_workers,
)
from svg2asset.application.ports import CatalogPostProcessor, ProcessRunner
from svg2asset.application.results import CatalogResult
from svg2asset.converter.core import write_container_metadata
from svg2asset.converter.scheduler import enumerate_inputs, run_batch, select_inputs
from svg2asset.errors import CatalogWriteError, Svg2AssetError
from svg2asset.infrastructure.postprocessing import SwiftGenPostProcessor
from svg2asset.schemas import CatalogConversionConfig
from svg2asset.types import DEFAULT_SVG2PDF_PATH, DEFAULT_SWIFTGEN_PATH
from svg2asset.validate import CatalogPathValidator, locate_converter, locate_generator

logger = logging.getLogger(__name__)


def convert_catalog(
    *,
    input_dir: Path,
    asset_catalog: Path,
    options: ConversionOptions,
    runner: ProcessRunner | None = None,
    validator: CatalogPathValidator | None = None,
    postprocessor: CatalogPostProcessor | None = None,
) -> CatalogResult:
    """Use-case: convert a directory of SVG files into an asset catalog.

    Parameters
    ----------
    input_dir : Path
        Directory containing the source SVG files.
    asset_catalog : Path
        ``.xcassets`` directory to create.
    options : ConversionOptions
        Run configuration.
    runner : ProcessRunner | None, default=None
        Process runner for external tools; defaults to :class:`SubprocessRunner`.
    validator : CatalogPathValidator | None, default=None
        Pre-built validator; a validated one is reused without re-running checks.
    postprocessor : CatalogPostProcessor | None, default=None
        Replaces the SwiftGen post-processor when ``options.swiftgen`` is set.

    Returns
    -------
    CatalogResult
        Resolved paths, per-item results and the generated source path.

    Raises
    ------
    Svg2AssetError
        On invalid parameters, failed directory checks, a missing converter,
        an unwritable catalog or an unreadable input directory.
    """
    try:
        config = CatalogConversionConfig(
            input_dir=input_dir,
            asset_catalog=asset_catalog,
            svg2pdf_path=options.tools.svg2pdf,
            swiftgen_path=options.tools.swiftgen,
            max_workers=options.batch.max_workers,
            timeout=options.batch.timeout,
            icon_names=tuple(options.batch.icon_names),
        )
    except ValidationError as exc:
        details = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        )
        raise Svg2AssetError(f"Invalid conversion parameters: {details}") from exc

    runner = runner or SubprocessRunner()
    converter_path = locate_converter(config.svg2pdf_path)

    validator = validator or CatalogPathValidator(
        config.input_dir, config.asset_catalog, force=options.force
    )
    paths = validator.validate()

    try:
        write_container_metadata(paths.catalog_path)
    except OSError as exc:
        raise CatalogWriteError(
            f"Could not create asset catalog at destination: {exc}"
        ) from exc

    sources = select_inputs(enumerate_inputs(paths.input_dir), config.icon_names)

    logger.info(
        "Converting SVG images at %s to assets at %s", paths.input_dir, paths.catalog_path
    )
    batch = run_batch(
        sources,
        catalog_path=paths.catalog_path,
        converter_path=converter_path,
        runner=runner,
        options=options.batch,
    )

    generated: Path | None = None
    if options.swiftgen:
        if postprocessor is None:
            swiftgen_path = locate_generator(config.swiftgen_path)
            if swiftgen_path is not None:
                postprocessor = SwiftGenPostProcessor(swiftgen_path, runner)
        if postprocessor is not None:
            generated = postprocessor.run(paths.catalog_path)

    return CatalogResult(
        input_dir=paths.input_dir,
        catalog_path=paths.catalog_path,
        batch=batch,
        generated_source=generated,
    )


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
    """Build typed option object from command/API params."""
    return ConversionOptions(
        force=force,
        swiftgen=swiftgen,
        batch=BatchOptions(
            serial=serial,
            max_workers=max_workers if max_workers is not None else default_max_workers(),
            timeout=timeout,
            icon_names=tuple(icon_names or ()),
            template=template,
        ),
        tools=ToolPaths(
            svg2pdf=Path(svg2pdf_path or DEFAULT_SVG2PDF_PATH),
            swiftgen=Path(swiftgen_path or DEFAULT_SWIFTGEN_PATH),
        ),
    )
