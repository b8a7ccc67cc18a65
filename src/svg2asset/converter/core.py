"""Single-item conversion task: SVG file to image set."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path

from svg2asset.application.ports import ProcessRunner
from svg2asset.application.results import ItemResult
from svg2asset.errors import ItemConversionError, ItemErrorKind
from svg2asset.schemas import ContainerMetadata, ItemMetadata
from svg2asset.types import CONTENTS_FILENAME, CONVERTED_SUFFIX, ITEM_SUFFIX

logger = logging.getLogger(__name__)

GENERIC_CONVERTER_FAILURE = "Conversion to PDF failed"


@dataclass(frozen=True)
class ConversionItem:
    """One eligible source file and where its image set goes.

    Parameters
    ----------
    source_path : Path
        Absolute path of the source SVG.
    catalog_path : Path
        Absolute path of the asset catalog.
    template : bool, default=True
        Mark the image as a template image in its metadata.
    """

    source_path: Path
    catalog_path: Path
    template: bool = True

    @property
    def name(self) -> str:
        """Base name of the source file without its extension."""
        return self.source_path.stem

    @property
    def item_dir(self) -> Path:
        """Image-set directory inside the catalog."""
        return self.catalog_path / f"{self.name}.{ITEM_SUFFIX}"

    @property
    def converted_filename(self) -> str:
        """File name of the converted image."""
        return f"{self.name}.{CONVERTED_SUFFIX}"

    @property
    def converted_path(self) -> Path:
        """Path the converter writes to."""
        return self.item_dir / self.converted_filename

    def metadata(self) -> ItemMetadata:
        """Build the image-set ``Contents.json`` document."""
        return ItemMetadata.universal(self.converted_filename, template=self.template)


def write_json(path: Path, document: str) -> None:
    """Write a serialized JSON document as UTF-8 text."""
    path.write_text(document, encoding="utf-8")


def write_container_metadata(catalog_path: Path) -> Path:
    """Write the catalog-level ``Contents.json`` and return its path."""
    contents_path = catalog_path / CONTENTS_FILENAME
    write_json(contents_path, ContainerMetadata().to_json())
    return contents_path


def decode_stderr(stderr: bytes) -> str:
    """Return captured standard error as text, or a generic failure message."""
    try:
        text = stderr.decode("utf-8").strip()
    except UnicodeDecodeError:
        return GENERIC_CONVERTER_FAILURE
    return text or GENERIC_CONVERTER_FAILURE


def _create_item_dir(item: ConversionItem) -> None:
    try:
        item.item_dir.mkdir(parents=False, exist_ok=False)
    except OSError as exc:
        raise ItemConversionError(
            item.name,
            ItemErrorKind.DIRECTORY_CREATION_FAILED,
            f"Could not create asset folder for {item.name}, skipping ({exc})",
        ) from exc


def _write_item_metadata(item: ConversionItem) -> None:
    try:
        write_json(item.item_dir / CONTENTS_FILENAME, item.metadata().to_json())
    except (OSError, ValueError) as exc:
        raise ItemConversionError(
            item.name,
            ItemErrorKind.METADATA_WRITE_FAILED,
            f"Could not write JSON for {item.name}, skipping ({exc})",
        ) from exc


def _run_converter(
    item: ConversionItem,
    converter_path: Path,
    runner: ProcessRunner,
    timeout: float | None,
) -> None:
    try:
        outcome = runner.run(
            converter_path,
            [str(item.source_path), str(item.converted_path)],
            timeout=timeout,
        )
    except subprocess.TimeoutExpired as exc:
        raise ItemConversionError(
            item.name,
            ItemErrorKind.TIMEOUT,
            f"Conversion of {item.name} timed out after {timeout}s",
        ) from exc
    except OSError as exc:
        raise ItemConversionError(
            item.name,
            ItemErrorKind.CONVERTER_UNAVAILABLE,
            f"Could not start converter for {item.name}: {exc}",
        ) from exc

    if outcome.returncode != 0:
        raise ItemConversionError(
            item.name,
            ItemErrorKind.CONVERTER_FAILED,
            f"Conversion to PDF failed for {item.name}: {decode_stderr(outcome.stderr)}",
        )


def convert_item(
    item: ConversionItem,
    *,
    converter_path: Path,
    runner: ProcessRunner,
    timeout: float | None = None,
) -> ItemResult:
    """Convert one source file into an image set.

    Creates the image-set directory, writes its ``Contents.json`` and runs the
    converter. Failures are logged and returned as a failed
    :class:`ItemResult`; they never raise. Artifacts created before the
    failing step are left in place.

    Parameters
    ----------
    item : ConversionItem
        Item to convert.
    converter_path : Path
        svg2pdf binary.
    runner : ProcessRunner
        Process runner used to invoke the converter.
    timeout : float | None, default=None
        Seconds after which the converter is killed.

    Returns
    -------
    ItemResult
        Success or failure of this item.
    """
    logger.debug("Processing %s", item.source_path.name)
    try:
        _create_item_dir(item)
        _write_item_metadata(item)
        _run_converter(item, converter_path, runner, timeout)
    except ItemConversionError as exc:
        logger.error("%s", exc.detail)
        return ItemResult(
            name=item.name,
            source_path=item.source_path,
            status="failure",
            error_kind=exc.kind,
            error=exc.detail,
        )
    return ItemResult(
        name=item.name,
        source_path=item.source_path,
        status="success",
        output_path=item.converted_path,
    )
