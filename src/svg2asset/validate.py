"""Input/output directory validation and external tool discovery."""

from __future__ import annotations

import logging
import os
import shutil
import stat
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from svg2asset.errors import (
    CatalogWriteError,
    ConverterNotFoundError,
    DirectoryCheckError,
    DirectoryCheckKind,
    Svg2AssetError,
    ValidationStateError,
)
from svg2asset.types import CATALOG_EXTENSION

logger = logging.getLogger(__name__)


class ValidationState(Enum):
    """Lifecycle of a :class:`CatalogPathValidator`."""

    UNVALIDATED = "unvalidated"
    VALIDATED = "validated"
    FAILED = "failed"


@dataclass(frozen=True)
class ValidatedPaths:
    """Resolved locations produced by a successful validation."""

    input_dir: Path
    catalog_path: Path


class CatalogPathValidator:
    """Validate the input directory and create the output asset catalog.

    Validation creates the catalog directory, so it cannot simply be run
    twice. Once it has succeeded, :meth:`validate` returns the cached paths;
    once it has failed, it re-raises the recorded error.

    Parameters
    ----------
    input_dir : Path
        Directory containing the source SVG files.
    asset_catalog : Path
        Path of the ``.xcassets`` directory to create.
    force : bool, default=False
        Remove an existing catalog at ``asset_catalog`` first.
    """

    def __init__(self, input_dir: Path, asset_catalog: Path, force: bool = False) -> None:
        self.input_dir = Path(input_dir)
        self.asset_catalog = Path(asset_catalog)
        self.force = force
        self._state = ValidationState.UNVALIDATED
        self._paths: ValidatedPaths | None = None
        self._error: Svg2AssetError | None = None

    @property
    def state(self) -> ValidationState:
        """Current validation state."""
        return self._state

    @property
    def paths(self) -> ValidatedPaths:
        """Resolved paths; only available once validated."""
        if self._state is not ValidationState.VALIDATED or self._paths is None:
            raise ValidationStateError(
                f"Paths are not available in state '{self._state.value}'."
            )
        return self._paths

    def validate(self) -> ValidatedPaths:
        """Run the directory checks once and create the catalog directory.

        Returns
        -------
        ValidatedPaths
            Symlink-resolved input directory and absolute catalog path.

        Raises
        ------
        DirectoryCheckError
            If any of the checks fails.
        CatalogWriteError
            If an existing catalog could not be removed with ``force``.
        """
        if self._state is ValidationState.VALIDATED:
            return self.paths
        if self._state is ValidationState.FAILED and self._error is not None:
            raise self._error

        try:
            paths = self._run_checks()
        except Svg2AssetError as exc:
            self._state = ValidationState.FAILED
            self._error = exc
            raise
        self._paths = paths
        self._state = ValidationState.VALIDATED
        return paths

    def _run_checks(self) -> ValidatedPaths:
        if self.asset_catalog.suffix != f".{CATALOG_EXTENSION}":
            raise DirectoryCheckError(DirectoryCheckKind.INVALID_CATALOG_NAME)

        output_dir = self.asset_catalog.parent
        if not (self.input_dir.exists() and output_dir.exists()):
            raise DirectoryCheckError(DirectoryCheckKind.MISSING_DIRECTORIES)

        if self.force and _lexists(self.asset_catalog):
            logger.info("Overwriting existing asset catalog at destination.")
            _remove_tree(self.asset_catalog)

        input_dir = self.input_dir.resolve()
        try:
            input_stat = input_dir.stat()
        except OSError as exc:
            raise DirectoryCheckError(DirectoryCheckKind.INPUT_STAT_UNAVAILABLE) from exc
        if not (stat.S_ISDIR(input_stat.st_mode) and os.access(input_dir, os.R_OK)):
            raise DirectoryCheckError(DirectoryCheckKind.INPUT_DIRECTORY_INVALID)

        output_dir = output_dir.resolve()
        try:
            output_stat = output_dir.stat()
        except OSError as exc:
            raise DirectoryCheckError(DirectoryCheckKind.OUTPUT_STAT_UNAVAILABLE) from exc
        if not (stat.S_ISDIR(output_stat.st_mode) and os.access(output_dir, os.W_OK)):
            raise DirectoryCheckError(DirectoryCheckKind.OUTPUT_DIRECTORY_INVALID)

        catalog_path = output_dir / self.asset_catalog.name
        if _lexists(catalog_path):
            raise DirectoryCheckError(DirectoryCheckKind.CATALOG_ALREADY_EXISTS)

        try:
            catalog_path.mkdir(parents=False, exist_ok=False)
        except OSError as exc:
            raise DirectoryCheckError(DirectoryCheckKind.CATALOG_CREATION_FAILED) from exc

        return ValidatedPaths(input_dir=input_dir, catalog_path=catalog_path)


def _lexists(path: Path) -> bool:
    return path.exists() or path.is_symlink()


def _remove_tree(path: Path) -> None:
    """Remove a file, symlink or directory tree at ``path``."""
    try:
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink()
    except OSError as exc:
        raise CatalogWriteError(
            f"Could not remove existing asset catalog at {path}: {exc}"
        ) from exc


def locate_converter(svg2pdf_path: Path) -> Path:
    """Return the svg2pdf binary path, failing if it is not installed.

    Raises
    ------
    ConverterNotFoundError
        If no file exists at ``svg2pdf_path``.
    """
    path = Path(svg2pdf_path)
    if not path.is_file():
        raise ConverterNotFoundError(
            f"Could not find svg2pdf at {path}. Please install it via Homebrew."
        )
    return path


def locate_generator(swiftgen_path: Path | None) -> Path | None:
    """Return the SwiftGen binary path if installed, otherwise ``None``."""
    if swiftgen_path is None:
        return None
    path = Path(swiftgen_path)
    return path if path.is_file() else None
