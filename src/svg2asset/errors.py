"""Exception hierarchy for catalog conversion."""

from __future__ import annotations

from enum import Enum


class Svg2AssetError(Exception):
    """Base error for fatal conversion failures.

    Attributes
    ----------
    exit_code : int
        Process exit status used by the CLI when this error is fatal.
    """

    exit_code: int = 1


class DirectoryCheckKind(Enum):
    """Reasons the input/output directory validation can fail."""

    INVALID_CATALOG_NAME = "Output filename should end with `.xcassets`"
    MISSING_DIRECTORIES = "Input and output directories must exist"
    INPUT_STAT_UNAVAILABLE = "Can't check input directory"
    INPUT_DIRECTORY_INVALID = "Input must be a directory and must be readable"
    OUTPUT_STAT_UNAVAILABLE = "Can't check output directory"
    OUTPUT_DIRECTORY_INVALID = "Output must be a directory and must be writeable"
    CATALOG_ALREADY_EXISTS = "An asset catalog already exists at the destination"
    CATALOG_CREATION_FAILED = "Could not create asset catalog at output path"


class DirectoryCheckError(Svg2AssetError):
    """Raised when the input directory or output catalog path is unusable."""

    exit_code = 2

    def __init__(self, kind: DirectoryCheckKind) -> None:
        super().__init__(kind.value)
        self.kind = kind


class ConverterNotFoundError(Svg2AssetError):
    """Raised when the svg2pdf binary is not installed."""

    exit_code = 3


class CatalogWriteError(Svg2AssetError):
    """Raised when the catalog container cannot be prepared or written."""

    exit_code = 2


class EnumerationError(Svg2AssetError):
    """Raised when the input directory cannot be listed."""

    exit_code = 4


class ValidationStateError(Svg2AssetError):
    """Raised when a validator is driven through an invalid transition."""


class ItemErrorKind(Enum):
    """Reasons a single item conversion can fail."""

    DIRECTORY_CREATION_FAILED = "directory-creation-failed"
    METADATA_WRITE_FAILED = "metadata-write-failed"
    CONVERTER_UNAVAILABLE = "converter-unavailable"
    CONVERTER_FAILED = "converter-failed"
    TIMEOUT = "timeout"


class ItemConversionError(Exception):
    """Raised inside a conversion task; never propagates past the task.

    Parameters
    ----------
    name : str
        Base name of the item that failed.
    kind : ItemErrorKind
        Failure category.
    detail : str
        Human readable cause.
    """

    def __init__(self, name: str, kind: ItemErrorKind, detail: str) -> None:
        super().__init__(detail)
        self.name = name
        self.kind = kind
        self.detail = detail
