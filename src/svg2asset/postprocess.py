"""Helpers for SwiftGen code generation against a finished catalog."""

from __future__ import annotations

from pathlib import Path

SWIFTGEN_TEMPLATE = "swift4"


def generated_source_path(catalog_path: Path) -> Path:
    """Return the sibling ``.swift`` file named after the catalog."""
    return catalog_path.parent / f"{catalog_path.stem}.swift"


def swiftgen_enum_name(catalog_path: Path) -> str:
    """Return the enum name SwiftGen should generate for the catalog."""
    return f"{catalog_path.stem}Assets"


def build_swiftgen_arguments(catalog_path: Path) -> list[str]:
    """Build the SwiftGen ``xcassets`` argument list for a catalog.

    Parameters
    ----------
    catalog_path : Path
        Path to the ``.xcassets`` directory.

    Returns
    -------
    list[str]
        Arguments to pass after the SwiftGen executable.
    """
    return [
        "xcassets",
        "--templateName",
        SWIFTGEN_TEMPLATE,
        "--output",
        str(generated_source_path(catalog_path)),
        "--param",
        f"enumName={swiftgen_enum_name(catalog_path)}",
        str(catalog_path),
    ]
