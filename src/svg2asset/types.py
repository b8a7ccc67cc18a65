"""Shared type aliases and constants for catalog conversion."""

from __future__ import annotations

from typing import Literal, TypeAlias

ItemStatus: TypeAlias = Literal["success", "failure"]

SOURCE_EXTENSION = "svg"
CATALOG_EXTENSION = "xcassets"
ITEM_SUFFIX = "imageset"
CONVERTED_SUFFIX = "pdf"
CONTENTS_FILENAME = "Contents.json"
TEMPLATE_RENDERING_INTENT = "template"

DEFAULT_SVG2PDF_PATH = "/usr/local/bin/svg2pdf"
DEFAULT_SWIFTGEN_PATH = "/usr/local/bin/swiftgen"
DEFAULT_ASSET_CATALOG = "./Assets.xcassets"
