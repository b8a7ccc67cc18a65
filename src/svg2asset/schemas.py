"""Pydantic schemas for catalog metadata documents and conversion inputs."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from svg2asset.types import TEMPLATE_RENDERING_INTENT


class CatalogInfo(BaseModel):
    """``info`` block shared by every ``Contents.json``."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    version: int = 1
    author: str = "xcode"


class ImageEntry(BaseModel):
    """One image variant referenced by an image set."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    idiom: Literal["universal"] = "universal"
    filename: str


class ItemProperties(BaseModel):
    """Rendering properties of an image set."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    template_rendering_intent: Literal["template"] = Field(
        default=TEMPLATE_RENDERING_INTENT,
        alias="template-rendering-intent",
    )


class ContainerMetadata(BaseModel):
    """Top-level ``Contents.json`` of an asset catalog."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    info: CatalogInfo = Field(default_factory=CatalogInfo)

    def to_json(self) -> str:
        """Serialize as pretty-printed JSON."""
        return self.model_dump_json(indent=2, by_alias=True, exclude_none=True)


class ItemMetadata(BaseModel):
    """``Contents.json`` of a single image set.

    ``properties`` is left out of the serialized document when it is
    ``None``; it is never emitted as ``null``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    images: tuple[ImageEntry, ...] = Field(min_length=1)
    info: CatalogInfo = Field(default_factory=CatalogInfo)
    properties: ItemProperties | None = None

    @classmethod
    def universal(cls, filename: str, *, template: bool) -> ItemMetadata:
        """Build metadata with a single universal image entry.

        Parameters
        ----------
        filename : str
            Converted file name inside the image set.
        template : bool
            Whether to mark the image as a template (tintable) image.

        Returns
        -------
        ItemMetadata
            Metadata document for the image set.
        """
        return cls(
            images=(ImageEntry(idiom="universal", filename=filename),),
            properties=ItemProperties() if template else None,
        )

    def to_json(self) -> str:
        """Serialize as pretty-printed JSON."""
        return self.model_dump_json(indent=2, by_alias=True, exclude_none=True)


class CatalogConversionConfig(BaseModel):
    """Validated input for a catalog conversion run."""

    model_config = ConfigDict(extra="forbid")

    input_dir: Path
    asset_catalog: Path
    svg2pdf_path: Path
    swiftgen_path: Path | None = None
    max_workers: int = Field(default=1, ge=1)
    timeout: float | None = Field(default=None, gt=0.0)
    icon_names: tuple[str, ...] = ()
