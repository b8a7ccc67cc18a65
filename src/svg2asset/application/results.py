"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from svg2asset.errors import ItemErrorKind
from svg2asset.types import ItemStatus


@dataclass(frozen=True)
class ItemResult:
    """Outcome of one conversion task."""

    name: str
    source_path: Path
    status: ItemStatus
    output_path: Path | None = None
    error_kind: ItemErrorKind | None = None
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        """Whether the converted file was written."""
        return self.status == "success"


@dataclass(frozen=True)
class BatchResult:
    """Aggregate outcome of a batch run."""

    items: tuple[ItemResult, ...] = ()

    @property
    def total(self) -> int:
        """Number of dispatched items."""
        return len(self.items)

    @property
    def succeeded(self) -> int:
        """Number of items converted successfully."""
        return sum(1 for item in self.items if item.succeeded)

    @property
    def failed(self) -> int:
        """Number of items that failed."""
        return self.total - self.succeeded


@dataclass(frozen=True)
class CatalogResult:
    """Structured outcome of a full catalog conversion."""

    input_dir: Path
    catalog_path: Path
    batch: BatchResult
    generated_source: Path | None = None
