"""Typed option objects shared across conversion use-cases."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from svg2asset.types import DEFAULT_SVG2PDF_PATH, DEFAULT_SWIFTGEN_PATH


def default_max_workers() -> int:
    """Return the default worker-pool size for concurrent conversion."""
    return min(32, (os.cpu_count() or 1) + 4)


@dataclass(frozen=True)
class ToolPaths:
    """Installation paths of the external binaries."""

    svg2pdf: Path = Path(DEFAULT_SVG2PDF_PATH)
    swiftgen: Path = Path(DEFAULT_SWIFTGEN_PATH)


@dataclass(frozen=True)
class BatchOptions:
    """Batch scheduling configuration."""

    serial: bool = False
    max_workers: int = field(default_factory=default_max_workers)
    timeout: float | None = None
    icon_names: tuple[str, ...] = ()
    template: bool = True

    @property
    def worker_count(self) -> int:
        """Number of tasks allowed to run at the same time."""
        return 1 if self.serial else self.max_workers


@dataclass(frozen=True)
class ConversionOptions:
    """Shared options passed through the catalog use-case."""

    force: bool = False
    swiftgen: bool = False
    batch: BatchOptions = field(default_factory=BatchOptions)
    tools: ToolPaths = ToolPaths()
