"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol


@dataclass(frozen=True)
class ProcessOutcome:
    """Exit status and captured standard error of a finished process."""

    returncode: int
    stderr: bytes = b""


class ProcessRunner(Protocol):
    """Run an external executable to completion."""

    def run(
        self,
        executable: Path,
        arguments: Sequence[str],
        timeout: float | None = None,
    ) -> ProcessOutcome:
        """Run the executable and wait for it to exit.

        Raises
        ------
        subprocess.TimeoutExpired
            If ``timeout`` elapses; the process has been killed.
        OSError
            If the process cannot be started.
        """


class CatalogPostProcessor(Protocol):
    """Run follow-up tooling against a finished asset catalog."""

    def run(self, catalog_path: Path) -> Path | None:
        """Process the catalog; return the generated file path, if any."""
