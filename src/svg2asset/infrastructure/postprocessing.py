"""Post-processing adapter implementation."""

from __future__ import annotations

import logging
from pathlib import Path

from svg2asset.application.ports import ProcessRunner
from svg2asset.postprocess import build_swiftgen_arguments, generated_source_path

logger = logging.getLogger(__name__)


class SwiftGenPostProcessor:
    """Generate Swift source for a catalog with SwiftGen.

    Parameters
    ----------
    swiftgen_path : Path
        Installed SwiftGen binary.
    runner : ProcessRunner
        Process runner used to invoke SwiftGen.
    """

    def __init__(self, swiftgen_path: Path, runner: ProcessRunner) -> None:
        self.swiftgen_path = swiftgen_path
        self.runner = runner

    def run(self, catalog_path: Path) -> Path | None:
        """Invoke SwiftGen once and wait for it.

        A nonzero exit status is logged as a warning and never fails the run.

        Parameters
        ----------
        catalog_path : Path
            Finished asset catalog.

        Returns
        -------
        Path | None
            The generated source file, or ``None`` if SwiftGen could not be
            started, failed or did not write it.
        """
        output_path = generated_source_path(catalog_path)
        logger.info("Generating Swift code via SwiftGen at %s", output_path)
        # SwiftGen decides whether to overwrite an existing output file.
        try:
            outcome = self.runner.run(
                self.swiftgen_path, build_swiftgen_arguments(catalog_path)
            )
        except OSError as exc:
            logger.warning("Could not start SwiftGen: %s", exc)
            return None
        if outcome.returncode != 0:
            detail = outcome.stderr.decode("utf-8", errors="replace").strip()
            logger.warning(
                "SwiftGen exited with status %d: %s",
                outcome.returncode,
                detail or "no diagnostics",
            )
            return None
        if not output_path.is_file():
            logger.warning("SwiftGen did not write %s", output_path)
            return None
        return output_path
