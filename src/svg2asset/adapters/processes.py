"""Subprocess adapter used to invoke external tools."""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from pathlib import Path

from svg2asset.application.ports import ProcessOutcome


class SubprocessRunner:
    """Run executables with ``subprocess.run``, capturing standard error."""

    def run(
        self,
        executable: Path,
        arguments: Sequence[str],
        timeout: float | None = None,
    ) -> ProcessOutcome:
        """Run ``executable`` with ``arguments`` and wait for it to exit.

        Parameters
        ----------
        executable : Path
            Path to the binary.
        arguments : Sequence[str]
            Positional arguments passed after the executable.
        timeout : float | None, default=None
            Seconds to wait before killing the process.

        Returns
        -------
        ProcessOutcome
            Exit status and the full captured standard-error stream.

        Raises
        ------
        subprocess.TimeoutExpired
            If the timeout elapsed; the child has already been killed.
        OSError
            If the executable cannot be started.
        """
        completed = subprocess.run(
            [str(executable), *arguments],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.PIPE,
            timeout=timeout,
            check=False,
        )
        return ProcessOutcome(returncode=completed.returncode, stderr=completed.stderr or b"")
