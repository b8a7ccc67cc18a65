"""Shared test doubles for unit tests."""

from __future__ import annotations

import subprocess
import threading
import time
from collections.abc import Sequence
from pathlib import Path

import pytest

from svg2asset.application.ports import ProcessOutcome


class FakeRunner:
    """In-process stand-in for the subprocess runner.

    Converter calls (two arguments) write ``pdf:<svg bytes>`` to the target.
    Items whose base name is in ``failing`` exit 1 with ``stderr``; names in
    ``hanging`` raise ``TimeoutExpired``. Other calls are SwiftGen calls: they
    write the ``--output`` file unless ``generator_returncode`` is nonzero.
    """

    def __init__(self) -> None:
        self.failing: set[str] = set()
        self.hanging: set[str] = set()
        self.stderr = b"svg2pdf: bad input"
        self.generator_returncode = 0
        self.generator_stderr = b""
        self.delay = 0.0
        self.calls: list[tuple[Path, tuple[str, ...], float | None]] = []
        self.active = 0
        self.peak = 0
        self._lock = threading.Lock()

    def run(
        self,
        executable: Path,
        arguments: Sequence[str],
        timeout: float | None = None,
    ) -> ProcessOutcome:
        with self._lock:
            self.calls.append((executable, tuple(arguments), timeout))
            self.active += 1
            self.peak = max(self.peak, self.active)
        try:
            if self.delay:
                time.sleep(self.delay)
            if len(arguments) != 2:
                return self._run_generator(arguments)
            source, target = Path(arguments[0]), Path(arguments[1])
            if source.stem in self.hanging:
                raise subprocess.TimeoutExpired(cmd=str(executable), timeout=timeout or 0)
            if source.stem in self.failing:
                return ProcessOutcome(returncode=1, stderr=self.stderr)
            target.write_bytes(b"pdf:" + source.read_bytes())
            return ProcessOutcome(returncode=0)
        finally:
            with self._lock:
                self.active -= 1

    def _run_generator(self, arguments: Sequence[str]) -> ProcessOutcome:
        if self.generator_returncode != 0:
            return ProcessOutcome(
                returncode=self.generator_returncode, stderr=self.generator_stderr
            )
        if "--output" in arguments:
            output = Path(arguments[list(arguments).index("--output") + 1])
            output.write_text("// generated\n", encoding="utf-8")
        return ProcessOutcome(returncode=0)

    def converted_sources(self) -> list[str]:
        """Names of the source files passed to the converter, in call order."""
        return [Path(args[0]).name for _, args, _ in self.calls if len(args) == 2]


@pytest.fixture
def fake_runner() -> FakeRunner:
    """Fresh in-process process runner."""
    return FakeRunner()


@pytest.fixture
def converter_binary(tmp_path: Path) -> Path:
    """Placeholder file standing in for an installed svg2pdf binary."""
    path = tmp_path / "tools" / "svg2pdf"
    path.parent.mkdir(exist_ok=True)
    path.write_text("#!/bin/sh\n", encoding="utf-8")
    return path
