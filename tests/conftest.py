"""Shared pytest configuration, marker assignment and fixtures."""

from __future__ import annotations

import logging
import stat
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

from svg2asset.cli.cli import LOG_HANDLER_NAME

FAKE_SVG2PDF = """\
import sys
from pathlib import Path

source, target = Path(sys.argv[1]), Path(sys.argv[2])
if "broken" in source.name:
    sys.stderr.write(f"svg2pdf: failed to parse {source.name}\\n")
    sys.exit(1)
target.write_bytes(b"%PDF-1.4\\n" + source.read_bytes())
"""


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def _reset_cli_logging() -> Iterator[None]:
    """Drop the stderr handler installed by CLI invocations."""
    yield
    package_logger = logging.getLogger("svg2asset")
    for handler in list(package_logger.handlers):
        if handler.get_name() == LOG_HANDLER_NAME:
            package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def fake_svg2pdf(tmp_path: Path) -> Path:
    """Write an executable stand-in for svg2pdf.

    It copies the SVG bytes behind a PDF header and fails for files whose
    name contains ``broken``.
    """
    if sys.platform == "win32":
        pytest.skip("shebang scripts are not executable on Windows")
    script = tmp_path / "bin" / "svg2pdf"
    script.parent.mkdir()
    script.write_text(f"#!{sys.executable}\n{FAKE_SVG2PDF}", encoding="utf-8")
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return script


@pytest.fixture
def svg_dir(tmp_path: Path) -> Path:
    """Input directory with two SVGs and a non-SVG file."""
    directory = tmp_path / "icons"
    directory.mkdir()
    (directory / "a.svg").write_text("<svg id='a'/>", encoding="utf-8")
    (directory / "b.svg").write_text("<svg id='b'/>", encoding="utf-8")
    (directory / "readme.txt").write_text("not an icon", encoding="utf-8")
    return directory
