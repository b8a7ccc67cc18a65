"""Unit tests for the single-item conversion task."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from svg2asset.converter import core
from svg2asset.converter.core import ConversionItem, convert_item, decode_stderr
from svg2asset.errors import ItemErrorKind

if TYPE_CHECKING:
    from tests.unit_tests.conftest import FakeRunner


@pytest.fixture
def catalog(tmp_path: Path) -> Path:
    path = tmp_path / "Out.xcassets"
    path.mkdir()
    return path


def test_conversion_item_paths(catalog: Path, svg_dir: Path) -> None:
    """Derive image-set and PDF locations from the source base name."""
    item = ConversionItem(source_path=svg_dir / "a.svg", catalog_path=catalog)
    assert item.name == "a"
    assert item.item_dir == catalog / "a.imageset"
    assert item.converted_filename == "a.pdf"
    assert item.converted_path == catalog / "a.imageset" / "a.pdf"


def test_conversion_item_keeps_inner_dots(catalog: Path, tmp_path: Path) -> None:
    """Strip only the last extension from the source name."""
    item = ConversionItem(source_path=tmp_path / "arrow.left.svg", catalog_path=catalog)
    assert item.name == "arrow.left"
    assert item.converted_filename == "arrow.left.pdf"


def test_convert_item_success(
    catalog: Path, svg_dir: Path, fake_runner: FakeRunner, converter_binary: Path
) -> None:
    """Write the image set, its metadata and the converted file."""
    item = ConversionItem(source_path=svg_dir / "a.svg", catalog_path=catalog)
    result = convert_item(item, converter_path=converter_binary, runner=fake_runner)

    assert result.succeeded
    assert result.output_path == item.converted_path
    assert item.converted_path.read_bytes() == b"pdf:<svg id='a'/>"
    contents = json.loads((item.item_dir / "Contents.json").read_text(encoding="utf-8"))
    assert contents["images"] == [{"idiom": "universal", "filename": "a.pdf"}]
    assert contents["properties"] == {"template-rendering-intent": "template"}
    assert fake_runner.calls == [
        (converter_binary, (str(item.source_path), str(item.converted_path)), None)
    ]


def test_convert_item_without_template(
    catalog: Path, svg_dir: Path, fake_runner: FakeRunner, converter_binary: Path
) -> None:
    """Omit the properties block for non-template items."""
    item = ConversionItem(source_path=svg_dir / "a.svg", catalog_path=catalog, template=False)
    convert_item(item, converter_path=converter_binary, runner=fake_runner)
    contents = json.loads((item.item_dir / "Contents.json").read_text(encoding="utf-8"))
    assert "properties" not in contents


def test_convert_item_existing_directory_fails(
    catalog: Path, svg_dir: Path, fake_runner: FakeRunner, converter_binary: Path
) -> None:
    """Fail without invoking the converter when the image set exists."""
    item = ConversionItem(source_path=svg_dir / "a.svg", catalog_path=catalog)
    item.item_dir.mkdir()

    result = convert_item(item, converter_path=converter_binary, runner=fake_runner)

    assert not result.succeeded
    assert result.error_kind is ItemErrorKind.DIRECTORY_CREATION_FAILED
    assert fake_runner.calls == []


def test_convert_item_metadata_failure_keeps_directory(
    catalog: Path,
    svg_dir: Path,
    fake_runner: FakeRunner,
    converter_binary: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Leave the created directory in place when metadata cannot be written."""

    def fail_write(path: Path, document: str) -> None:
        raise OSError("disk full")

    monkeypatch.setattr(core, "write_json", fail_write)
    item = ConversionItem(source_path=svg_dir / "a.svg", catalog_path=catalog)

    result = convert_item(item, converter_path=converter_binary, runner=fake_runner)

    assert result.error_kind is ItemErrorKind.METADATA_WRITE_FAILED
    assert "disk full" in (result.error or "")
    assert item.item_dir.is_dir()
    assert fake_runner.calls == []


def test_convert_item_reports_converter_stderr(
    catalog: Path,
    svg_dir: Path,
    fake_runner: FakeRunner,
    converter_binary: Path,
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Surface captured stderr and keep partial artifacts."""
    fake_runner.failing.add("a")
    item = ConversionItem(source_path=svg_dir / "a.svg", catalog_path=catalog)

    with caplog.at_level(logging.ERROR, logger="svg2asset"):
        result = convert_item(item, converter_path=converter_binary, runner=fake_runner)

    assert result.error_kind is ItemErrorKind.CONVERTER_FAILED
    assert "svg2pdf: bad input" in (result.error or "")
    assert "svg2pdf: bad input" in caplog.text
    assert (item.item_dir / "Contents.json").is_file()
    assert not item.converted_path.exists()


def test_convert_item_timeout(
    catalog: Path, svg_dir: Path, fake_runner: FakeRunner, converter_binary: Path
) -> None:
    """Mark items whose converter was killed as timed out."""
    fake_runner.hanging.add("a")
    item = ConversionItem(source_path=svg_dir / "a.svg", catalog_path=catalog)

    result = convert_item(
        item, converter_path=converter_binary, runner=fake_runner, timeout=0.5
    )

    assert result.error_kind is ItemErrorKind.TIMEOUT
    assert fake_runner.calls[0][2] == 0.5


def test_convert_item_spawn_failure(
    catalog: Path, svg_dir: Path, converter_binary: Path
) -> None:
    """Treat a converter that cannot start as an item failure."""

    class _BrokenRunner:
        def run(self, executable: Path, arguments: object, timeout: object = None) -> None:
            raise PermissionError("not executable")

    item = ConversionItem(source_path=svg_dir / "a.svg", catalog_path=catalog)
    result = convert_item(item, converter_path=converter_binary, runner=_BrokenRunner())
    assert result.error_kind is ItemErrorKind.CONVERTER_UNAVAILABLE


def test_convert_item_logs_progress(
    catalog: Path,
    svg_dir: Path,
    fake_runner: FakeRunner,
    converter_binary: Path,
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Log the processed file name at debug level."""
    item = ConversionItem(source_path=svg_dir / "b.svg", catalog_path=catalog)
    with caplog.at_level(logging.DEBUG, logger="svg2asset"):
        convert_item(item, converter_path=converter_binary, runner=fake_runner)
    assert "Processing b.svg" in caplog.text


@pytest.mark.parametrize(
    ("stderr", "expected"),
    [
        (b"boom\n", "boom"),
        (b"", "Conversion to PDF failed"),
        (b"   \n", "Conversion to PDF failed"),
        (b"\xff\xfe\xfa", "Conversion to PDF failed"),
    ],
)
def test_decode_stderr(stderr: bytes, expected: str) -> None:
    """Fall back to a generic message for empty or undecodable output."""
    assert decode_stderr(stderr) == expected


def test_write_container_metadata(catalog: Path) -> None:
    """Write the catalog-level Contents.json."""
    path = core.write_container_metadata(catalog)
    assert path == catalog / "Contents.json"
    assert json.loads(path.read_text(encoding="utf-8")) == {
        "info": {"version": 1, "author": "xcode"}
    }
