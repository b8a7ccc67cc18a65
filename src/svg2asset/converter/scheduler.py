"""Batch scheduling of conversion tasks across a worker pool."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from pathlib import Path

from svg2asset.application.options import BatchOptions
from svg2asset.application.ports import ProcessRunner
from svg2asset.application.results import BatchResult, ItemResult
from svg2asset.converter.core import ConversionItem, convert_item
from svg2asset.errors import EnumerationError
from svg2asset.types import SOURCE_EXTENSION

logger = logging.getLogger(__name__)


def enumerate_inputs(input_dir: Path) -> list[Path]:
    """List the direct children of ``input_dir``.

    Raises
    ------
    EnumerationError
        If the directory cannot be read.
    """
    try:
        return list(input_dir.iterdir())
    except OSError as exc:
        raise EnumerationError(
            f"Could not read contents of directory at {input_dir}: {exc}"
        ) from exc


def select_inputs(entries: Iterable[Path], icon_names: Sequence[str] = ()) -> list[Path]:
    """Filter, sort and keep only eligible source files.

    Parameters
    ----------
    entries : Iterable[Path]
        Directory entries.
    icon_names : Sequence[str], default=()
        Allow-list of full file names (extension included). Ignored when
        empty.

    Returns
    -------
    list[Path]
        Regular ``.svg`` files ordered by path.
    """
    selected = list(entries)
    if icon_names:
        allowed = set(icon_names)
        selected = [entry for entry in selected if entry.name in allowed]
    selected.sort(key=str)
    return [
        entry
        for entry in selected
        if entry.suffix == f".{SOURCE_EXTENSION}" and entry.is_file()
    ]


def run_batch(
    sources: Sequence[Path],
    *,
    catalog_path: Path,
    converter_path: Path,
    runner: ProcessRunner,
    options: BatchOptions,
) -> BatchResult:
    """Convert every source file and wait for all of them to finish.

    In serial mode tasks run one at a time in the given order. Otherwise they
    run on a thread pool bounded by ``options.max_workers``. Results are
    collected on the calling thread as tasks complete.

    Parameters
    ----------
    sources : Sequence[Path]
        Eligible source files, already filtered and sorted.
    catalog_path : Path
        Validated asset catalog directory.
    converter_path : Path
        svg2pdf binary.
    runner : ProcessRunner
        Process runner shared by all tasks.
    options : BatchOptions
        Scheduling configuration.

    Returns
    -------
    BatchResult
        Per-item results in source order.
    """
    items = [
        ConversionItem(source_path=source, catalog_path=catalog_path, template=options.template)
        for source in sources
    ]
    if not items:
        return BatchResult()

    def _task(item: ConversionItem) -> ItemResult:
        try:
            return convert_item(
                item,
                converter_path=converter_path,
                runner=runner,
                timeout=options.timeout,
            )
        except Exception as exc:
            logger.exception("unexpected error while converting %s", item.name)
            return ItemResult(
                name=item.name,
                source_path=item.source_path,
                status="failure",
                error=str(exc),
            )

    if options.serial:
        return BatchResult(items=tuple(_task(item) for item in items))

    results: dict[Path, ItemResult] = {}
    with ThreadPoolExecutor(
        max_workers=options.worker_count,
        thread_name_prefix="svg2asset",
    ) as executor:
        futures: dict[Future[ItemResult], ConversionItem] = {
            executor.submit(_task, item): item for item in items
        }
        for future in as_completed(futures):
            results[futures[future].source_path] = future.result()
    return BatchResult(items=tuple(results[item.source_path] for item in items))
