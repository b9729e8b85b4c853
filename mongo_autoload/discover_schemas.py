"""Turn schema files into schema exports, isolating per-file failures."""

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from .load_schema_module import load_schema_module
from .read_schema_export import read_schema_export
from .SchemaExport import SchemaExport


def discover_schemas(files: Iterable[Path], logger: logging.Logger) -> Iterator[SchemaExport]:
    """Yield the export of each file that loads cleanly.

    A file that raises while loading is logged at ERROR and skipped. A file
    missing ``name`` or ``schema`` is logged at WARNING and skipped. Neither
    stops the scan.
    """
    for path in files:
        try:
            module = load_schema_module(path)
            export = read_schema_export(module, path)
        except Exception as exc:
            logger.error("Error loading schema from %s: %s", path.name, exc)
            continue

        if export is None:
            logger.warning("Skipping %s: missing name or schema export", path.name)
            continue

        yield export
