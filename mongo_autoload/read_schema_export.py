"""Read the ``name``/``schema`` export from a loaded schema module."""

from pathlib import Path
from types import ModuleType

from pydantic import BaseModel

from .SchemaExport import SchemaExport


def _check_collection_name(collection: str) -> None:
    # Same rules pymongo enforces when a Collection is created.
    if not collection:
        raise ValueError("collection names cannot be empty")
    if ".." in collection:
        raise ValueError(f"collection names must not contain '..': {collection!r}")
    if "$" in collection:
        raise ValueError(f"collection names must not contain '$': {collection!r}")
    if collection.startswith(".") or collection.endswith("."):
        raise ValueError(f"collection names must not start or end with '.': {collection!r}")
    if "\x00" in collection:
        raise ValueError(f"collection names must not contain the null character: {collection!r}")


def read_schema_export(module: ModuleType, source: Path) -> SchemaExport | None:
    """Extract the schema export of ``module``.

    Args:
        module: Module produced by ``load_schema_module``
        source: File the module was loaded from

    Returns:
        The export, or None when ``name`` is missing/empty or ``schema`` is missing.

    Raises:
        TypeError: If ``name``, ``schema`` or ``collection`` have the wrong type
        ValueError: If the collection name is not a valid MongoDB collection name
    """
    name = getattr(module, "name", None)
    schema = getattr(module, "schema", None)
    if not name or schema is None:
        return None

    if not isinstance(name, str):
        raise TypeError(f"'name' must be a string, got {type(name).__name__}")
    if not (isinstance(schema, type) and issubclass(schema, BaseModel)):
        raise TypeError(f"'schema' must be a pydantic BaseModel subclass, got {schema!r}")

    collection = getattr(module, "collection", None) or name.lower()
    if not isinstance(collection, str):
        raise TypeError(f"'collection' must be a string, got {type(collection).__name__}")
    _check_collection_name(collection)

    return SchemaExport(name=name, schema=schema, collection=collection, source=source)
