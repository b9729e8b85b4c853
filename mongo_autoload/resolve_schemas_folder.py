"""Resolve the schema folder option to a path."""

from pathlib import Path

_PACKAGE_DIR = Path(__file__).parent


def resolve_schemas_folder(schemas_folder: str) -> Path:
    """Resolve ``schemas_folder`` against the plugin package directory.

    Relative paths are anchored at this package, not the caller's working
    directory. ``~`` is expanded and absolute paths are returned as given.
    """
    folder = Path(schemas_folder).expanduser()
    if folder.is_absolute():
        return folder
    return _PACKAGE_DIR / folder
