"""List candidate schema files in a folder."""

from pathlib import Path

from .SchemaFolderNotFoundError import SchemaFolderNotFoundError

SCHEMA_SUFFIX = ".py"


def list_schema_files(folder: Path) -> list[Path]:
    """Return the schema files directly inside ``folder``, sorted by name.

    Sub-directories, dotfiles, ``__init__.py`` and files without the ``.py``
    suffix are skipped. Sub-directories are not recursed into.

    Raises:
        SchemaFolderNotFoundError: If ``folder`` does not exist or is not a directory
    """
    if not folder.is_dir():
        raise SchemaFolderNotFoundError(folder)

    files: list[Path] = []
    for entry in sorted(folder.iterdir()):
        if entry.name.startswith(".") or entry.name == "__init__.py":
            continue
        if entry.suffix != SCHEMA_SUFFIX:
            continue
        if entry.is_dir():
            continue
        files.append(entry)
    return files
