"""Unit tests for mongo_autoload.list_schema_files."""

import pytest

from mongo_autoload.list_schema_files import list_schema_files
from mongo_autoload.SchemaFolderNotFoundError import SchemaFolderNotFoundError


def test_filters_dotfiles_extensions_and_directories(schemas_dir):
    (schemas_dir / "a.py").write_text("")
    (schemas_dir / ".hidden.py").write_text("")
    (schemas_dir / "b.txt").write_text("")
    (schemas_dir / "__init__.py").write_text("")
    (schemas_dir / "sub").mkdir()
    (schemas_dir / "sub" / "c.py").write_text("")
    (schemas_dir / "pkg.py").mkdir()

    assert list_schema_files(schemas_dir) == [schemas_dir / "a.py"]


def test_sorted_by_name(schemas_dir):
    for name in ("zebra.py", "apple.py", "mango.py"):
        (schemas_dir / name).write_text("")
    assert [p.name for p in list_schema_files(schemas_dir)] == ["apple.py", "mango.py", "zebra.py"]


def test_empty_folder(schemas_dir):
    assert list_schema_files(schemas_dir) == []


def test_missing_folder_raises(tmp_path):
    missing = tmp_path / "nope"
    with pytest.raises(SchemaFolderNotFoundError, match="Schema folder not found") as excinfo:
        list_schema_files(missing)
    assert excinfo.value.path == missing
    assert isinstance(excinfo.value, FileNotFoundError)


def test_file_instead_of_folder_raises(tmp_path):
    not_a_dir = tmp_path / "models.py"
    not_a_dir.write_text("")
    with pytest.raises(SchemaFolderNotFoundError):
        list_schema_files(not_a_dir)
