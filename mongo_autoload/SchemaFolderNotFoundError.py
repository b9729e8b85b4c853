"""Raised when the configured schema folder does not exist."""

from pathlib import Path


class SchemaFolderNotFoundError(FileNotFoundError):
    """The schema folder is missing or is not a directory."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(
            f"Schema folder not found: {path}. Please create the folder and add your schema modules."
        )
