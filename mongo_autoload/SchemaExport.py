"""Name/schema pair exported by a schema module."""

from pathlib import Path
from typing import NamedTuple

from pydantic import BaseModel


class SchemaExport(NamedTuple):
    name: str
    schema: type[BaseModel]
    collection: str
    source: Path
