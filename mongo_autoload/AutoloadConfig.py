"""Plugin options with Pydantic validation."""

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class AutoloadConfig(BaseModel):
    """Connection and schema-discovery options for the autoloader.

    Every option is optional; omitted ones fall back to the defaults below.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    host: str = Field(default="localhost", description="MongoDB host")
    port: int = Field(default=27017, gt=0, lt=65536, description="MongoDB port")
    user: str = Field(default="anonymous", description="MongoDB user name")
    password: str = Field(default="mypassword", description="MongoDB password")
    dbname: str = Field(default="mydb", description="Target database name")
    schemas_folder: str = Field(
        default="./mymodels",
        alias="schemasFolder",
        description="Folder scanned for schema files, relative to the plugin package unless absolute",
    )

    @classmethod
    def from_options(cls, options: "Mapping[str, Any] | AutoloadConfig | None" = None) -> "AutoloadConfig":
        """Merge host-supplied options with the defaults."""
        if options is None:
            return cls()
        if isinstance(options, AutoloadConfig):
            return options
        return cls.model_validate(dict(options))

    @classmethod
    def load(cls, path: Path) -> "AutoloadConfig":
        """Load and validate options from a JSON file.

        Raises:
            ValueError: If the file is not found, holds invalid JSON, or fails validation
        """
        if not path.exists():
            raise ValueError(f"Configuration file not found at {path}")

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must hold a JSON object, got {type(raw).__name__}")

        try:
            return cls.model_validate(raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e
