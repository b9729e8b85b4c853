"""Connect an aiohttp application to MongoDB and autoload schema models."""

from .AutoloadConfig import AutoloadConfig
from .bootstrap import bootstrap
from .build_mongo_uri import build_mongo_uri
from .keys import DB_KEY, MODELS_KEY
from .Model import Model
from .ModelRegistry import ModelRegistry, default_registry
from .plugin import setup
from .SchemaFolderNotFoundError import SchemaFolderNotFoundError

__all__ = [
    "DB_KEY",
    "MODELS_KEY",
    "AutoloadConfig",
    "Model",
    "ModelRegistry",
    "SchemaFolderNotFoundError",
    "bootstrap",
    "build_mongo_uri",
    "default_registry",
    "setup",
]
