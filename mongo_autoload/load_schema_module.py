"""Load a schema file as an isolated Python module."""

import hashlib
import importlib.util
import sys
from pathlib import Path
from types import ModuleType


def _module_name(path: Path) -> str:
    digest = hashlib.sha1(str(path.resolve()).encode()).hexdigest()[:12]
    return f"_mongo_autoload_schema_{digest}_{path.stem}"


def load_schema_module(path: Path) -> ModuleType:
    """Execute ``path`` and return the resulting module.

    The module gets a name derived from its absolute path so that files with the
    same stem in different folders do not collide in ``sys.modules``. Any
    exception raised while executing the file propagates to the caller.
    """
    module_name = _module_name(path)
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise ImportError(f"Cannot create an import spec for {path}")

    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except BaseException:
        sys.modules.pop(module_name, None)
        raise
    return module
