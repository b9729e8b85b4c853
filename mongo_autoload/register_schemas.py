"""Register schema exports as models."""

import logging
from collections.abc import Iterable

from .Model import Model
from .ModelRegistry import ModelRegistry
from .SchemaExport import SchemaExport


def register_schemas(
    exports: Iterable[SchemaExport],
    registry: ModelRegistry,
    logger: logging.Logger,
) -> list[str]:
    """Insert a model for each export whose name is not yet registered.

    Models are created unbound; ``ModelRegistry.bind`` attaches them to a database.

    Args:
        exports: Schema exports, typically from ``discover_schemas``
        registry: Registry receiving the models
        logger: Logger for per-model decisions

    Returns:
        Names of the models created by this call, in registration order
    """
    created: list[str] = []
    for export in exports:
        if registry.insert_if_absent(Model(export.name, export.schema, export.collection)):
            logger.info("Creating %s model", export.name)
            created.append(export.name)
        else:
            logger.info("Model %s already exists, skipping", export.name)
    return created
