"""Connect, load schema models, and attach the client to an application."""

import logging
from collections.abc import Callable
from typing import Any

from aiohttp import web

from .AutoloadConfig import AutoloadConfig
from .build_mongo_uri import build_mongo_uri
from .connect_client import MongoClient, connect_client
from .discover_schemas import discover_schemas
from .keys import DB_KEY, MODELS_KEY
from .list_schema_files import list_schema_files
from .ModelRegistry import ModelRegistry
from .register_schemas import register_schemas
from .resolve_schemas_folder import resolve_schemas_folder


async def bootstrap(
    app: web.Application,
    config: AutoloadConfig,
    registry: ModelRegistry,
    logger: logging.Logger,
    client_factory: Callable[[str], Any] = MongoClient,
) -> Any:
    """Run the startup sequence for one application.

    Connection failure and a missing schema folder are fatal: they are logged
    and re-raised unchanged, the client is closed, and nothing is attached to
    ``app``. Problems with individual schema files are logged and skipped.
    Every model in ``registry``, including ones registered by an earlier
    bootstrap, is rebound to this client's database.

    Returns:
        The connected client, also stored under ``app[DB_KEY]``
    """
    uri = build_mongo_uri(config)
    client = None
    try:
        client = await connect_client(uri, client_factory)
        logger.info("MongoDB connected at %s:%s/%s", config.host, config.port, config.dbname)

        folder = resolve_schemas_folder(config.schemas_folder)
        files = list_schema_files(folder)
        created = register_schemas(discover_schemas(files, logger), registry, logger)
        registry.bind(client[config.dbname])
        logger.debug("Registered %d new model(s) from %s", len(created), folder)
    except Exception as exc:
        logger.error("Error on MongoDB loading: %s", exc)
        if client is not None:
            client.close()
        raise

    app[DB_KEY] = client
    app[MODELS_KEY] = registry
    return client
