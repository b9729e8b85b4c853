"""aiohttp integration: register the autoloader on an application."""

import logging
from collections.abc import AsyncIterator, Callable, Mapping
from typing import Any

from aiohttp import web

from .AutoloadConfig import AutoloadConfig
from .bootstrap import bootstrap
from .connect_client import MongoClient
from .ModelRegistry import ModelRegistry, default_registry
from .utils.logger import get_logger


def setup(
    app: web.Application,
    options: "Mapping[str, Any] | AutoloadConfig | None" = None,
    *,
    registry: ModelRegistry | None = None,
    client_factory: Callable[[str], Any] = MongoClient,
    logger: logging.Logger | None = None,
) -> AutoloadConfig:
    """Install the MongoDB model autoloader on ``app``.

    Options are validated now, so bad option names or values fail before the
    server starts. Connecting and scanning happen when the application starts
    up; any fatal error there aborts the host's startup. The client is closed
    on application cleanup.

    Args:
        app: Host application
        options: Plugin options, merged with the defaults
        registry: Model registry to fill (default: the process-wide ``default_registry``)
        client_factory: Callable building a client from a connection URI
        logger: Logger for startup decisions (default: ``mongo_autoload.plugin``)

    Returns:
        The validated configuration

    Example:
        ```python
        app = web.Application()
        mongo_autoload.setup(app, {"dbname": "shop", "schemasFolder": "/srv/shop/models"})
        ```
    """
    config = AutoloadConfig.from_options(options)
    target_registry = default_registry if registry is None else registry
    log = logger or get_logger("plugin")

    async def _mongo_autoload_ctx(app: web.Application) -> AsyncIterator[None]:
        client = await bootstrap(app, config, target_registry, log, client_factory)
        yield
        client.close()
        log.info("MongoDB connection closed")

    app.cleanup_ctx.append(_mongo_autoload_ctx)
    return config
