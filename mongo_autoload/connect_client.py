"""Open a MongoDB client and wait for the server handshake."""

import asyncio
from collections.abc import Callable
from typing import Any

try:
    from pymongo import MongoClient
except ImportError as exc:
    raise ImportError("pymongo is required but not installed. Install it with: pip install pymongo") from exc


async def connect_client(uri: str, client_factory: Callable[[str], Any] = MongoClient) -> Any:
    """Create a client for ``uri`` and confirm the server answers.

    ``MongoClient`` connects lazily, so ``server_info()`` is used to force the
    handshake. It blocks, so it runs in a worker thread. On failure the client
    is closed and the driver's exception propagates unchanged.
    """
    client = client_factory(uri)
    try:
        await asyncio.to_thread(client.server_info)  # Test connection
    except Exception:
        client.close()
        raise
    return client
