"""Application keys under which the plugin exposes its capabilities."""

from aiohttp import web

from .connect_client import MongoClient
from .ModelRegistry import ModelRegistry

DB_KEY = web.AppKey("db", MongoClient)
MODELS_KEY = web.AppKey("models", ModelRegistry)
