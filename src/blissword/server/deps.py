"""
Shared dependencies for routes.
"""

import redis
from fastapi import Request
from openai import OpenAI

from blissword.config import get_settings
from blissword.core.inflect import Inflector, OpenAIInflector, SuffixInflector
from blissword.core.store import BufferStore
from blissword.core.tables import SymbolTables


def get_redis() -> redis.Redis:
    settings = get_settings()
    return redis.Redis(host=settings.redis_host, port=settings.redis_port, db=settings.redis_db)


def get_buffer_store() -> BufferStore:
    return BufferStore(get_redis(), prefix=get_settings().buffer_prefix)


def get_tables(request: Request) -> SymbolTables:
    return request.app.state.tables


def get_inflector() -> Inflector:
    settings = get_settings()
    if settings.inflector == "openai":
        return OpenAIInflector(OpenAI(), model=settings.openai_model)
    return SuffixInflector()
