"""
Lookup tables: the symbol dictionary and the Blissary id map.

Both are fetched once, before the engine is used, and shared read-only.
Sources are URLs (fetched with httpx) or local JSON files.
"""

import asyncio
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

import httpx

from blissword.core.dictionary import SymbolDictionary
from blissword.core.errors import TableLoadError
from blissword.core.idmap import IdMap

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SymbolTables:
    dictionary: SymbolDictionary = field(default_factory=SymbolDictionary)
    id_map: IdMap = field(default_factory=IdMap)


def read_json_file(path: str | Path):
    path = Path(path)
    if not path.exists():
        raise TableLoadError(str(path), "file not found")
    try:
        return json.loads(path.read_text())
    except json.JSONDecodeError as e:
        raise TableLoadError(str(path), f"invalid JSON ({e})") from e


async def fetch_json(client: httpx.AsyncClient, url: str):
    try:
        r = await client.get(url)
        r.raise_for_status()
        return r.json()
    except httpx.HTTPError as e:
        raise TableLoadError(url, str(e)) from e
    except ValueError as e:
        raise TableLoadError(url, f"invalid JSON ({e})") from e


async def _load_source(client: httpx.AsyncClient, path: str | None, url: str | None):
    if path:
        return read_json_file(path)
    if url:
        return await fetch_json(client, url)
    return None


async def load_tables(dictionary_path: str | None = None, dictionary_url: str | None = None,
                      id_map_path: str | None = None, id_map_url: str | None = None,
                      timeout: float = 60) -> SymbolTables:
    """Load both tables concurrently. A table with no source comes back empty."""
    async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as client:
        dict_data, map_data = await asyncio.gather(
            _load_source(client, dictionary_path, dictionary_url),
            _load_source(client, id_map_path, id_map_url),
        )

    try:
        dictionary = SymbolDictionary.from_json(dict_data) if dict_data is not None else SymbolDictionary()
    except (ValueError, KeyError, TypeError) as e:
        raise TableLoadError(dictionary_path or dictionary_url, f"bad dictionary ({e})") from e
    try:
        id_map = IdMap.from_json(map_data) if map_data is not None else IdMap()
    except (ValueError, KeyError, TypeError) as e:
        raise TableLoadError(id_map_path or id_map_url, f"bad id map ({e})") from e

    logger.info("Loaded %d dictionary entries, %d id map records", len(dictionary), len(id_map))
    return SymbolTables(dictionary=dictionary, id_map=id_map)


async def load_tables_from_settings(settings) -> SymbolTables:
    return await load_tables(
        dictionary_path=settings.dictionary_path,
        dictionary_url=settings.dictionary_url,
        id_map_path=settings.id_map_path,
        id_map_url=settings.id_map_url,
        timeout=settings.fetch_timeout,
    )
