"""Tests for table loading."""

import asyncio
import json

import httpx
import pytest

from blissword.core.dictionary import DictionaryEntry, SymbolDictionary
from blissword.core.errors import TableLoadError
from blissword.core.tables import fetch_json, load_tables

from conftest import DICTIONARY_JSON, ID_MAP_JSON


@pytest.fixture
def table_files(tmp_path):
    dict_path = tmp_path / "dictionary.json"
    map_path = tmp_path / "idmap.json"
    dict_path.write_text(json.dumps(DICTIONARY_JSON))
    map_path.write_text(json.dumps(ID_MAP_JSON))
    return str(dict_path), str(map_path)


def test_load_local_files(table_files):
    dict_path, map_path = table_files
    tables = asyncio.run(load_tables(dictionary_path=dict_path, id_map_path=map_path))
    assert len(tables.dictionary) == len(DICTIONARY_JSON)
    assert tables.dictionary.get(12335).composition == (13090, "/", 8993)
    assert tables.dictionary.get(8993).is_elementary
    assert tables.id_map.spelling(8499) == "B12"


def test_no_sources_gives_empty_tables():
    tables = asyncio.run(load_tables())
    assert len(tables.dictionary) == 0
    assert len(tables.id_map) == 0


def test_missing_file(tmp_path):
    with pytest.raises(TableLoadError):
        asyncio.run(load_tables(dictionary_path=str(tmp_path / "nope.json")))


def test_invalid_json(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json")
    with pytest.raises(TableLoadError):
        asyncio.run(load_tables(dictionary_path=str(path)))


def test_wrong_shape(tmp_path):
    path = tmp_path / "idmap.json"
    path.write_text(json.dumps({"106": 12335}))
    with pytest.raises(TableLoadError):
        asyncio.run(load_tables(id_map_path=str(path)))


def test_dictionary_record_list():
    dictionary = SymbolDictionary.from_json([
        {"id": 23409, "gloss": "cat"},
        {"id": 12335, "gloss": "action", "composition": ["13090", "/", "8993"]},
    ])
    assert dictionary.get(12335) == DictionaryEntry(12335, "action", False, (13090, "/", 8993))
    assert dictionary.gloss(23409) == "cat"


def test_fetch_json():
    def handler(request):
        if request.url.path == "/map.json":
            return httpx.Response(200, json=ID_MAP_JSON)
        return httpx.Response(404)

    async def run(url):
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            return await fetch_json(client, url)

    assert asyncio.run(run("https://tables.test/map.json")) == ID_MAP_JSON
    with pytest.raises(TableLoadError):
        asyncio.run(run("https://tables.test/missing.json"))
