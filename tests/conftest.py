"""Shared fixtures: small symbol tables and an in-memory Redis stand-in."""

import pytest

from blissword.core.dictionary import SymbolDictionary
from blissword.core.idmap import IdMap
from blissword.core.tables import SymbolTables


DICTIONARY_JSON = {
    "8499": {"description": "suffix", "isCharacter": True},
    "8993": {"description": "indicator (action)", "isCharacter": True},
    "9011": {"description": "indicator (plural)", "isCharacter": True},
    "13090": {"description": "activity", "isCharacter": True},
    "14947": {"description": "intensity", "isCharacter": True},
    "15162": {"description": "walk", "isCharacter": True},
    "15733": {"description": "road", "isCharacter": True},
    "17697": {"description": "roof", "isCharacter": True},
    "17720": {"description": "house", "isCharacter": True},
    "12335": {"description": "action,doing", "composition": [13090, "/", 8993]},
    "20000": {"description": "intense doing", "composition": [12335, "/", 14947]},
    "23409": {"description": "cat"},
    "30000": {"description": "broken", "composition": [99999]},
}

ID_MAP_JSON = [
    {"blissaryId": 106, "bciAvId": 12335, "blissSvgBuilderCode": "B106"},
    {"blissaryId": 12, "bciAvId": 8499, "blissSvgBuilderCode": "B12"},
    {"blissaryId": 1, "bciAvId": 8993, "blissSvgBuilderCode": "B1"},
    {"blissaryId": 2, "bciAvId": 9011, "blissSvgBuilderCode": "B2"},
    {"blissaryId": 3, "bciAvId": 13090, "blissSvgBuilderCode": "B3"},
    {"blissaryId": 300, "bciAvId": 24000, "blissSvgBuilderCode": "B106;B12"},
    # second spelling for 12335; the first record wins
    {"blissaryId": 107, "bciAvId": 12335, "blissSvgBuilderCode": "B107"},
]


class FakeRedis:
    """Just enough of redis.Redis for BufferStore."""

    def __init__(self):
        self.data = {}
        self.writes = 0

    def get(self, key):
        return self.data.get(key)

    def set(self, key, value):
        self.writes += 1
        self.data[key] = value.encode() if isinstance(value, str) else value
        return True

    def delete(self, *keys):
        removed = 0
        for key in keys:
            if self.data.pop(key, None) is not None:
                removed += 1
        return removed


@pytest.fixture
def dictionary():
    return SymbolDictionary.from_json(DICTIONARY_JSON)


@pytest.fixture
def cyclic_dictionary():
    return SymbolDictionary.from_json({
        "1": {"description": "one", "composition": [2]},
        "2": {"description": "two", "composition": [1]},
        "3": {"description": "self", "composition": [17720, "/", 3]},
        "17720": {"description": "house", "isCharacter": True},
    })


@pytest.fixture
def id_map():
    return IdMap.from_json(ID_MAP_JSON)


@pytest.fixture
def tables(dictionary, id_map):
    return SymbolTables(dictionary=dictionary, id_map=id_map)


@pytest.fixture
def fake_redis():
    return FakeRedis()
