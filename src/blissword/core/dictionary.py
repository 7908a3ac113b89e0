"""
Symbol dictionary: BCI-AV ID -> gloss, elementary flag, composition.

Loaded once from JSON and never mutated afterwards.

  {
    "12335": {"description": "action,doing", "composition": [13090, "/", 8993]},
    "8993":  {"description": "indicator (action)", "isCharacter": true}
  }
"""

from dataclasses import dataclass
from typing import Iterator

from blissword.core.symbols import Element, normalize


@dataclass(frozen=True)
class DictionaryEntry:
    id: int
    gloss: str
    is_elementary: bool = False
    composition: tuple[Element, ...] | None = None

    @property
    def is_composite(self) -> bool:
        return not self.is_elementary and bool(self.composition)

    def to_dict(self) -> dict:
        d = {"id": self.id, "gloss": self.gloss, "is_elementary": self.is_elementary}
        if self.composition is not None:
            d["composition"] = list(self.composition)
        return d

    @classmethod
    def from_dict(cls, data: dict, bci_av_id: int | None = None) -> "DictionaryEntry":
        entry_id = bci_av_id if bci_av_id is not None else int(data["id"])
        gloss = data.get("gloss", data.get("description", ""))
        is_elementary = bool(
            data.get("is_elementary", data.get("isElementary", data.get("isCharacter", False)))
        )
        composition = data.get("composition")
        if composition is not None:
            composition = tuple(normalize(list(composition)))
        return cls(
            id=entry_id,
            gloss=gloss,
            is_elementary=is_elementary,
            composition=composition,
        )


class SymbolDictionary:
    """Read-only lookup table of dictionary entries."""

    def __init__(self, entries: dict[int, DictionaryEntry] | None = None):
        self._entries = dict(entries or {})

    def get(self, bci_av_id: int) -> DictionaryEntry | None:
        return self._entries.get(bci_av_id)

    def __contains__(self, bci_av_id) -> bool:
        return bci_av_id in self._entries

    def __iter__(self) -> Iterator[DictionaryEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def ids(self) -> list[int]:
        return list(self._entries.keys())

    def gloss(self, bci_av_id: int) -> str | None:
        entry = self.get(bci_av_id)
        return entry.gloss if entry else None

    @classmethod
    def from_json(cls, data) -> "SymbolDictionary":
        """Build from an object keyed by string ID, or a list of records with "id"."""
        entries = {}
        if isinstance(data, dict):
            for key, value in data.items():
                entry = DictionaryEntry.from_dict(value, int(key))
                entries[entry.id] = entry
        elif isinstance(data, list):
            for value in data:
                entry = DictionaryEntry.from_dict(value)
                entries[entry.id] = entry
        else:
            raise ValueError(f"Expected a JSON object or array, got {type(data).__name__}")
        return cls(entries)
