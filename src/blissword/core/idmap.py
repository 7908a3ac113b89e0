"""
Blissary <-> BCI-AV identifier mapping.

Each record of the published map ties a Blissary ID to a BCI-AV ID and the
builder code the SVG builder consumes:

  {"blissaryId": 106, "bciAvId": 12335, "blissSvgBuilderCode": "B106"}
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class IdMapEntry:
    blissary_id: int
    bci_av_id: int
    builder_code: str

    def to_dict(self) -> dict:
        return {
            "blissaryId": self.blissary_id,
            "bciAvId": self.bci_av_id,
            "blissSvgBuilderCode": self.builder_code,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "IdMapEntry":
        blissary_id = data.get("blissaryId", data.get("externalAlphabetId"))
        bci_av_id = data.get("bciAvId", data.get("internalId"))
        builder_code = data.get("blissSvgBuilderCode", data.get("alphabetASpelling"))
        if blissary_id is None or bci_av_id is None:
            raise ValueError(f"Id map record missing ids: {data}")
        if builder_code is None:
            builder_code = f"B{blissary_id}"
        return cls(int(blissary_id), int(bci_av_id), str(builder_code))


class IdMap:
    def __init__(self, entries: list[IdMapEntry] | None = None):
        self.entries = list(entries or [])
        self._by_bci: dict[int, IdMapEntry] = {}
        self._by_blissary: dict[int, IdMapEntry] = {}
        # first record wins, same as a linear find()
        for entry in self.entries:
            self._by_bci.setdefault(entry.bci_av_id, entry)
            self._by_blissary.setdefault(entry.blissary_id, entry)

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, bci_av_id) -> bool:
        return bci_av_id in self._by_bci

    def for_bci(self, bci_av_id: int) -> IdMapEntry | None:
        return self._by_bci.get(bci_av_id)

    def for_blissary(self, blissary_id: int) -> IdMapEntry | None:
        return self._by_blissary.get(blissary_id)

    def spelling(self, bci_av_id: int) -> str | None:
        entry = self.for_bci(bci_av_id)
        return entry.builder_code if entry else None

    def to_bci(self, blissary_id: int) -> int | None:
        entry = self.for_blissary(blissary_id)
        return entry.bci_av_id if entry else None

    @classmethod
    def from_json(cls, data) -> "IdMap":
        if not isinstance(data, list):
            raise ValueError(f"Expected a JSON array, got {type(data).__name__}")
        return cls([IdMapEntry.from_dict(d) for d in data])
