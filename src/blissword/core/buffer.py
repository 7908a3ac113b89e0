"""
Caret edit buffer.

The buffer is an ordered list of composed symbols (payloads) and a caret:

  caret == -1     before the first item, nothing selected
  caret == i      items[i] is selected

Every operation is a pure function from one EditBuffer to the next. Inputs are
never mutated, so whoever holds a buffer value always sees a consistent
snapshot. Operations with no eligible target return the buffer unchanged; the
can_* predicates tell a caller whether an operation would do anything.

Modifier edits are recorded on the payload in the order they were applied and
undone last-in first-out. Indicator edits only look at the core symbol
between the recorded modifiers, and keep an IndicatorRecord so the gloss can
be put back without guessing.
"""

import logging
from dataclasses import dataclass, field, replace

from blissword.core.decompose import decompose
from blissword.core.dictionary import SymbolDictionary
from blissword.core.inflect import Inflector, SuffixInflector, strip_indicator_suffix
from blissword.core.roles import (
    is_indicator, find_superimposed_indicators, indicator_insertion_point,
)
from blissword.core.symbols import (
    Element, SymbolExpr, SLASH, SEMICOLON,
    as_sequence, join_words, normalize,
)

logger = logging.getLogger(__name__)


# === Records ===

@dataclass(frozen=True)
class ModifierRecord:
    symbol: tuple[Element, ...]
    gloss: str
    prepended: bool

    def __post_init__(self):
        object.__setattr__(self, "symbol", tuple(self.symbol))

    def to_dict(self) -> dict:
        return {"symbol": list(self.symbol), "gloss": self.gloss, "prepended": self.prepended}

    @classmethod
    def from_dict(cls, data: dict) -> "ModifierRecord":
        return cls(
            symbol=as_sequence(normalize(data["symbol"])),
            gloss=data.get("gloss", ""),
            prepended=bool(data.get("prepended", False)),
        )


@dataclass(frozen=True)
class IndicatorRecord:
    indicator_id: int
    word: str       # gloss fragment before the indicator was added
    inflected: str  # what it became

    def to_dict(self) -> dict:
        return {"indicator_id": self.indicator_id, "word": self.word, "inflected": self.inflected}

    @classmethod
    def from_dict(cls, data: dict) -> "IndicatorRecord":
        return cls(int(data["indicator_id"]), data["word"], data["inflected"])


@dataclass(frozen=True)
class Payload:
    id: str
    gloss: str
    symbol: tuple[Element, ...]
    modifiers: tuple[ModifierRecord, ...] = ()
    indicator: IndicatorRecord | None = None

    def __post_init__(self):
        object.__setattr__(self, "symbol", tuple(self.symbol))

    def core_span(self) -> tuple[int, int]:
        """
        (start, end) of the core symbol, inside the recorded modifiers.

        Prepended modifiers occupy the front as "modifier /" and appended
        ones the back as "/ modifier".
        """
        start = sum(len(m.symbol) + 1 for m in self.modifiers if m.prepended)
        end = len(self.symbol) - sum(len(m.symbol) + 1 for m in self.modifiers if not m.prepended)
        return start, max(start, end)

    def indicator_positions(self) -> list[int]:
        """Positions of superimposed indicators on the core symbol only."""
        start, end = self.core_span()
        return [start + i for i in find_superimposed_indicators(list(self.symbol[start:end]))]

    @property
    def has_indicator(self) -> bool:
        return bool(self.indicator_positions())

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "gloss": self.gloss,
            "symbol": list(self.symbol),
            "modifiers": [m.to_dict() for m in self.modifiers],
            "indicator": self.indicator.to_dict() if self.indicator else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Payload":
        indicator = data.get("indicator")
        return cls(
            id=str(data["id"]),
            gloss=data.get("gloss", ""),
            symbol=as_sequence(normalize(data["symbol"])),
            modifiers=tuple(ModifierRecord.from_dict(m) for m in data.get("modifiers", [])),
            indicator=IndicatorRecord.from_dict(indicator) if indicator else None,
        )


@dataclass(frozen=True)
class EditBuffer:
    items: tuple[Payload, ...] = field(default_factory=tuple)
    caret: int = -1

    def __len__(self) -> int:
        return len(self.items)

    def to_dict(self) -> dict:
        return {"items": [p.to_dict() for p in self.items], "caret": self.caret}

    @classmethod
    def from_dict(cls, data: dict) -> "EditBuffer":
        items = tuple(Payload.from_dict(p) for p in data.get("items", []))
        caret = int(data.get("caret", -1))
        caret = max(-1, min(caret, len(items) - 1))
        return cls(items, caret)


# === Helpers ===

def _provenance(item_id: str, source_id: str) -> str:
    return f"{item_id}:{source_id}" if source_id else item_id


def _join_gloss(*parts: str) -> str:
    return " ".join(p for p in parts if p)


def _remove_gloss_fragment(gloss: str, fragment: str, prepended: bool) -> str:
    if not fragment:
        return gloss
    if prepended:
        if gloss.startswith(fragment + " "):
            return gloss[len(fragment) + 1:]
        idx = gloss.find(fragment)
    else:
        if gloss.endswith(" " + fragment):
            return gloss[:-(len(fragment) + 1)]
        idx = gloss.rfind(fragment)
    if idx == -1:
        return gloss
    return " ".join((gloss[:idx] + gloss[idx + len(fragment):]).split())


def _replace_item(buffer: EditBuffer, index: int, item: Payload) -> EditBuffer:
    items = list(buffer.items)
    items[index] = item
    return EditBuffer(tuple(items), buffer.caret)


def _indicator_target(buffer: EditBuffer) -> int | None:
    """Caret item, or the most recent item when nothing is selected."""
    if not buffer.items:
        return None
    return buffer.caret if buffer.caret != -1 else len(buffer.items) - 1


def _modifier_target(buffer: EditBuffer) -> int | None:
    if not buffer.items or buffer.caret == -1:
        return None
    return buffer.caret


def selected(buffer: EditBuffer) -> Payload | None:
    if buffer.caret == -1:
        return None
    return buffer.items[buffer.caret]


def combined_symbol(buffer: EditBuffer) -> list[Element]:
    """All items as one multi-word SymbolExpr."""
    return join_words([list(p.symbol) for p in buffer.items])


# === Item edits ===

def bare_gloss(item: Payload, inflector: Inflector | None = None) -> str:
    """
    The item's gloss with its indicator's effect taken back out.

    The IndicatorRecord is used when it still matches the gloss, then a
    trailing "(plural)" style phrase, then the inflector.
    """
    record = item.indicator
    if record is not None and record.inflected in item.gloss:
        return item.gloss.replace(record.inflected, record.word, 1)

    stripped = strip_indicator_suffix(item.gloss)
    if stripped is not None:
        return stripped

    positions = item.indicator_positions()
    if not positions:
        return item.gloss
    inflector = inflector or SuffixInflector()
    return inflector.inflect(item.gloss, item.symbol[positions[0]], added=False)


def with_indicator(item: Payload, indicator_id: int, source_id: str = "",
                   inflector: Inflector | None = None) -> Payload:
    """Superimpose indicator_id on the item, replacing any indicator it has."""
    if not is_indicator(indicator_id):
        logger.debug("%s is not an indicator, ignoring", indicator_id)
        return item
    inflector = inflector or SuffixInflector()

    seq = list(item.symbol)
    positions = item.indicator_positions()

    if positions:
        pos = positions[0]
        if seq[pos] == indicator_id:
            return item
        seq[pos] = indicator_id
        record = item.indicator
        if record is not None and record.inflected in item.gloss:
            word = record.word
            inflected = inflector.inflect(word, indicator_id, added=True)
            gloss = item.gloss.replace(record.inflected, inflected, 1)
        else:
            word = bare_gloss(item, inflector)
            inflected = inflector.inflect(word, indicator_id, added=True)
            gloss = inflected
    else:
        start, end = item.core_span()
        point = start + indicator_insertion_point(seq[start:end])
        seq = seq[:point] + [SEMICOLON, indicator_id] + seq[point:]
        word = item.gloss
        inflected = inflector.inflect(word, indicator_id, added=True)
        gloss = inflected

    return replace(
        item,
        id=_provenance(item.id, source_id),
        gloss=gloss,
        symbol=seq,
        indicator=IndicatorRecord(indicator_id, word, inflected),
    )


def without_indicator(item: Payload, inflector: Inflector | None = None) -> Payload:
    positions = item.indicator_positions()
    if not positions:
        logger.debug("Item %s has no indicator to remove", item.id)
        return item
    pos = positions[0]
    seq = list(item.symbol[:pos - 1]) + list(item.symbol[pos + 1:])
    return replace(item, gloss=bare_gloss(item, inflector), symbol=seq, indicator=None)


def with_modifier(item: Payload, modifier: SymbolExpr, gloss: str, prepend: bool,
                  source_id: str = "") -> Payload:
    mod = as_sequence(normalize(modifier))
    seq = list(item.symbol)
    if prepend:
        seq = mod + [SLASH] + seq
        new_gloss = _join_gloss(gloss, item.gloss)
    else:
        seq = seq + [SLASH] + mod
        new_gloss = _join_gloss(item.gloss, gloss)

    return replace(
        item,
        id=_provenance(item.id, source_id),
        gloss=new_gloss,
        symbol=seq,
        modifiers=item.modifiers + (ModifierRecord(mod, gloss, prepend),),
    )


def without_last_modifier(item: Payload) -> Payload:
    if not item.modifiers:
        logger.debug("Item %s has no modifiers to remove", item.id)
        return item
    record = item.modifiers[-1]
    span = len(record.symbol) + 1
    seq = list(item.symbol)
    seq = seq[span:] if record.prepended else seq[:-span]
    return replace(
        item,
        gloss=_remove_gloss_fragment(item.gloss, record.gloss, record.prepended),
        symbol=seq,
        modifiers=item.modifiers[:-1],
    )


# === Buffer operations ===

def append(buffer: EditBuffer, payload_id: str, gloss: str, symbol: SymbolExpr,
           dictionary: SymbolDictionary | None = None) -> EditBuffer:
    """Add a new item at the end, decomposed when a dictionary is given, and select it."""
    symbol = normalize(symbol)
    composition = decompose(symbol, dictionary) if dictionary is not None else None
    payload = Payload(
        id=payload_id,
        gloss=gloss,
        symbol=composition if composition else as_sequence(symbol),
    )
    items = buffer.items + (payload,)
    return EditBuffer(items, len(items) - 1)


def move_caret_backward(buffer: EditBuffer) -> EditBuffer:
    if buffer.caret <= -1:
        logger.debug("Caret already before the first item")
        return buffer
    return EditBuffer(buffer.items, buffer.caret - 1)


def move_caret_forward(buffer: EditBuffer) -> EditBuffer:
    if buffer.caret >= len(buffer.items) - 1:
        logger.debug("Caret already on the last item")
        return buffer
    return EditBuffer(buffer.items, buffer.caret + 1)


def delete_at_caret(buffer: EditBuffer) -> EditBuffer:
    """Remove the selected item, or the last one when nothing is selected."""
    if not buffer.items:
        return buffer
    index = buffer.caret if buffer.caret != -1 else len(buffer.items) - 1
    items = buffer.items[:index] + buffer.items[index + 1:]
    if not items:
        return EditBuffer()
    return EditBuffer(items, min(index - 1, len(items) - 1))


def clear_all(buffer: EditBuffer | None = None) -> EditBuffer:
    return EditBuffer()


def add_or_replace_indicator(buffer: EditBuffer, indicator_id: int, source_id: str = "",
                             inflector: Inflector | None = None) -> EditBuffer:
    index = _indicator_target(buffer)
    if index is None:
        logger.debug("No item to add indicator %s to", indicator_id)
        return buffer
    item = buffer.items[index]
    return _replace_item(buffer, index, with_indicator(item, indicator_id, source_id, inflector))


def remove_indicator(buffer: EditBuffer, inflector: Inflector | None = None) -> EditBuffer:
    index = _indicator_target(buffer)
    if index is None:
        return buffer
    item = buffer.items[index]
    updated = without_indicator(item, inflector)
    if updated is item:
        return buffer
    return _replace_item(buffer, index, updated)


def add_modifier(buffer: EditBuffer, modifier: SymbolExpr, gloss: str, prepend: bool = False,
                 source_id: str = "") -> EditBuffer:
    index = _modifier_target(buffer)
    if index is None:
        logger.debug("No selected item to modify")
        return buffer
    item = buffer.items[index]
    return _replace_item(buffer, index, with_modifier(item, modifier, gloss, prepend, source_id))


def remove_last_modifier(buffer: EditBuffer) -> EditBuffer:
    index = _modifier_target(buffer)
    if index is None:
        return buffer
    item = buffer.items[index]
    updated = without_last_modifier(item)
    if updated is item:
        return buffer
    return _replace_item(buffer, index, updated)


# === Gating ===

def can_add_indicator(buffer: EditBuffer) -> bool:
    return len(buffer.items) > 0


def can_remove_indicator(buffer: EditBuffer) -> bool:
    index = _indicator_target(buffer)
    return index is not None and buffer.items[index].has_indicator


def can_add_modifier(buffer: EditBuffer) -> bool:
    return _modifier_target(buffer) is not None


def can_remove_modifier(buffer: EditBuffer) -> bool:
    index = _modifier_target(buffer)
    return index is not None and bool(buffer.items[index].modifiers)


def gating(buffer: EditBuffer) -> dict[str, bool]:
    return {
        "can_add_indicator": can_add_indicator(buffer),
        "can_remove_indicator": can_remove_indicator(buffer),
        "can_add_modifier": can_add_modifier(buffer),
        "can_remove_modifier": can_remove_modifier(buffer),
    }
