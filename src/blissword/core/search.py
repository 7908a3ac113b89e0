"""
Gloss search over the symbol dictionary.

  find_by_gloss("cat", tables)      symbols whose gloss is or contains the word
  find_compositions_using(8993, ..) symbols built from a given ID
"""

import re
from dataclasses import dataclass

from blissword.core.decompose import decompose
from blissword.core.dictionary import DictionaryEntry, SymbolDictionary
from blissword.core.errors import CyclicComposition
from blissword.core.symbols import Element


@dataclass
class GlossMatch:
    bci_av_id: int
    gloss: str
    composition: list[Element] | None
    full_composition: list[Element] | None

    def to_dict(self) -> dict:
        return {
            "bci_av_id": self.bci_av_id,
            "gloss": self.gloss,
            "composition": self.composition,
            "full_composition": self.full_composition,
        }


def _full_composition(entry: DictionaryEntry, dictionary: SymbolDictionary) -> list[Element] | None:
    try:
        if entry.composition:
            return decompose(list(entry.composition), dictionary)
        return decompose(entry.id, dictionary)
    except CyclicComposition:
        return None


def find_by_gloss(label: str, dictionary: SymbolDictionary) -> list[GlossMatch]:
    """
    Entries whose gloss equals label or contains it as a whole word.

    full_composition is only set when it differs from what the entry already
    records.
    """
    label = label.strip()
    if not label:
        return []

    word = re.compile(r"\b" + re.escape(label) + r"\b")
    matches = []
    for entry in dictionary:
        if entry.gloss != label and not word.search(entry.gloss):
            continue
        full = _full_composition(entry, dictionary)
        recorded = list(entry.composition) if entry.composition else [entry.id]
        matches.append(GlossMatch(
            bci_av_id=entry.id,
            gloss=entry.gloss,
            composition=list(entry.composition) if entry.composition else None,
            full_composition=None if full == recorded else full,
        ))
    return matches


def find_compositions_using(bci_av_id: int, dictionary: SymbolDictionary) -> list[GlossMatch]:
    """The entry itself plus every entry whose full composition contains bci_av_id."""
    matches = []
    for entry in dictionary:
        if entry.id == bci_av_id:
            matches.append(GlossMatch(
                bci_av_id=entry.id,
                gloss=entry.gloss,
                composition=list(entry.composition) if entry.composition else None,
                full_composition=_full_composition(entry, dictionary) if entry.composition else None,
            ))
        elif entry.composition:
            full = _full_composition(entry, dictionary)
            if full and bci_av_id in full:
                matches.append(GlossMatch(
                    bci_av_id=entry.id,
                    gloss=entry.gloss,
                    composition=list(entry.composition),
                    full_composition=full,
                ))
    return matches
