"""
Decomposition: expand a composite symbol into its elementary parts.

  decompose(12335) -> [13090, "/", 8993]        when 12335 is composite
  decompose(23409) -> [23409]                   no composition recorded
  decompose(99999) -> None                      not in the dictionary

Punctuation passes through in place. The dictionary is external data, so the
expansion tracks the IDs on the current path and raises CyclicComposition
instead of recursing forever.
"""

import logging

from blissword.core.dictionary import SymbolDictionary
from blissword.core.errors import CyclicComposition
from blissword.core.symbols import Element, SymbolExpr, as_sequence, is_identifier

logger = logging.getLogger(__name__)


def _expand(bci_av_id: int, dictionary: SymbolDictionary, path: list[int]) -> list[Element] | None:
    if bci_av_id in path:
        raise CyclicComposition(path + [bci_av_id])

    entry = dictionary.get(bci_av_id)
    if entry is None:
        logger.debug("No dictionary entry for %s", bci_av_id)
        return None
    if entry.is_elementary or not entry.composition:
        return [bci_av_id]

    return _expand_sequence(list(entry.composition), dictionary, path + [bci_av_id])


def _expand_sequence(seq: list[Element], dictionary: SymbolDictionary,
                     path: list[int]) -> list[Element] | None:
    result: list[Element] = []
    for element in seq:
        if is_identifier(element):
            parts = _expand(element, dictionary, path)
            if parts is None:
                return None
            result.extend(parts)
        else:
            result.append(element)
    return result


def decompose(expr: SymbolExpr, dictionary: SymbolDictionary) -> list[Element] | None:
    """Fully expand expr. None if any identifier is missing from the dictionary."""
    if isinstance(expr, int):
        return _expand(expr, dictionary, [])
    return _expand_sequence(as_sequence(expr), dictionary, [])


def is_decomposed(expr: SymbolExpr, dictionary: SymbolDictionary) -> bool:
    """True when every identifier is elementary or has no composition."""
    for element in as_sequence(expr):
        if not is_identifier(element):
            continue
        entry = dictionary.get(element)
        if entry is None or entry.is_composite:
            return False
    return True


def find_cycles(dictionary: SymbolDictionary) -> list[list[int]]:
    """Every composition cycle reachable from a dictionary entry."""
    cycles = []
    seen = set()
    for entry in dictionary:
        try:
            decompose(entry.id, dictionary)
        except CyclicComposition as e:
            key = frozenset(e.path)
            if key not in seen:
                seen.add(key)
                cycles.append(e.path)
    return cycles
