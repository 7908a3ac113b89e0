"""
Indicator and modifier classification of BCI-AV IDs.

Indicators sit on top of a symbol (superimposed with ";") and mark its
grammatical role: plural, past action, description and so on. Modifiers are
concatenated before or after a symbol ("/") and shift its meaning: much,
opposite, part of.
"""

from blissword.core.symbols import (
    SymbolExpr, SLASH, WORD_SEPARATOR, SEMICOLON,
    as_sequence, is_identifier,
)


# Closed ranges are (min, max) BCI-AV IDs.
INDICATOR_RANGES = [
    (8993, 9011),
    (24667, 24679),
    (28043, 28046),
]
INDICATOR_LIST = [24665, 24807, 25458]

MODIFIER_IDS = {
    # much, intensity, without, opposite, generalization, part of, ago, now, future
    "semantic": [14647, 14947, 15474, 15927, 14430, 15972, 12352, 15736, 17705],
    # more, most, belongs to
    "grammatical": [15654, 15661, 12663],
    # metaphor, Blissname, slang, coarse slang
    "signalling": [15460, 21624, 24961, 24962],
}
# index numerals 0 through 9
NUMERAL_RANGE = (8510, 8519)


def is_indicator(bci_av_id: int) -> bool:
    return (
        any(lo <= bci_av_id <= hi for lo, hi in INDICATOR_RANGES)
        or bci_av_id in INDICATOR_LIST
    )


def is_modifier(bci_av_id: int) -> bool:
    lo, hi = NUMERAL_RANGE
    return (
        bci_av_id in MODIFIER_IDS["semantic"]
        or bci_av_id in MODIFIER_IDS["grammatical"]
        or lo <= bci_av_id <= hi
        or bci_av_id in MODIFIER_IDS["signalling"]
    )


def role_of(bci_av_id: int) -> str | None:
    if is_indicator(bci_av_id):
        return "indicator"
    if is_modifier(bci_av_id):
        return "modifier"
    return None


def find_indicators(expr: SymbolExpr) -> list[int]:
    """Positions of indicator IDs. A bare single ID has no positions."""
    if isinstance(expr, int):
        return []
    return [i for i, e in enumerate(expr) if is_identifier(e) and is_indicator(e)]


def find_superimposed_indicators(expr: SymbolExpr) -> list[int]:
    """Positions of indicators that carry a ";" right before them."""
    if isinstance(expr, int):
        return []
    return [i for i in find_indicators(expr) if i > 0 and expr[i - 1] == SEMICOLON]


def find_modifiers(expr: SymbolExpr) -> list[int]:
    return [i for i, e in enumerate(as_sequence(expr)) if is_identifier(e) and is_modifier(e)]


def has_modifier(expr: SymbolExpr) -> bool:
    return bool(find_modifiers(expr))


def find_classifier_from_left(expr: SymbolExpr) -> int:
    """
    Index of the first non-modifier symbol, skipping prepended modifiers.

    Prepended modifiers come in (modifier, "/") pairs, so the scan steps by 2.
    A single ID gives 0.
    """
    if isinstance(expr, int):
        return 0
    rightmost = 0
    for index in range(0, len(expr), 2):
        item = expr[index]
        if is_identifier(item):
            if is_modifier(item):
                rightmost = index + 2
            else:
                break
    return rightmost


def indicator_insertion_point(expr: SymbolExpr) -> int:
    """
    Where ";" + indicator goes when a symbol has no indicator yet.

    The core symbol starts after the leading modifiers and runs until the
    first appended "/ modifier" or the end of the word.
    """
    seq = as_sequence(expr)
    start = find_classifier_from_left(seq)
    for i in range(start + 1, len(seq)):
        if seq[i] == WORD_SEPARATOR:
            return i
        if seq[i] == SLASH and i + 1 < len(seq):
            following = seq[i + 1]
            if is_identifier(following) and is_modifier(following):
                return i
    return len(seq)
