"""
Composite identifiers: the symbol expression language.

A SymbolExpr is either a single BCI-AV ID or a flat list mixing IDs with
punctuation tokens:

  "/"        concatenate side by side
  ";"        superimpose the next element on the previous one (indicators)
  "//"       separate independent words
  "K:<n>"    kerning, adjust spacing by n units
  "X<c>"     spell with the bliss letter glyph for c

  12335                      a single symbol
  [12335, "/", 8499]         two symbols side by side
  [15162, ";", 8993]         15162 with the action indicator on top
  [17448, "//", 14430]       two words
"""

import re
from typing import Union


Element = Union[int, str]
SymbolExpr = Union[int, list[Element]]


# === Punctuation ===

SLASH = "/"
SEMICOLON = ";"
WORD_SEPARATOR = "//"

SEPARATORS = frozenset({SLASH, SEMICOLON, WORD_SEPARATOR})

KERN_PATTERN = re.compile(r"K:-?\d+")
BLISS_LETTER_PATTERN = re.compile(r"X[a-zA-Z]")


def is_kern(token) -> bool:
    return isinstance(token, str) and KERN_PATTERN.fullmatch(token) is not None


def is_bliss_letter(token) -> bool:
    return isinstance(token, str) and BLISS_LETTER_PATTERN.fullmatch(token) is not None


def is_separator(token) -> bool:
    return isinstance(token, str) and token in SEPARATORS


def is_punctuation(token) -> bool:
    return is_separator(token) or is_kern(token) or is_bliss_letter(token)


def is_identifier(token) -> bool:
    # bool is an int subclass; True/False are never identifiers
    return isinstance(token, int) and not isinstance(token, bool) and token >= 0


def kern(units: int) -> str:
    return f"K:{units}"


# === Shape helpers ===

def as_sequence(expr: SymbolExpr) -> list[Element]:
    """Return a fresh list form of expr. A single ID becomes [id]."""
    if isinstance(expr, int):
        return [expr]
    return list(expr)


def identifiers(expr: SymbolExpr) -> list[int]:
    return [e for e in as_sequence(expr) if is_identifier(e)]


def split_words(expr: SymbolExpr) -> list[list[Element]]:
    """Split on "//" into the independent words, dropping the separators."""
    words = [[]]
    for element in as_sequence(expr):
        if element == WORD_SEPARATOR:
            words.append([])
        else:
            words[-1].append(element)
    return words


def join_words(words: list[list[Element]]) -> list[Element]:
    joined = []
    for i, word in enumerate(words):
        if i:
            joined.append(WORD_SEPARATOR)
        joined.extend(word)
    return joined


def is_well_formed(expr: SymbolExpr) -> bool:
    """
    Check the punctuation invariant.

    Separators never touch each other or the ends of a word; every other
    element is an identifier, a kerning token or a bliss letter.
    """
    if isinstance(expr, int):
        return is_identifier(expr)

    seq = list(expr)
    if not seq:
        return True

    for word in split_words(seq):
        if not word:
            return False
        if is_separator(word[0]) or is_separator(word[-1]):
            return False
        previous = None
        for element in word:
            if is_separator(element):
                if is_separator(previous):
                    return False
            elif not (is_identifier(element) or is_kern(element) or is_bliss_letter(element)):
                return False
            previous = element
    return True


def normalize_element(element) -> Element:
    """Coerce a JSON element: digit strings become IDs, tokens stay strings."""
    if isinstance(element, str) and element.isdigit():
        return int(element)
    return element


def normalize(expr) -> SymbolExpr:
    """Coerce JSON input (ints, digit strings, tokens) into a SymbolExpr."""
    if isinstance(expr, (list, tuple)):
        return [normalize_element(e) for e in expr]
    return normalize_element(expr)


def format_symbol(expr: SymbolExpr) -> str:
    """Plain numeral rendering, e.g. "12335/8499"."""
    return "".join(str(e) for e in as_sequence(expr))
