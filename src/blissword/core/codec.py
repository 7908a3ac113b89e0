"""
Builder-string codec.

Two alphabets spell the same grammar; only the identifiers differ:

  Alphabet.BLISSARY   "B106/B12"        Blissary IDs, translated via the id map
  Alphabet.BCI_AV     "12335/8499"      BCI-AV IDs as plain numerals

Punctuation ("/", ";", "//", "K:<n>", "X<c>") is identical in both.

encode() raises UnknownIdentifier for an unmapped ID, but decode() returns []
for anything it cannot read, unknown identifiers included. Callers check for
an empty result.

For an ID whose own builder code is composite ("B106;B12"), decoding its
encoding yields the parts, not the ID; see make_composition().
"""

import logging
import re
from enum import Enum

from blissword.core.errors import UnknownIdentifier
from blissword.core.idmap import IdMap
from blissword.core.symbols import (
    Element, SymbolExpr, SLASH, SEMICOLON, WORD_SEPARATOR,
    as_sequence, is_identifier, is_kern, is_bliss_letter, is_well_formed,
)

logger = logging.getLogger(__name__)


class Alphabet(str, Enum):
    BLISSARY = "blissary"
    BCI_AV = "bci_av"


BLISSARY_ID_PATTERN = re.compile(r"B(\d+)")
NUMERAL_PATTERN = re.compile(r"\d+")
_BLISSARY_TOKEN = re.compile(r"B\d")


def detect_alphabet(text: str) -> Alphabet:
    """Blissary when the text holds any B<digits> token, plain numerals otherwise."""
    if _BLISSARY_TOKEN.search(text):
        return Alphabet.BLISSARY
    return Alphabet.BCI_AV


# === Encoding ===

def encode_identifier(bci_av_id: int, id_map: IdMap | None,
                      alphabet: Alphabet = Alphabet.BLISSARY) -> str:
    if alphabet == Alphabet.BCI_AV:
        return str(bci_av_id)
    spelling = id_map.spelling(bci_av_id) if id_map is not None else None
    if spelling is None:
        raise UnknownIdentifier(bci_av_id)
    return spelling


def encode(expr: SymbolExpr, id_map: IdMap | None = None,
           alphabet: Alphabet = Alphabet.BLISSARY) -> str:
    """
    Spell a SymbolExpr as a builder string.

    encode([12335, "/", 8499], id_map) -> "B106/B12"
    """
    parts = []
    for element in as_sequence(expr):
        if is_identifier(element):
            parts.append(encode_identifier(element, id_map, alphabet))
        else:
            parts.append(str(element))
    return "".join(parts)


# === Decoding ===

def _decode_identifier(token: str, alphabet: Alphabet, id_map: IdMap | None) -> int | None:
    if alphabet == Alphabet.BCI_AV:
        if NUMERAL_PATTERN.fullmatch(token):
            return int(token)
        return None

    match = BLISSARY_ID_PATTERN.fullmatch(token)
    if not match:
        return None
    if id_map is None:
        logger.warning("No id map loaded, cannot translate %s", token)
        return None
    bci_av_id = id_map.to_bci(int(match.group(1)))
    if bci_av_id is None:
        logger.debug("Blissary id %s has no BCI-AV mapping", token)
    return bci_av_id


def _decode_part(part: str, alphabet: Alphabet, id_map: IdMap | None) -> list[Element] | None:
    # kerning and bliss letters stay intact
    if is_kern(part) or is_bliss_letter(part):
        return [part]

    if SEMICOLON in part:
        decoded = []
        for i, piece in enumerate(part.split(SEMICOLON)):
            if i:
                decoded.append(SEMICOLON)
            ident = _decode_identifier(piece, alphabet, id_map)
            if ident is None:
                return None
            decoded.append(ident)
        return decoded

    ident = _decode_identifier(part, alphabet, id_map)
    if ident is None:
        return None
    return [ident]


def decode(text: str, alphabet: Alphabet = Alphabet.BLISSARY,
           id_map: IdMap | None = None) -> list[Element]:
    """
    Parse a builder string into a SymbolExpr list.

    decode("B106/B12", Alphabet.BLISSARY, id_map) -> [12335, "/", 8499]
    decode("13166;9011", Alphabet.BCI_AV)         -> [13166, ";", 9011]

    Returns [] when the text is malformed or names an unknown identifier.
    """
    text = text.strip()
    if not text:
        return []

    result: list[Element] = []
    for word in re.split(r"(//)", text):
        if word == WORD_SEPARATOR:
            result.append(WORD_SEPARATOR)
            continue
        for part in re.split(r"(/)", word):
            if part == SLASH:
                result.append(SLASH)
                continue
            decoded = _decode_part(part, alphabet, id_map)
            if decoded is None:
                logger.debug("Malformed builder token %r in %r", part, text)
                return []
            result.extend(decoded)

    if not is_well_formed(result):
        logger.debug("Builder string %r breaks the punctuation rules", text)
        return []
    return result


def make_composition(bci_av_id: int, id_map: IdMap) -> list[Element] | None:
    """
    Decode an ID's own builder code back into BCI-AV IDs.

    Useful for symbols whose builder code is itself composite, e.g. a code of
    "B220;B99". None when the ID is unmapped or its code does not decode.
    """
    spelling = id_map.spelling(bci_av_id)
    if spelling is None:
        return None
    return decode(spelling, Alphabet.BLISSARY, id_map) or None
