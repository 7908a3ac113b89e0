"""Tests for the builder-string codec."""

import pytest

from blissword.core.codec import (
    BLISSARY_ID_PATTERN, Alphabet, decode, detect_alphabet, encode, make_composition,
)
from blissword.core.errors import UnknownIdentifier


# === Decoding ===

def test_decode_blissary(id_map):
    assert decode("B106/B12", Alphabet.BLISSARY, id_map) == [12335, "/", 8499]


def test_decode_numerals():
    assert decode("13166;9011", Alphabet.BCI_AV) == [13166, ";", 9011]
    assert decode("12335", Alphabet.BCI_AV) == [12335]


def test_decode_words(id_map):
    assert decode("B106//B12", Alphabet.BLISSARY, id_map) == [12335, "//", 8499]


def test_decode_kerning_and_letters(id_map):
    assert decode("B106/K:-2/B12", Alphabet.BLISSARY, id_map) == [12335, "/", "K:-2", "/", 8499]
    assert decode("XA/B12", Alphabet.BLISSARY, id_map) == ["XA", "/", 8499]


def test_decode_superimposed(id_map):
    assert decode("B106;B1", Alphabet.BLISSARY, id_map) == [12335, ";", 8993]


def test_decode_unknown_id_is_empty(id_map):
    assert decode("B999", Alphabet.BLISSARY, id_map) == []
    assert decode("B106/B999", Alphabet.BLISSARY, id_map) == []


def test_decode_without_id_map_is_empty():
    assert decode("B106", Alphabet.BLISSARY) == []


@pytest.mark.parametrize("text", ["", "   ", "/B106", "B106/", "B106//", "B106;;B12", "B106/;B12", "cat", "B106 /B12"])
def test_decode_malformed_is_empty(id_map, text):
    assert decode(text, Alphabet.BLISSARY, id_map) == []


def test_decode_wrong_alphabet_is_empty(id_map):
    assert decode("B106", Alphabet.BCI_AV, id_map) == []
    assert decode("12335", Alphabet.BLISSARY, id_map) == []


# === Encoding ===

def test_encode_blissary(id_map):
    assert encode([12335, "/", 8499], id_map) == "B106/B12"
    assert encode(12335, id_map) == "B106"


def test_encode_numerals():
    assert encode([12335, ";", 9011, "//", 8499], alphabet=Alphabet.BCI_AV) == "12335;9011//8499"


def test_encode_keeps_punctuation(id_map):
    assert encode([12335, "/", "K:3", "/", "Xb"], id_map) == "B106/K:3/Xb"


def test_encode_unknown_raises(id_map):
    with pytest.raises(UnknownIdentifier) as exc:
        encode([12335, "/", 77777], id_map)
    assert exc.value.identifier == 77777


def test_round_trip(id_map):
    for expr in ([12335, "/", 8499], [13090, ";", 9011, "//", 12335], [8993, "/", "K:-1", "/", 8499]):
        assert decode(encode(expr, id_map), Alphabet.BLISSARY, id_map) == expr


def test_round_trip_every_mapped_id(id_map):
    for entry in id_map.entries:
        decoded = decode(encode(entry.bci_av_id, id_map), Alphabet.BLISSARY, id_map)
        if BLISSARY_ID_PATTERN.fullmatch(id_map.spelling(entry.bci_av_id)):
            assert decoded == [entry.bci_av_id]
        else:
            # composite builder code decodes to its parts
            assert decoded == make_composition(entry.bci_av_id, id_map)
            assert decoded != [entry.bci_av_id]


# === Helpers ===

def test_first_record_wins(id_map):
    assert id_map.spelling(12335) == "B106"
    assert id_map.to_bci(107) == 12335


def test_detect_alphabet():
    assert detect_alphabet("B106/B12") == Alphabet.BLISSARY
    assert detect_alphabet("12335/8499") == Alphabet.BCI_AV


def test_make_composition(id_map):
    assert make_composition(24000, id_map) == [12335, ";", 8499]
    assert make_composition(12335, id_map) == [12335]
    assert make_composition(55555, id_map) is None
