"""Tests for decomposition into elementary symbols."""

import pytest

from blissword.core.decompose import decompose, find_cycles, is_decomposed
from blissword.core.errors import CyclicComposition


def test_entry_without_composition(dictionary):
    assert decompose(23409, dictionary) == [23409]


def test_elementary(dictionary):
    assert decompose(8993, dictionary) == [8993]


def test_composite(dictionary):
    assert decompose(12335, dictionary) == [13090, "/", 8993]


def test_nested(dictionary):
    assert decompose(20000, dictionary) == [13090, "/", 8993, "/", 14947]


def test_sequence_keeps_punctuation(dictionary):
    expr = [12335, ";", 9011, "/", "K:2", "//", 23409]
    assert decompose(expr, dictionary) == [13090, "/", 8993, ";", 9011, "/", "K:2", "//", 23409]


def test_missing_id(dictionary):
    assert decompose(99999, dictionary) is None
    assert decompose([12335, "/", 99999], dictionary) is None
    assert decompose(30000, dictionary) is None


def test_idempotent(dictionary):
    once = decompose(20000, dictionary)
    assert decompose(once, dictionary) == once
    assert is_decomposed(once, dictionary)
    assert not is_decomposed(20000, dictionary)


def test_does_not_mutate_input(dictionary):
    expr = [12335, "/", 8499]
    decompose(expr, dictionary)
    assert expr == [12335, "/", 8499]


def test_cycle_raises(cyclic_dictionary):
    with pytest.raises(CyclicComposition) as exc:
        decompose(1, cyclic_dictionary)
    assert exc.value.path == [1, 2, 1]


def test_self_cycle_raises(cyclic_dictionary):
    with pytest.raises(CyclicComposition):
        decompose([17720, "/", 3], cyclic_dictionary)


def test_find_cycles(cyclic_dictionary, dictionary):
    cycles = find_cycles(cyclic_dictionary)
    assert [1, 2, 1] in cycles
    assert [3, 3] in cycles
    assert len(cycles) == 2
    assert find_cycles(dictionary) == []
