"""Tests for indicator and modifier classification."""

from blissword.core.roles import (
    is_indicator, is_modifier, role_of,
    find_indicators, find_superimposed_indicators, find_modifiers, has_modifier,
    find_classifier_from_left, indicator_insertion_point,
)


# === Classification ===

def test_indicator_ranges_are_closed():
    for bci_av_id in [8993, 9000, 9011, 24667, 24679, 28043, 28046]:
        assert is_indicator(bci_av_id)
    for bci_av_id in [8992, 9012, 24666, 24680, 28042, 28047]:
        assert not is_indicator(bci_av_id)


def test_indicator_list():
    assert is_indicator(24665)
    assert is_indicator(24807)
    assert is_indicator(25458)


def test_modifiers():
    assert is_modifier(14947)    # intensity
    assert is_modifier(15654)    # more
    assert is_modifier(21624)    # Blissname
    assert is_modifier(8510)
    assert is_modifier(8519)
    assert not is_modifier(8520)
    assert not is_modifier(17720)


def test_role_of():
    assert role_of(9011) == "indicator"
    assert role_of(14947) == "modifier"
    assert role_of(17720) is None


# === Positions ===

def test_find_indicators():
    assert find_indicators([15162, ";", 8993, "/", 15733]) == [2]
    assert find_indicators(8993) == []


def test_superimposed_indicators_need_semicolon():
    assert find_superimposed_indicators([15162, ";", 8993]) == [2]
    assert find_superimposed_indicators([15162, "/", 8993]) == []
    assert find_superimposed_indicators([8993, "/", 15162]) == []


def test_find_modifiers():
    assert find_modifiers([14947, "/", 17720, "/", 15654]) == [0, 4]
    assert has_modifier([17720, "/", 14947])
    assert not has_modifier(17720)


def test_find_classifier_from_left():
    assert find_classifier_from_left(17720) == 0
    assert find_classifier_from_left([17720, "/", 14947]) == 0
    assert find_classifier_from_left([14947, "/", 17720]) == 2
    assert find_classifier_from_left([14947, "/", 15654, "/", 17720]) == 4


def test_insertion_point_after_core():
    assert indicator_insertion_point([17720, "/", 17697]) == 3
    assert indicator_insertion_point(17720) == 1


def test_insertion_point_before_appended_modifier():
    assert indicator_insertion_point([17720, "/", 14947]) == 1
    assert indicator_insertion_point([14947, "/", 17720, "/", 14947]) == 3


def test_insertion_point_stops_at_word_separator():
    assert indicator_insertion_point([17720, "//", 12335]) == 1
