"""
Tests for keyboard sequence detection.
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from crackpath.errors import LayoutConsistencyError
from crackpath.key_sequence import (
    DIAGONAL, HORIZONTAL, REPEATED, KeySequenceFinder, upper_case_factor,
)
from crackpath.keyboard import ENGLISH_QWERTY, RUSSIAN_JCUKEN, Direction, Key, KeyboardLayout
from crackpath.results import PasswordResults

HORIZ_3_AND_4 = 78 + 70
HORIZ_5_PLUS = 426 - HORIZ_3_AND_4


class ThreeKeyLayout(KeyboardLayout):
    """One row "abc" with hand-picked counts."""

    def __init__(self):
        a, b, c = Key("a", "A"), Key("b", "B"), Key("c", "C")
        a.neighbors[Direction.RIGHT] = b
        b.neighbors[Direction.LEFT] = a
        b.neighbors[Direction.RIGHT] = c
        c.neighbors[Direction.LEFT] = b
        self._keyboard = {k: key for key in (a, b, c) for k in (key.lower, key.upper)}

    def generate_keyboard(self):
        return self._keyboard

    def character_key_count(self):
        return 3

    def diagonal_combo_total(self):
        return 0

    def horizontal_combo_size(self, length):
        return 6 if length == 3 else 0

    def horizontal_combo_total(self):
        return 6

    def name(self):
        return "three keys"


class CorruptLayout(ThreeKeyLayout):
    """Registers "x" on a key that does not carry it."""

    def __init__(self):
        super().__init__()
        self._keyboard["x"] = self._keyboard["a"]


def find(password, layout=ENGLISH_QWERTY):
    results = PasswordResults(password)
    KeySequenceFinder(layout).analyze(results)
    return results.matches()


def spans(patterns):
    return sorted((p.start_index, p.length) for p in patterns)


class TestUpperCaseFactor:
    """Test the shift placement count."""

    def test_minority_upper(self):
        assert upper_case_factor(5, 2) == 20

    def test_majority_upper_counts_lower_instead(self):
        assert upper_case_factor(4, 3) == 4

    @pytest.mark.parametrize("length", [1, 3, 7, 20])
    def test_no_upper(self, length):
        assert upper_case_factor(length, 0) == 1

    def test_all_upper(self):
        assert upper_case_factor(6, 6) == 1

    def test_is_not_binomial(self):
        assert upper_case_factor(6, 3) == 6 * 5 * 4


class TestKeySequenceFinder:
    """Test sequence detection and pricing."""

    def test_three_key_row(self):
        patterns = find("abc", ThreeKeyLayout())
        assert len(patterns) == 1
        pattern = patterns[0]
        assert (pattern.start_index, pattern.length) == (0, 3)
        assert pattern.kind == HORIZONTAL
        assert pattern.search_space == 6
        assert pattern.matched_text == "abc"
        assert pattern.classification == "three keys"

    def test_every_window_of_a_run_is_reported(self):
        patterns = find("qwer")
        assert spans(patterns) == [(0, 3), (0, 4), (1, 3)]
        assert all(p.kind == HORIZONTAL for p in patterns)
        assert all(p.search_space == HORIZ_3_AND_4 for p in patterns)
        assert {p.matched_text for p in patterns} == {"qwe", "qwer", "wer"}

    def test_long_horizontal_priced_separately(self):
        patterns = {(p.start_index, p.length): p for p in find("qwerty")}
        assert len(patterns) == 10
        assert patterns[(0, 4)].search_space == HORIZ_3_AND_4
        assert patterns[(0, 5)].search_space == HORIZ_5_PLUS
        assert patterns[(0, 6)].search_space == HORIZ_5_PLUS
        assert patterns[(0, 6)].description == "6 Keyboard Horizontal Characters"

    def test_leftward_run(self):
        patterns = find("poi")
        assert spans(patterns) == [(0, 3)]
        assert patterns[0].kind == HORIZONTAL

    def test_diagonal(self):
        patterns = find("1qaz")
        assert spans(patterns) == [(0, 3), (0, 4), (1, 3)]
        assert all(p.kind == DIAGONAL for p in patterns)
        assert all(p.search_space == 130 for p in patterns)
        assert "LOWER_RIGHT" in patterns[0].description

    def test_repeated_key(self):
        patterns = find("aaaa")
        assert spans(patterns) == [(0, 3), (0, 4), (1, 3)]
        assert all(p.kind == REPEATED for p in patterns)
        # 47 keys times (password length - 2)
        assert all(p.search_space == 47 * 2 for p in patterns)

    def test_repeat_cost_scales_with_password_length(self):
        patterns = [p for p in find("zzz12") if p.kind == REPEATED]
        assert len(patterns) == 1
        assert patterns[0].search_space == 47 * 3

    def test_all_upper(self):
        patterns = find("QWE")
        assert len(patterns) == 1
        assert patterns[0].search_space == HORIZ_3_AND_4
        assert patterns[0].description.endswith(", Upper Case")

    def test_mixed_case(self):
        patterns = find("qWe")
        assert len(patterns) == 1
        assert patterns[0].search_space == HORIZ_3_AND_4 * 2 * 3
        assert "with 1 Upper Case letter(s)" in patterns[0].description

    def test_shifted_symbols_count_as_upper(self):
        patterns = find("!@#")
        assert len(patterns) == 1
        assert patterns[0].search_space == HORIZ_3_AND_4
        assert patterns[0].description.endswith(", Upper Case")

    def test_mixed_case_repeat(self):
        patterns = find("aAa")
        assert len(patterns) == 1
        assert patterns[0].kind == REPEATED
        assert patterns[0].search_space == 47 * 1 * 2 * 3

    def test_unknown_character_breaks_run(self):
        assert find("qw€er") == ()
        assert spans(find("qw€ert")) == [(3, 3)]

    def test_change_of_direction_starts_new_run(self):
        patterns = find("qwewq")
        assert spans(patterns) == [(0, 3), (2, 3)]

    def test_no_sequences(self):
        assert find("abc") == ()
        assert find("") == ()
        assert find("q") == ()
        assert find("qw") == ()

    def test_russian_layout(self):
        patterns = find("йцук", RUSSIAN_JCUKEN)
        assert spans(patterns) == [(0, 3), (0, 4), (1, 3)]
        assert all(p.classification == "Russian" for p in patterns)
        assert find("йцук") == ()

    def test_corrupt_layout_is_fatal(self):
        with pytest.raises(LayoutConsistencyError):
            find("xab", CorruptLayout())

    def test_shared_between_threads(self):
        """One finder serves many passwords concurrently."""
        finder = KeySequenceFinder(ENGLISH_QWERTY)
        passwords = ["qwerty", "1qaz2wsx", "aaaa", "zxcvbnm", "p@ssw0rd"] * 20

        def run(password):
            results = PasswordResults(password)
            finder.analyze(results)
            return spans(results.matches())

        with ThreadPoolExecutor(max_workers=8) as pool:
            concurrent = list(pool.map(run, passwords))
        assert concurrent == [run(p) for p in passwords]
