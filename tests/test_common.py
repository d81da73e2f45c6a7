"""Tests for the character-level shift engine."""

import string

import pytest

from caesarapi.classical.common import normalize_shift, shift_char, shift_text


class TestShiftChar:
    def test_uppercase(self):
        assert shift_char("A", 3) == "D"
        assert shift_char("X", 3) == "A"
        assert shift_char("Z", 1) == "A"

    def test_lowercase(self):
        assert shift_char("a", 3) == "d"
        assert shift_char("x", 3) == "a"
        assert shift_char("z", 1) == "a"

    @pytest.mark.parametrize("ch", ["!", " ", "0", ".", "é", "ß", "\n", "Ж"])
    def test_non_latin_letters_pass_through(self, ch):
        assert shift_char(ch, 3) == ch

    def test_shift_zero_and_25(self):
        assert shift_char("A", 0) == "A"
        assert shift_char("z", 0) == "z"
        assert shift_char("A", 25) == "Z"
        assert shift_char("b", 25) == "a"

    def test_negative_and_overflowing_shifts(self):
        assert shift_char("D", -3) == "A"
        assert shift_char("A", -1) == "Z"
        assert shift_char("A", 26) == "A"
        assert shift_char("A", 27) == "B"
        assert shift_char("A", 52) == "A"

    def test_normalization_is_periodic(self):
        for ch in "AMZamz":
            for s in range(-30, 30):
                assert shift_char(ch, s) == shift_char(ch, s + 26) == shift_char(ch, s - 26)

    def test_case_is_never_changed(self):
        for s in range(26):
            assert all(shift_char(c, s).isupper() for c in string.ascii_uppercase)
            assert all(shift_char(c, s).islower() for c in string.ascii_lowercase)


class TestNormalizeShift:
    @pytest.mark.parametrize("raw, expected", [(0, 0), (25, 25), (26, 0), (27, 1), (-3, 23), (-26, 0), (-27, 25)])
    def test_folds_into_range(self, raw, expected):
        assert normalize_shift(raw) == expected


class TestShiftText:
    def test_keeps_non_letters_in_place(self):
        text = "It's 12:30, time for tea! ~ naïve café"
        out = shift_text(text, 7)
        assert len(out) == len(text)
        for before, after in zip(text, out):
            if before not in string.ascii_letters:
                assert before == after

    def test_empty(self):
        assert shift_text("", 5) == ""
