"""Tests for the bijective sequence engine."""

from itertools import islice

import pytest

from identigenium.core.engine import SequenceCursor, rank, render, validate_alphabet
from identigenium.core.errors import InvalidAlphabetError, InvalidPositionError

ALPHABETS = ["a", "ab", "xyz", "0123456789", "abcdefghijklmnopqrstuvwxyz"]


class TestRender:
    def test_binary_alphabet(self):
        assert [render(p, "ab") for p in range(7)] == ["a", "b", "aa", "ab", "ba", "bb", "aaa"]

    def test_single_symbols_below_base(self):
        assert [render(p, "xyz") for p in range(3)] == ["x", "y", "z"]

    def test_super_digit_carry(self):
        # 3 singles + 9 pairs precede the first triple
        assert render(11, "xyz") == "zz"
        assert render(12, "xyz") == "xxx"

    def test_decimal_alphabet_has_no_zero_gap(self):
        assert render(9, "0123456789") == "9"
        assert render(10, "0123456789") == "00"
        assert render(109, "0123456789") == "99"
        assert render(110, "0123456789") == "000"

    def test_unary_alphabet(self):
        assert [render(p, "a") for p in range(4)] == ["a", "aa", "aaa", "aaaa"]

    def test_unary_alphabet_large_position(self):
        assert render(5000, "a") == "a" * 5001

    def test_large_position(self):
        position = 10**30
        assert rank(render(position, "ab"), "ab") == position

    def test_accepts_sequence_of_symbols(self):
        assert render(2, ["x", "y"]) == "xx"

    def test_negative_position_raises(self):
        with pytest.raises(InvalidPositionError):
            render(-1, "ab")

    def test_non_int_position_raises(self):
        with pytest.raises(TypeError):
            render(1.0, "ab")
        with pytest.raises(TypeError):
            render(True, "ab")

    def test_empty_alphabet_raises(self):
        with pytest.raises(InvalidAlphabetError):
            render(0, "")


class TestLengthBoundaries:
    @pytest.mark.parametrize("alphabet", ["ab", "xyz", "0123456789"])
    def test_each_length_runs_lowest_to_highest(self, alphabet):
        k = len(alphabet)
        start = 0
        for length in range(1, 5):
            assert render(start, alphabet) == alphabet[0] * length
            start += k**length
            assert render(start - 1, alphabet) == alphabet[-1] * length


class TestInjectivity:
    @pytest.mark.parametrize("alphabet", ALPHABETS)
    def test_first_thousand_are_distinct(self, alphabet):
        rendered = [render(p, alphabet) for p in range(1000)]
        assert len(set(rendered)) == 1000

    @pytest.mark.parametrize("alphabet", ALPHABETS)
    def test_length_major_then_alphabet_order(self, alphabet):
        order = {s: i for i, s in enumerate(alphabet)}

        def key(s):
            return (len(s), [order[c] for c in s])

        rendered = [render(p, alphabet) for p in range(1000)]
        assert rendered == sorted(rendered, key=key)


class TestRank:
    @pytest.mark.parametrize("alphabet", ALPHABETS)
    def test_inverse_of_render(self, alphabet):
        for p in range(300):
            assert rank(render(p, alphabet), alphabet) == p

    def test_known_values(self):
        assert rank("a", "ab") == 0
        assert rank("aa", "ab") == 2
        assert rank("aaa", "ab") == 6

    def test_unknown_symbol_raises(self):
        with pytest.raises(InvalidPositionError):
            rank("abc", "ab")

    def test_empty_identifier_raises(self):
        with pytest.raises(InvalidPositionError):
            rank("", "ab")


class TestValidateAlphabet:
    def test_preserves_order(self):
        assert validate_alphabet("zyx") == ("z", "y", "x")

    def test_rejects_duplicates(self):
        with pytest.raises(InvalidAlphabetError, match="duplicate"):
            validate_alphabet("abca")

    def test_rejects_multi_character_symbols(self):
        with pytest.raises(InvalidAlphabetError):
            validate_alphabet(["a", "bc"])

    def test_rejects_empty(self):
        with pytest.raises(InvalidAlphabetError):
            validate_alphabet([])

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            validate_alphabet("")


class TestSequenceCursor:
    @pytest.mark.parametrize("alphabet", ALPHABETS)
    def test_matches_render(self, alphabet):
        cursor = SequenceCursor(alphabet)
        assert list(islice(cursor, 500)) == [render(p, alphabet) for p in range(500)]

    @pytest.mark.parametrize("start", [0, 1, 2, 5, 6, 13, 254, 1000])
    def test_resumes_at_start(self, start):
        cursor = SequenceCursor("ab", start)
        expected = [render(p, "ab") for p in range(start, start + 20)]
        assert list(islice(cursor, 20)) == expected

    def test_tracks_position(self):
        cursor = SequenceCursor("ab", 3)
        assert cursor.position == 3
        next(cursor)
        next(cursor)
        assert cursor.position == 5

    def test_peek_does_not_advance(self):
        cursor = SequenceCursor("ab", 2)
        assert cursor.peek() == "aa"
        assert cursor.peek() == "aa"
        assert cursor.position == 2
        assert next(cursor) == "aa"

    def test_iter_returns_self(self):
        cursor = SequenceCursor("ab")
        assert iter(cursor) is cursor

    def test_unary_alphabet(self):
        cursor = SequenceCursor("a")
        assert list(islice(cursor, 4)) == ["a", "aa", "aaa", "aaaa"]

    def test_negative_start_raises(self):
        with pytest.raises(InvalidPositionError):
            SequenceCursor("ab", -3)
