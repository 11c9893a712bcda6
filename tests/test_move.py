from __future__ import annotations

import pytest

from ataxx.move import EXTENDED_SIDE, PASS, Move, col_letter, row_digit, square_index


def test_col_letter_covers_playable_columns():
    assert [col_letter(i) for i in range(2, 9)] == list("abcdefg")


@pytest.mark.parametrize("index", [0, 1, 9, 10])
def test_col_letter_rejects_padding_columns(index):
    with pytest.raises(AssertionError):
        col_letter(index)


def test_square_index_corners():
    assert square_index("a", "1") == 2 * EXTENDED_SIDE + 2
    assert square_index("g", "7") == 8 * EXTENDED_SIDE + 8


def test_row_digit_and_col_letter_invert_square_index():
    for col in "abcdefg":
        for row in "1234567":
            sq = square_index(col, row)
            assert col_letter(sq % EXTENDED_SIDE) == col
            assert row_digit(sq) == row


def test_parse_and_format():
    m = Move.parse("a7-b6")
    assert str(m) == "a7-b6"
    assert m.is_extend and not m.is_jump
    assert Move.parse(" A7-C5 ").is_jump
    assert Move.parse("a7-d7").distance == 3
    assert Move.parse("-") is PASS
    assert str(PASS) == "-"
    assert PASS.is_pass and not PASS.is_extend and not PASS.is_jump


@pytest.mark.parametrize("text", ["a7b6", "h1-a1", "a0-a1", "a7-b6-c5", ""])
def test_parse_rejects_bad_text(text):
    with pytest.raises(ValueError):
        Move.parse(text)


def test_moves_compare_by_value():
    assert Move.move("a", "7", "b", "6") == Move.parse("a7-b6")
    assert Move.pass_move() == PASS
