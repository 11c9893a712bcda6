from __future__ import annotations

import pytest

from ataxx.board import JUMP_LIMIT, Board, IllegalMoveError, PieceColor
from ataxx.move import EXTENDED_SIDE, PASS, Move

RED, BLUE, EMPTY, BLOCKED = PieceColor.RED, PieceColor.BLUE, PieceColor.EMPTY, PieceColor.BLOCKED

# Red at a7 surrounded by blue on every square it could reach.
BOXED_IN = [
    "rbb----",
    "bbb----",
    "bbb----",
    "-------",
    "-------",
    "-------",
    "-------",
]

TIE_FULL = [
    "rrrrrrr",
    "rrrrrrr",
    "rrrrrrr",
    "rrrXbbb",
    "bbbbbbb",
    "bbbbbbb",
    "bbbbbbb",
]

RED_FULL = [
    "rrrrrrr",
    "rrrrrrr",
    "rrrrrrr",
    "rrrrrrr",
    "bbbbbbb",
    "bbbbbbb",
    "bbbbbbb",
]


def mv(text: str) -> Move:
    return Move.parse(text)


def test_initial_position():
    b = Board()
    assert b.get_at("a", "7") is RED and b.get_at("g", "1") is RED
    assert b.get_at("a", "1") is BLUE and b.get_at("g", "7") is BLUE
    assert b.red_pieces() == 2 and b.blue_pieces() == 2
    assert b.whose_move is RED
    assert b.get_winner() is None
    assert b.rows()[0] == "r-----b"
    assert b.rows()[6] == "b-----r"


def test_padding_cells_are_blocked():
    b = Board()
    assert b.get(0) is BLOCKED
    assert b.get(EXTENDED_SIDE * EXTENDED_SIDE - 1) is BLOCKED


def test_legality():
    b = Board()
    assert b.legal_move(mv("a7-b6"))
    assert b.legal_move(mv("a7-c5"))
    assert not b.legal_move(mv("a7-d7"))
    assert not b.legal_move(mv("a1-b2"))  # blue piece, red to move
    assert not b.legal_move(mv("b6-c6"))  # empty source
    assert not b.legal_move(PASS)


def test_clone_keeps_source():
    b = Board()
    b.make_move(mv("a7-b6"))
    assert b.get_at("a", "7") is RED and b.get_at("b", "6") is RED
    assert b.red_pieces() == 3
    assert b.whose_move is BLUE
    assert b.num_jumps == 0


def test_jump_moves_piece_and_counts():
    b = Board()
    b.make_move(mv("a7-c5"))
    assert b.get_at("a", "7") is EMPTY and b.get_at("c", "5") is RED
    assert b.red_pieces() == 2
    assert b.num_jumps == 1
    b.make_move(mv("a1-b2"))
    assert b.num_jumps == 0


def test_move_converts_adjacent_enemies():
    b = Board.from_layout([
        "-------",
        "-------",
        "----b--",
        "---r---",
        "-------",
        "-------",
        "------b",
    ])
    b.make_move(mv("d4-d5"))
    assert b.get_at("e", "5") is RED
    assert b.get_at("g", "1") is BLUE
    assert b.red_pieces() == 3 and b.blue_pieces() == 1


def test_illegal_move_raises():
    b = Board()
    with pytest.raises(IllegalMoveError):
        b.make_move(mv("a1-b2"))


def test_pass_only_when_blocked_in():
    b = Board.from_layout(BOXED_IN)
    assert not b.can_move(RED)
    assert b.can_move(BLUE)
    assert b.legal_move(PASS)
    assert b.get_winner() is None
    b.make_move(PASS)
    assert b.whose_move is BLUE


def test_winner_on_full_board():
    assert Board.from_layout(RED_FULL).get_winner() is RED
    flipped = [row.replace("r", "x").replace("b", "r").replace("x", "b") for row in RED_FULL]
    assert Board.from_layout(flipped).get_winner() is BLUE


def test_tie_on_full_board():
    b = Board.from_layout(TIE_FULL)
    assert b.red_pieces() == b.blue_pieces() == 24
    assert b.get_winner() is EMPTY


def test_jump_limit_ends_game():
    layout = [
        "r-----b",
        "-------",
        "-------",
        "---r---",
        "-------",
        "-------",
        "b-----r",
    ]
    assert Board.from_layout(layout, num_jumps=JUMP_LIMIT - 1).get_winner() is None
    assert Board.from_layout(layout, num_jumps=JUMP_LIMIT).get_winner() is RED


def test_set_block_mirrors():
    b = Board()
    b.set_block("c", "3")
    for col, row in (("c", "3"), ("e", "3"), ("c", "5"), ("e", "5")):
        assert b.get_at(col, row) is BLOCKED
    assert not b.legal_move(mv("g1-e3"))
    with pytest.raises(IllegalMoveError):
        b.set_block("a", "7")


def test_copy_is_independent():
    b = Board()
    c = b.copy()
    c.make_move(mv("a7-b6"))
    assert b.get_at("b", "6") is EMPTY
    assert b.red_pieces() == 2
    assert b.whose_move is RED
    assert c.red_pieces() == 3


def test_from_layout_validates():
    with pytest.raises(ValueError):
        Board.from_layout(["-------"] * 6)
    with pytest.raises(ValueError):
        Board.from_layout(["-------"] * 6 + ["------z"])


def test_str_renders_ranks():
    text = str(Board())
    assert text.splitlines()[0] == "r - - - - - b"
    assert len(text.splitlines()) == 7
