import dataclasses

import pytest

from hunkforge.models import Block, Hunk


def test_block_freezes_lines_into_tuple():
    block = Block(start=3, lines=[b"a\n", b"b\n"])
    assert block.lines == (b"a\n", b"b\n")
    assert len(block) == 2
    assert not block.is_empty
    assert block.trailing_newline


def test_block_defaults_to_empty():
    block = Block(start=0)
    assert block.is_empty
    assert len(block) == 0


def test_block_is_immutable():
    block = Block(start=1, lines=[b"a\n"])
    with pytest.raises(dataclasses.FrozenInstanceError):
        block.start = 2


def test_block_moved_shares_lines():
    block = Block(start=4, lines=[b"a\n"], trailing_newline=False)
    moved = block.moved(-3)
    assert moved.start == 1
    assert moved.lines is block.lines
    assert moved.trailing_newline is False
    assert block.start == 4


def test_hunk_shape_properties():
    insertion = Hunk(removed=Block(2), added=Block(3, [b"a\n", b"b\n"]))
    deletion = Hunk(removed=Block(2, [b"a\n"]), added=Block(1))
    replacement = Hunk(removed=Block(2, [b"a\n", b"b\n", b"c\n"]), added=Block(2, [b"d\n"]))

    assert insertion.is_insertion and not insertion.is_deletion
    assert deletion.is_deletion and not deletion.is_insertion
    assert not replacement.is_insertion and not replacement.is_deletion
    assert insertion.delta == 2
    assert deletion.delta == -1
    assert replacement.delta == -2


def test_hunk_shifted_moves_both_sides():
    hunk = Hunk(removed=Block(5, [b"a\n"]), added=Block(6, [b"b\n"]))
    shifted = hunk.shifted(2)
    assert (shifted.removed.start, shifted.added.start) == (7, 8)
    assert shifted.added.lines is hunk.added.lines
    assert hunk.removed.start == 5


def test_hunks_compare_by_value():
    a = Hunk(removed=Block(1, [b"a\n"]), added=Block(1, [b"b\n"]))
    b = Hunk(removed=Block(1, (b"a\n",)), added=Block(1, [b"b\n"]))
    assert a == b
    assert a is not b
